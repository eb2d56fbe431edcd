"""Poker Equity CLI: Typer-based command line interface."""

import json
import math
from typing import Any, List, Optional

import typer
from rich.console import Console
from rich.markup import escape

app = typer.Typer(
    name="poker-equity",
    help="Hold'em and Omaha/8 hand evaluator and equity simulator",
    no_args_is_help=True,
)
console = Console()


def _json_safe(value: Any) -> Any:
    """Replace infinite floats, which JSON cannot carry, with the string 'inf'."""
    if isinstance(value, float) and math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_json_safe(v) for v in value]
    return value


def _print_json(data: Any) -> None:
    typer.echo(json.dumps(_json_safe(data), indent=2))


def _fail(error: Exception) -> None:
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(1)


def _parse(text: str):
    from poker_equity.models.card import parse_cards
    return parse_cards(text)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level",
                                            help="Logging level (DEBUG, INFO, WARNING...)"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also log to this file"),
):
    """Configure logging before running a command."""
    from poker_equity.logging_config import configure_logging
    configure_logging(log_level, log_file)


@app.command()
def simulate_holdem(
    board: str = typer.Option("", "--board", "-b", help="Known board cards, e.g. 'KS 7D AH'"),
    hole: str = typer.Option("", "--hole", help="Your hole cards, e.g. '9D 7C'"),
    players: Optional[int] = typer.Option(None, "--players", "-p", help="Players including you"),
    hands: Optional[int] = typer.Option(None, "--hands", "-n", help="Hands to simulate"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for a reproducible run"),
    as_json: bool = typer.Option(False, "--json", help="Print raw statistics as JSON"),
):
    """Estimate Texas Hold'em equity for your hand."""
    from poker_equity import config
    from poker_equity.errors import PokerError
    from poker_equity.formatters.table import TableFormatter
    from poker_equity.simulation.engine import simulate_holdem as run

    try:
        sim = run(
            _parse(board), _parse(hole),
            config.DEFAULT_PLAYERS if players is None else players,
            config.DEFAULT_HANDS_TO_PLAY if hands is None else hands,
            config.make_random(seed),
        )
    except PokerError as e:
        _fail(e)

    if as_json:
        _print_json(sim.to_dict())
        return
    TableFormatter(console).print_simulator(sim)


@app.command()
def simulate_omaha8(
    board: str = typer.Option("", "--board", "-b", help="Known board cards"),
    hole: str = typer.Option("", "--hole", help="Your hole cards (up to four)"),
    players: Optional[int] = typer.Option(None, "--players", "-p", help="Players including you"),
    hands: Optional[int] = typer.Option(None, "--hands", "-n", help="Hands to simulate"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for a reproducible run"),
    as_json: bool = typer.Option(False, "--json", help="Print raw statistics as JSON"),
):
    """Estimate Omaha Hi/Lo (eight or better) equity for your hand."""
    from poker_equity import config
    from poker_equity.errors import PokerError
    from poker_equity.formatters.table import TableFormatter
    from poker_equity.simulation.engine import simulate_omaha8 as run

    try:
        sim = run(
            _parse(board), _parse(hole),
            config.DEFAULT_PLAYERS if players is None else players,
            config.DEFAULT_HANDS_TO_PLAY if hands is None else hands,
            config.make_random(seed),
        )
    except PokerError as e:
        _fail(e)

    if as_json:
        _print_json(sim.to_dict())
        return
    TableFormatter(console).print_omaha8_simulator(sim)


@app.command()
def starting_pair(
    rank1: str = typer.Argument(..., help="First rank, e.g. A"),
    rank2: str = typer.Argument(..., help="Second rank, e.g. K"),
    suited: bool = typer.Option(False, "--suited", "-s", help="Both cards of one suit"),
    players: Optional[int] = typer.Option(None, "--players", "-p", help="Players including you"),
    hands: Optional[int] = typer.Option(None, "--hands", "-n", help="Hands to simulate"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for a reproducible run"),
    as_json: bool = typer.Option(False, "--json", help="Print raw statistics as JSON"),
):
    """Pre-flop equity of a starting hand such as 'A K --suited'."""
    from poker_equity import config
    from poker_equity.errors import PokerError
    from poker_equity.formatters.table import TableFormatter
    from poker_equity.models.card import Rank
    from poker_equity.simulation.engine import StartingPair

    try:
        pair = StartingPair(Rank.parse(rank1), Rank.parse(rank2), suited)
        sim = pair.run_simulation(
            config.DEFAULT_PLAYERS if players is None else players,
            config.DEFAULT_HANDS_TO_PLAY if hands is None else hands,
            config.make_random(seed),
        )
    except PokerError as e:
        _fail(e)

    if as_json:
        _print_json(sim.to_dict())
        return
    TableFormatter(console).print_simulator(sim, title=f"Starting Hand {pair}")


@app.command()
def play_holdem(
    players: Optional[int] = typer.Option(None, "--players", "-p", help="Players at the table"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for a reproducible deal"),
):
    """Deal one random Hold'em hand and show the showdown."""
    from poker_equity import config
    from poker_equity.errors import PokerError
    from poker_equity.formatters.table import TableFormatter
    from poker_equity.simulation.holdem import play_holdem as play

    try:
        players = config.DEFAULT_PLAYERS if players is None else players
        board, player_cards, outcomes = play(players, config.make_random(seed))
    except PokerError as e:
        _fail(e)

    TableFormatter(console).print_outcomes(board, player_cards, outcomes)


@app.command()
def play_omaha8(
    players: Optional[int] = typer.Option(None, "--players", "-p", help="Players at the table"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for a reproducible deal"),
):
    """Deal one random Omaha/8 hand and show the showdown."""
    from poker_equity import config
    from poker_equity.errors import PokerError
    from poker_equity.formatters.table import TableFormatter
    from poker_equity.simulation.omaha8 import play_omaha8 as play

    try:
        players = config.DEFAULT_PLAYERS if players is None else players
        board, player_cards, outcomes = play(players, config.make_random(seed))
    except PokerError as e:
        _fail(e)

    TableFormatter(console).print_omaha8_outcomes(board, player_cards, outcomes)


@app.command()
def classify(
    cards: List[str] = typer.Argument(..., help="Exactly five cards, e.g. AS KS QS JS 10S"),
    low: bool = typer.Option(False, "--low", help="Classify for ace-to-five lowball"),
    as_json: bool = typer.Option(False, "--json", help="Print the level as JSON"),
):
    """Classify a five-card hand."""
    from poker_equity.errors import PokerError
    from poker_equity.formatters.table import TableFormatter
    from poker_equity.simulation.evaluator import HandEvaluator

    try:
        hand = _parse(" ".join(cards))
        level = HandEvaluator.classify_low(hand) if low else HandEvaluator.classify(hand)
    except PokerError as e:
        _fail(e)

    if as_json:
        _print_json(level.to_dict())
        return
    TableFormatter(console).print_level(level, hand)


if __name__ == "__main__":
    app()
