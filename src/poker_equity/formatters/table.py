"""Rich table formatting for terminal output."""

import math
from typing import List, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from poker_equity.models.card import Card
from poker_equity.models.hand_level import HandClass, HandLevel
from poker_equity.models.outcome import Omaha8PlayerOutcome, PlayerOutcome
from poker_equity.simulation.simulator import Omaha8Simulator, Simulator


def _pct(count: float, total: int) -> str:
    if total == 0:
        return "-"
    return f"{100.0 * count / total:.2f}%"


def _cards(cards: Sequence[Card]) -> str:
    return " ".join(c.pretty() for c in cards)


def _break_even(value: float) -> str:
    return "∞" if math.isinf(value) else f"{value:.3f}"


class TableFormatter:
    """Format simulation results as Rich tables for terminal display."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def print_simulator(self, sim: Simulator, title: str = "Hold'em Simulation") -> None:
        """Print the summary and per-class tables of a Simulator."""
        n = sim.hand_count
        summary = Table(title=f"{title}: {sim.players} players, {n} hands")
        summary.add_column("Metric", style="cyan")
        summary.add_column("Value", justify="right", style="green")
        summary.add_row("Win %", _pct(sim.win_count, n))
        summary.add_row("Pots won", f"{sim.pots_won:.2f}")
        summary.add_row("Best opponent win %", _pct(sim.best_opponent_win_count, n))
        summary.add_row("Random opponent win %", _pct(sim.random_opponent_win_count, n))
        summary.add_row("Joint win %", _pct(sim.joint_win_count, n))
        if n:
            summary.add_row("Pot odds break-even", _break_even(sim.pot_odds_break_even()))
        summary.add_row("Best hand", str(sim.best_hand))
        summary.add_row("Best opponent hand", str(sim.best_opp_hand))
        self.console.print(summary)

        table = Table(title="By Hand Class")
        table.add_column("Class", style="cyan")
        table.add_column("Ours", justify="right")
        table.add_column("Won", justify="right")
        table.add_column("Best Opp", justify="right")
        table.add_column("Best Opp Won", justify="right")
        table.add_column("Random Opp", justify="right")
        table.add_column("Our Best")

        for hc in reversed(HandClass):
            if sim.our_class_counts[hc] == 0 and sim.best_opponent_class_counts[hc] == 0:
                continue
            best = str(sim.class_best_hands[hc]) if sim.our_class_counts[hc] else ""
            table.add_row(
                hc.label,
                _pct(sim.our_class_counts[hc], n),
                _pct(sim.class_win_counts[hc], n),
                _pct(sim.best_opponent_class_counts[hc], n),
                _pct(sim.class_best_opp_win_counts[hc], n),
                _pct(sim.random_opponent_class_counts[hc], n),
                best,
            )

        self.console.print(table)

    def print_omaha8_simulator(self, sim: Omaha8Simulator) -> None:
        """Print the high-side tables followed by the low-side totals."""
        self.print_simulator(sim.high, title="Omaha/8 Simulation (high)")

        n = sim.low.hand_count
        table = Table(title="Low")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right", style="green")
        table.add_row("Low win %", _pct(sim.low.win_count, n))
        table.add_row("Low pots won", f"{sim.low.pots_won:.2f}")
        table.add_row("Total pots won", f"{sim.pots_won():.2f}")
        if sim.high.hand_count:
            table.add_row("Pot odds break-even", _break_even(sim.pot_odds_break_even()))
        self.console.print(table)

    def print_level(self, level: HandLevel, cards: Sequence[Card] = ()) -> None:
        """Print a single classified hand."""
        body = level.describe()
        if cards:
            body += f"\n{_cards(cards)}"
        self.console.print(Panel(body, title=level.hand_class.label, border_style="cyan"))

    def print_outcomes(self, board: Sequence[Card], player_cards: Sequence[Sequence[Card]],
                       outcomes: List[PlayerOutcome]) -> None:
        """Print one dealt Hold'em hand, strongest player first."""
        self.console.print(f"[bold]Board:[/bold] {_cards(board)}")
        table = Table(title="Showdown")
        table.add_column("Player", justify="right")
        table.add_column("Hole")
        table.add_column("Best Hand")
        table.add_column("Level")
        table.add_column("Pot", justify="right")

        for outcome in outcomes:
            style = "bold green" if outcome.is_winner else ""
            table.add_row(
                str(outcome.player),
                _cards(player_cards[outcome.player - 1]),
                _cards(outcome.cards),
                outcome.level.describe(),
                f"{outcome.pot_fraction_won:.2f}",
                style=style,
            )

        self.console.print(table)

    def print_omaha8_outcomes(self, board: Sequence[Card], player_cards: Sequence[Sequence[Card]],
                              outcomes: List[Omaha8PlayerOutcome]) -> None:
        """Print one dealt Omaha/8 hand in player order."""
        self.console.print(f"[bold]Board:[/bold] {_cards(board)}")
        table = Table(title="Showdown")
        table.add_column("Player", justify="right")
        table.add_column("Hole")
        table.add_column("High")
        table.add_column("Low")
        table.add_column("Pot", justify="right")

        for outcome in outcomes:
            level = outcome.level
            low = str(level.low_level) if level.low_qualifies else "[dim]no low[/dim]"
            style = "bold green" if outcome.is_high_winner or outcome.is_low_winner else ""
            table.add_row(
                str(outcome.player),
                _cards(player_cards[outcome.player - 1]),
                str(level.high_level),
                low,
                f"{outcome.pot_fraction_won:.2f}",
                style=style,
            )

        self.console.print(table)
