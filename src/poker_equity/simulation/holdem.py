"""Texas Hold'em deals and outcomes."""

import random
from typing import List, Sequence, Tuple

from poker_equity.errors import InvalidArgumentError
from poker_equity.models.card import Card
from poker_equity.models.outcome import HandOutcome, PlayerOutcome
from poker_equity.simulation.deck import Deck, HOLDEM_HOLE_CARDS
from poker_equity.simulation.evaluator import HandEvaluator
from poker_equity.simulation.pot import PotSplitter


def best_holdem_hand(board: Sequence[Card], hole: Sequence[Card]):
    """Best five cards from hole plus board; hole cards are optional in Hold'em."""
    return HandEvaluator.best_hand([], list(hole) + list(board))


def rank_outcomes(board: Sequence[Card], player_cards: Sequence[Sequence[Card]]) -> List[PlayerOutcome]:
    """Assess every player's hand and rank the results.

    Player numbers follow the order of player_cards, starting at 1. The
    result is sorted by hand strength (descending), then player number
    (ascending), with winner flags and pot fractions filled in.
    """
    outcomes = []
    for idx, hole in enumerate(player_cards):
        level, cards = best_holdem_hand(board, hole)
        outcomes.append(PlayerOutcome(idx + 1, level, cards))
    PotSplitter.award(outcomes)
    return PotSplitter.sort_outcomes(outcomes)


def calc_hand_outcome(outcomes: Sequence[PlayerOutcome], rng: random.Random) -> HandOutcome:
    """Summarise a ranked deal from player one's point of view.

    Draws exactly one value from rng to pick the random opponent.

    Args:
        outcomes: Output of rank_outcomes (at least two players).
        rng: Random source used to pick the random opponent.
    """
    if len(outcomes) < 2:
        raise InvalidArgumentError(f"At least two outcomes required, found {len(outcomes)}")

    ours = next(o for o in outcomes if o.player == 1)
    # Ranked order is kept, so the first opponent is the best one
    opponents = [o for o in outcomes if o.player != 1]
    best_opponent = opponents[0]
    random_opponent = opponents[rng.randrange(len(opponents))]

    return HandOutcome(
        won=ours.is_winner,
        best_opponent_won=best_opponent.is_winner,
        random_opponent_won=random_opponent.is_winner,
        pot_fraction_won=ours.pot_fraction_won,
        best_opponent_pot_fraction_won=best_opponent.pot_fraction_won,
        random_opponent_pot_fraction_won=random_opponent.pot_fraction_won,
        our_level=ours.level,
        best_opponent_level=best_opponent.level,
        random_opponent_level=random_opponent.level,
    )


def simulate_one_hand(deck: Deck, players: int, rng: random.Random) -> HandOutcome:
    """Play out the deck's current order as one hand of Hold'em."""
    board, player_cards = deck.deal(players, HOLDEM_HOLE_CARDS)
    outcomes = rank_outcomes(board, player_cards)
    return calc_hand_outcome(outcomes, rng)


def play_holdem(players: int, rng: random.Random) -> Tuple[List[Card], List[List[Card]], List[PlayerOutcome]]:
    """Shuffle a fresh deck and deal one complete hand.

    Returns:
        Tuple of (board, hole cards per player, ranked outcomes).
    """
    deck = Deck()
    deck.shuffle(rng)
    board, player_cards = deck.deal(players, HOLDEM_HOLE_CARDS)
    return board, player_cards, rank_outcomes(board, player_cards)
