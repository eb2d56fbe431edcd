"""Omaha Hi/Lo (eight or better) deals and outcomes.

Every hand must use exactly three board cards and exactly two hole cards.
The pot is split between the best high hand and the best qualifying
ace-to-five low; with no qualifying low the high hand scoops.
"""

import random
from typing import List, Sequence, Tuple

from poker_equity.errors import InvalidArgumentError
from poker_equity.models.card import Card, Rank
from poker_equity.models.hand_level import HandClass, HandLevel
from poker_equity.models.outcome import HandOutcome, Omaha8Level, Omaha8PlayerOutcome
from poker_equity.simulation.combinatorics import all_combinations
from poker_equity.simulation.deck import BOARD_SIZE, OMAHA_HOLE_CARDS, Deck
from poker_equity.simulation.evaluator import HandEvaluator
from poker_equity.simulation.pot import PotSplitter

BOARD_CARDS_USED = 3
HOLE_CARDS_USED = 2
LOW_QUALIFIER = Rank.EIGHT


def possible_combinations(board: Sequence[Card], hole: Sequence[Card]) -> List[List[Card]]:
    """Every legal five-card hand: three board cards plus two hole cards."""
    return [
        board_cards + hole_cards
        for board_cards in all_combinations(board, BOARD_CARDS_USED)
        for hole_cards in all_combinations(hole, HOLE_CARDS_USED)
    ]


def low_level_qualifies(level: HandLevel) -> bool:
    """A low qualifies with five distinct ranks, none above eight."""
    return (
        level.hand_class == HandClass.HIGH_CARD
        and level.tiebreaks[0].low_value <= LOW_QUALIFIER.low_value
    )


def classify(board: Sequence[Card], hole: Sequence[Card]) -> Omaha8Level:
    """Best high and best low hand for one player's holding.

    Args:
        board: The five board cards.
        hole: The player's four hole cards.
    """
    if len(board) != BOARD_SIZE or len(hole) != OMAHA_HOLE_CARDS:
        raise InvalidArgumentError(
            f"Omaha requires {BOARD_SIZE} board cards and {OMAHA_HOLE_CARDS} hole cards, "
            f"found {len(board)} and {len(hole)}"
        )
    candidates = possible_combinations(board, hole)
    high_level, high_hand = HandEvaluator.best_of(candidates)
    low_level, low_hand = HandEvaluator.best_of(
        candidates, HandEvaluator.classify_low, HandEvaluator.beats_low
    )
    return Omaha8Level(
        high_level=high_level,
        low_level=low_level,
        high_hand=high_hand,
        low_hand=low_hand,
        low_qualifies=low_level_qualifies(low_level),
    )


def player_outcomes(board: Sequence[Card], player_cards: Sequence[Sequence[Card]]) -> List[Omaha8PlayerOutcome]:
    """Classify every player and split the pot high/low.

    Outcomes are returned in player order (player 1 first). When at least one
    player holds a qualifying low, the high winners share half the pot and
    the low winners share the other half; otherwise the high winners share
    the whole pot.
    """
    outcomes = [Omaha8PlayerOutcome(idx + 1, classify(board, hole)) for idx, hole in enumerate(player_cards)]

    high_flags = PotSplitter.winner_flags([o.level.high_level for o in outcomes])

    qualifying = [o for o in outcomes if o.level.low_qualifies]
    low_flags = [False] * len(outcomes)
    if qualifying:
        best_low = PotSplitter.best_level([o.level.low_level for o in qualifying], HandEvaluator.beats_low)
        low_flags = [
            o.level.low_qualifies and not HandEvaluator.beats_low(best_low, o.level.low_level)
            for o in outcomes
        ]

    high_share = 0.5 if any(low_flags) else 1.0
    high_fractions = PotSplitter.split(high_share, high_flags)
    low_fractions = PotSplitter.split(1.0 - high_share, low_flags)

    for idx, outcome in enumerate(outcomes):
        outcome.is_high_winner = high_flags[idx]
        outcome.is_low_winner = low_flags[idx]
        outcome.high_pot_fraction_won = high_fractions[idx]
        outcome.low_pot_fraction_won = low_fractions[idx]
    return outcomes


def _check_outcomes(outcomes: Sequence[Omaha8PlayerOutcome], random_idx: int) -> None:
    if len(outcomes) < 2:
        raise InvalidArgumentError(f"At least two outcomes required, found {len(outcomes)}")
    if not 1 <= random_idx < len(outcomes):
        raise InvalidArgumentError(f"Random opponent index {random_idx} out of range")


def calc_high_outcome(outcomes: Sequence[Omaha8PlayerOutcome], random_idx: int) -> HandOutcome:
    """High-side summary from player one's point of view.

    Args:
        outcomes: Output of player_outcomes, in player order.
        random_idx: Index into outcomes of the random opponent (1 or more).
    """
    _check_outcomes(outcomes, random_idx)
    ours = outcomes[0]
    best_opponent = outcomes[1]
    for outcome in outcomes[2:]:
        if HandEvaluator.beats(outcome.level.high_level, best_opponent.level.high_level):
            best_opponent = outcome
    random_opponent = outcomes[random_idx]

    return HandOutcome(
        won=ours.is_high_winner,
        best_opponent_won=best_opponent.is_high_winner,
        random_opponent_won=random_opponent.is_high_winner,
        pot_fraction_won=ours.high_pot_fraction_won,
        best_opponent_pot_fraction_won=best_opponent.high_pot_fraction_won,
        random_opponent_pot_fraction_won=random_opponent.high_pot_fraction_won,
        our_level=ours.level.high_level,
        best_opponent_level=best_opponent.level.high_level,
        random_opponent_level=random_opponent.level.high_level,
    )


def calc_low_outcome(outcomes: Sequence[Omaha8PlayerOutcome], random_idx: int) -> HandOutcome:
    """Low-side summary from player one's point of view.

    The best opponent is chosen by low strength, whether or not it qualifies.
    """
    _check_outcomes(outcomes, random_idx)
    ours = outcomes[0]
    best_opponent = outcomes[1]
    for outcome in outcomes[2:]:
        if HandEvaluator.beats_low(outcome.level.low_level, best_opponent.level.low_level):
            best_opponent = outcome
    random_opponent = outcomes[random_idx]

    return HandOutcome(
        won=ours.is_low_winner,
        best_opponent_won=best_opponent.is_low_winner,
        random_opponent_won=random_opponent.is_low_winner,
        pot_fraction_won=ours.low_pot_fraction_won,
        best_opponent_pot_fraction_won=best_opponent.low_pot_fraction_won,
        random_opponent_pot_fraction_won=random_opponent.low_pot_fraction_won,
        our_level=ours.level.low_level,
        best_opponent_level=best_opponent.level.low_level,
        random_opponent_level=random_opponent.level.low_level,
    )


def simulate_one_hand(deck: Deck, players: int, rng: random.Random) -> Tuple[HandOutcome, HandOutcome]:
    """Play out the deck's current order as one hand of Omaha/8.

    Draws exactly one value from rng to pick the random opponent.

    Returns:
        Tuple of (high outcome, low outcome).
    """
    board, player_cards = deck.deal(players, OMAHA_HOLE_CARDS)
    outcomes = player_outcomes(board, player_cards)
    random_idx = 1 + rng.randrange(len(outcomes) - 1)
    return calc_high_outcome(outcomes, random_idx), calc_low_outcome(outcomes, random_idx)


def play_omaha8(players: int, rng: random.Random) -> Tuple[List[Card], List[List[Card]], List[Omaha8PlayerOutcome]]:
    """Shuffle a fresh deck and deal one complete hand of Omaha/8."""
    deck = Deck()
    deck.shuffle(rng)
    board, player_cards = deck.deal(players, OMAHA_HOLE_CARDS)
    return board, player_cards, player_outcomes(board, player_cards)
