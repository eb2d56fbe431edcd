"""Equity simulation engine.

Runs many hands with some cards fixed and accumulates the results in a
Simulator. Heads-up Hold'em with a complete board and both hero cards known
has few enough opponent holdings that enumerating all of them is cheaper
than sampling, so that case is evaluated exactly.
"""

import random
from dataclasses import dataclass
from typing import Optional, Sequence

from poker_equity import config
from poker_equity.errors import InvalidArgumentError
from poker_equity.logging_config import get_logger
from poker_equity.models.card import Card, Rank, Suit
from poker_equity.simulation import holdem, omaha8
from poker_equity.simulation.combinatorics import all_combinations, count_combinations
from poker_equity.simulation.deck import BOARD_SIZE, HOLDEM_HOLE_CARDS, OMAHA_HOLE_CARDS, Deck
from poker_equity.simulation.simulator import Omaha8Simulator, Simulator

logger = get_logger(__name__)


def _validate_run(board: Sequence[Card], hero: Sequence[Card], players: int,
                  hands_to_play: int, max_hole_cards: int) -> None:
    if players < 2:
        raise InvalidArgumentError(f"At least two players required, found {players}")
    if hands_to_play < 0:
        raise InvalidArgumentError(f"Hands to play must not be negative, found {hands_to_play}")
    if len(board) > BOARD_SIZE or len(hero) > max_hole_cards:
        raise InvalidArgumentError(
            f"Maximum of {BOARD_SIZE} table cards and {max_hole_cards} hole cards "
            f"supported, found {len(board)} and {len(hero)}"
        )
    fixed = list(board) + list(hero)
    if len(set(fixed)) != len(fixed):
        raise InvalidArgumentError(f"Duplicate cards in {[c.to_short() for c in fixed]}")
    if BOARD_SIZE + players * max_hole_cards > len(Deck()):
        raise InvalidArgumentError(f"Too many players for one deck: {players}")


def enumeration_size(board: Sequence[Card], hero: Sequence[Card], players: int) -> Optional[int]:
    """Number of deals an exhaustive run needs, or None if not enumerable.

    Only heads-up Hold'em with all five board cards and both hero cards
    known is enumerated: the single opponent's holding is the only unknown.
    """
    if len(board) != BOARD_SIZE or len(hero) != HOLDEM_HOLE_CARDS or players != 2:
        return None
    undealt = len(Deck()) - len(board) - len(hero)
    return count_combinations(undealt, HOLDEM_HOLE_CARDS)


def simulate_holdem(board: Sequence[Card], hero: Sequence[Card], players: int,
                    hands_to_play: int, rng: Optional[random.Random] = None) -> Simulator:
    """Estimate Hold'em equity for the hero (player one).

    When every possible opponent holding can be evaluated in fewer deals
    than hands_to_play, each one is played exactly once instead of sampling.

    Args:
        board: Known board cards (0 to 5).
        hero: Known hero hole cards (0 to 2).
        players: Number of players including the hero (2 or more).
        hands_to_play: Number of hands to sample.
        rng: Random source. Defaults to config.make_random().

    Returns:
        The populated Simulator.
    """
    _validate_run(board, hero, players, hands_to_play, HOLDEM_HOLE_CARDS)
    rng = rng or config.make_random()
    sim = Simulator()
    sim.reset(players)

    exhaustive = enumeration_size(board, hero, players)
    if exhaustive is not None and hands_to_play > exhaustive:
        logger.debug("Enumerating %d opponent holdings", exhaustive)
        _enumerate_holdem(sim, board, hero, rng)
    else:
        logger.debug("Sampling %d hands with %d players", hands_to_play, players)
        deck = Deck()
        for _ in range(hands_to_play):
            deck.shuffle_fixing(board, hero, rng)
            sim.process_hand(holdem.simulate_one_hand(deck, players, rng))

    logger.info(
        "Hold'em run complete: %d hands, %d wins, %.2f pots won",
        sim.hand_count, sim.win_count, sim.pots_won,
    )
    return sim


def _enumerate_holdem(sim: Simulator, board: Sequence[Card], hero: Sequence[Card],
                      rng: random.Random) -> None:
    undealt = Deck.undealt(list(board) + list(hero))
    for opponent in all_combinations(undealt, HOLDEM_HOLE_CARDS):
        outcomes = holdem.rank_outcomes(board, [list(hero), opponent])
        sim.process_hand(holdem.calc_hand_outcome(outcomes, rng))


def simulate_omaha8(board: Sequence[Card], hero: Sequence[Card], players: int,
                    hands_to_play: int, rng: Optional[random.Random] = None) -> Omaha8Simulator:
    """Estimate Omaha/8 equity for the hero (player one) by sampling.

    Args:
        board: Known board cards (0 to 5).
        hero: Known hero hole cards (0 to 4).
        players: Number of players including the hero (2 or more).
        hands_to_play: Number of hands to sample.
        rng: Random source. Defaults to config.make_random().
    """
    _validate_run(board, hero, players, hands_to_play, OMAHA_HOLE_CARDS)
    rng = rng or config.make_random()
    sim = Omaha8Simulator()
    sim.reset(players)

    logger.debug("Sampling %d Omaha/8 hands with %d players", hands_to_play, players)
    deck = Deck()
    for _ in range(hands_to_play):
        deck.shuffle_fixing(board, hero, rng, max_hole_cards=OMAHA_HOLE_CARDS)
        high_outcome, low_outcome = omaha8.simulate_one_hand(deck, players, rng)
        sim.process_hand(high_outcome, low_outcome)

    logger.info(
        "Omaha/8 run complete: %d hands, %.2f high and %.2f low pots won",
        sim.high.hand_count, sim.high.pots_won, sim.low.pots_won,
    )
    return sim


@dataclass(frozen=True)
class StartingPair:
    """A Hold'em starting hand described by its two ranks and suitedness."""
    rank1: Rank
    rank2: Rank
    same_suit: bool = False

    def validate(self) -> None:
        if self.same_suit and self.rank1 == self.rank2:
            raise InvalidArgumentError(
                f"A pair cannot be suited: {self.rank1.symbol}{self.rank2.symbol}"
            )

    def sample_cards(self):
        """Concrete hole cards for this pair: clubs and hearts, or both clubs."""
        self.validate()
        second_suit = Suit.CLUBS if self.same_suit else Suit.HEARTS
        return [Card(self.rank1, Suit.CLUBS), Card(self.rank2, second_suit)]

    def run_simulation(self, players: int, hands_to_play: int,
                       rng: Optional[random.Random] = None) -> Simulator:
        """Simulate this starting hand pre-flop (empty board)."""
        return simulate_holdem([], self.sample_cards(), players, hands_to_play, rng)

    def __str__(self) -> str:
        suffix = "s" if self.same_suit else ("" if self.rank1 == self.rank2 else "o")
        return f"{self.rank1.symbol}{self.rank2.symbol}{suffix}"
