"""Aggregate statistics accumulated over many simulated hands."""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List

from poker_equity.errors import InvalidArgumentError
from poker_equity.models.hand_level import HandClass, HandLevel, min_level
from poker_equity.models.outcome import HandOutcome
from poker_equity.simulation.evaluator import HandEvaluator

NUM_CLASSES = len(HandClass)


def pot_odds_break_even(pots_won: float, hand_count: int) -> float:
    """Largest bet, relative to the pot, with non-negative expected value.

    With W the mean number of pots won, a bet B into pot P is worth
    W * (P + B) - B, which is non-negative iff B <= P * W / (1 - W).
    """
    if hand_count <= 0:
        raise InvalidArgumentError(f"Hand count must be positive, found {hand_count}")
    mean_won = pots_won / hand_count
    if mean_won == 1.0:
        return math.inf
    return mean_won / (1 - mean_won)


def _class_table() -> List[int]:
    return [0] * NUM_CLASSES


def _class_levels() -> List[HandLevel]:
    return [min_level() for _ in range(NUM_CLASSES)]


def _table_dict(counts: List[int]) -> Dict[str, int]:
    return {hc.label: counts[hc] for hc in HandClass}


@dataclass
class Simulator:
    """Win and hand-class statistics from player one's point of view.

    Three viewpoints are tracked per hand: ours, the best opponent's and
    a randomly chosen opponent's. Per-class tables are indexed by HandClass.
    """
    players: int = 0
    hand_count: int = 0
    win_count: int = 0
    joint_win_count: int = 0
    best_opponent_win_count: int = 0
    random_opponent_win_count: int = 0
    pots_won: float = 0.0
    best_opponent_pots_won: float = 0.0
    random_opponent_pots_won: float = 0.0

    our_class_counts: List[int] = field(default_factory=_class_table)
    best_opponent_class_counts: List[int] = field(default_factory=_class_table)
    random_opponent_class_counts: List[int] = field(default_factory=_class_table)

    class_win_counts: List[int] = field(default_factory=_class_table)
    class_joint_win_counts: List[int] = field(default_factory=_class_table)
    class_best_opp_win_counts: List[int] = field(default_factory=_class_table)
    class_rand_opp_win_counts: List[int] = field(default_factory=_class_table)

    best_hand: HandLevel = field(default_factory=min_level)
    best_opp_hand: HandLevel = field(default_factory=min_level)
    class_best_hands: List[HandLevel] = field(default_factory=_class_levels)
    class_best_opp_hands: List[HandLevel] = field(default_factory=_class_levels)

    def reset(self, players: int) -> None:
        """Zero every statistic ahead of a new run."""
        fresh = Simulator(players=players)
        self.__dict__.update(fresh.__dict__)

    def process_hand(self, outcome: HandOutcome) -> None:
        """Fold one hand's outcome into the running statistics."""
        beats = HandEvaluator.beats
        our_class = outcome.our_level.hand_class
        best_opp_class = outcome.best_opponent_level.hand_class
        rand_opp_class = outcome.random_opponent_level.hand_class

        self.hand_count += 1
        if outcome.won:
            self.win_count += 1
            self.class_win_counts[our_class] += 1
        if outcome.best_opponent_won:
            self.best_opponent_win_count += 1
            self.class_best_opp_win_counts[best_opp_class] += 1
        if outcome.won and outcome.best_opponent_won:
            self.joint_win_count += 1
            self.class_joint_win_counts[our_class] += 1
        if outcome.random_opponent_won:
            self.random_opponent_win_count += 1
            self.class_rand_opp_win_counts[rand_opp_class] += 1

        self.pots_won += outcome.pot_fraction_won
        self.best_opponent_pots_won += outcome.best_opponent_pot_fraction_won
        self.random_opponent_pots_won += outcome.random_opponent_pot_fraction_won

        self.our_class_counts[our_class] += 1
        self.best_opponent_class_counts[best_opp_class] += 1
        self.random_opponent_class_counts[rand_opp_class] += 1

        if beats(outcome.our_level, self.best_hand):
            self.best_hand = outcome.our_level
        if beats(outcome.best_opponent_level, self.best_opp_hand):
            self.best_opp_hand = outcome.best_opponent_level
        if beats(outcome.our_level, self.class_best_hands[our_class]):
            self.class_best_hands[our_class] = outcome.our_level
        if beats(outcome.best_opponent_level, self.class_best_opp_hands[best_opp_class]):
            self.class_best_opp_hands[best_opp_class] = outcome.best_opponent_level

    def pot_odds_break_even(self) -> float:
        return pot_odds_break_even(self.pots_won, self.hand_count)

    def to_dict(self) -> Dict[str, Any]:
        """Flat, JSON-compatible view of every field plus derived break-even."""
        return {
            "players": self.players,
            "hand_count": self.hand_count,
            "win_count": self.win_count,
            "joint_win_count": self.joint_win_count,
            "best_opponent_win_count": self.best_opponent_win_count,
            "random_opponent_win_count": self.random_opponent_win_count,
            "pots_won": self.pots_won,
            "best_opponent_pots_won": self.best_opponent_pots_won,
            "random_opponent_pots_won": self.random_opponent_pots_won,
            "our_class_counts": _table_dict(self.our_class_counts),
            "best_opponent_class_counts": _table_dict(self.best_opponent_class_counts),
            "random_opponent_class_counts": _table_dict(self.random_opponent_class_counts),
            "class_win_counts": _table_dict(self.class_win_counts),
            "class_joint_win_counts": _table_dict(self.class_joint_win_counts),
            "class_best_opp_win_counts": _table_dict(self.class_best_opp_win_counts),
            "class_rand_opp_win_counts": _table_dict(self.class_rand_opp_win_counts),
            "best_hand": self.best_hand.to_dict(),
            "best_opp_hand": self.best_opp_hand.to_dict(),
            "class_best_hands": {hc.label: self.class_best_hands[hc].to_dict() for hc in HandClass},
            "class_best_opp_hands": {hc.label: self.class_best_opp_hands[hc].to_dict() for hc in HandClass},
            "pot_odds_break_even": self.pot_odds_break_even() if self.hand_count else None,
        }


@dataclass
class Omaha8LowSimulator:
    """Low-side statistics for Omaha/8."""
    hand_count: int = 0
    win_count: int = 0
    pots_won: float = 0.0

    def reset(self) -> None:
        self.hand_count = 0
        self.win_count = 0
        self.pots_won = 0.0

    def process_hand(self, outcome: HandOutcome) -> None:
        self.hand_count += 1
        if outcome.won:
            self.win_count += 1
        self.pots_won += outcome.pot_fraction_won


@dataclass
class Omaha8Simulator:
    """High-side Simulator plus low-side totals for Omaha/8."""
    high: Simulator = field(default_factory=Simulator)
    low: Omaha8LowSimulator = field(default_factory=Omaha8LowSimulator)

    def reset(self, players: int) -> None:
        self.high.reset(players)
        self.low.reset()

    def process_hand(self, high_outcome: HandOutcome, low_outcome: HandOutcome) -> None:
        self.high.process_hand(high_outcome)
        self.low.process_hand(low_outcome)

    def pots_won(self) -> float:
        return self.high.pots_won + self.low.pots_won

    def pot_odds_break_even(self) -> float:
        return pot_odds_break_even(self.pots_won(), self.high.hand_count)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "high": self.high.to_dict(),
            "low": {
                "hand_count": self.low.hand_count,
                "win_count": self.low.win_count,
                "pots_won": self.low.pots_won,
            },
            "pots_won": self.pots_won(),
            "pot_odds_break_even": self.pot_odds_break_even() if self.high.hand_count else None,
        }
