"""Per-hand outcome data models."""

from dataclasses import dataclass, field
from typing import List

from poker_equity.models.card import Card
from poker_equity.models.hand_level import HandLevel


@dataclass
class PlayerOutcome:
    """One player's result in a single Hold'em deal.

    Players are numbered from 1 in the order their hole cards were given.
    """
    player: int
    level: HandLevel
    cards: List[Card] = field(default_factory=list)
    is_winner: bool = False
    pot_fraction_won: float = 0.0


@dataclass(frozen=True)
class HandOutcome:
    """A single processed hand, seen from player one (the hero)."""
    won: bool
    best_opponent_won: bool
    random_opponent_won: bool
    pot_fraction_won: float
    best_opponent_pot_fraction_won: float
    random_opponent_pot_fraction_won: float
    our_level: HandLevel
    best_opponent_level: HandLevel
    random_opponent_level: HandLevel


@dataclass(frozen=True)
class Omaha8Level:
    """Best high and best ace-to-five low hand for one Omaha/8 holding."""
    high_level: HandLevel
    low_level: HandLevel
    high_hand: List[Card]
    low_hand: List[Card]
    low_qualifies: bool


@dataclass
class Omaha8PlayerOutcome:
    """One player's result in a single Omaha/8 deal."""
    player: int
    level: Omaha8Level
    is_high_winner: bool = False
    is_low_winner: bool = False
    high_pot_fraction_won: float = 0.0
    low_pot_fraction_won: float = 0.0

    @property
    def pot_fraction_won(self) -> float:
        return self.high_pot_fraction_won + self.low_pot_fraction_won
