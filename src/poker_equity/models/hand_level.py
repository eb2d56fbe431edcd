"""Hand classes and hand levels.

A HandLevel carries everything needed to decide whether one five-card hand
beats another: the class tag plus an ordered tuple of tiebreak ranks. The
meaning and length of the tiebreaks depend on the class:

    StraightFlush  [high card]                    (wheel: [Five])
    FourOfAKind    [quad rank, kicker]
    FullHouse      [trips rank, pair rank]
    Flush          [all five ranks, descending]
    Straight       [high card]                    (wheel: [Five])
    ThreeOfAKind   [trips rank, kicker, kicker]
    TwoPair        [high pair, low pair, kicker]
    OnePair        [pair rank, kicker, kicker, kicker]
    HighCard       [all five ranks, descending]

For ace-to-five low levels "descending" means in ace-low order, so the ace
comes last.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Tuple

from poker_equity.models.card import Rank


class HandClass(IntEnum):
    """Hand classes from worst to best (ace-high ranking)."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()

    @classmethod
    def parse(cls, name: str) -> "HandClass":
        """Parse 'FullHouse', 'full house' or 'FULL_HOUSE'."""
        key = name.replace(" ", "").replace("_", "").upper()
        for hand_class in cls:
            if hand_class.name.replace("_", "") == key:
                return hand_class
        raise ValueError(f"Unknown hand class: {name}")


@dataclass(frozen=True)
class HandLevel:
    hand_class: HandClass
    tiebreaks: Tuple[Rank, ...]

    def pretty_tiebreaks(self) -> str:
        return ", ".join(r.symbol for r in self.tiebreaks)

    def __str__(self) -> str:
        return f"{self.hand_class.label} [{self.pretty_tiebreaks()}]"

    def describe(self) -> str:
        """Human-readable description, e.g. 'Full house: 3s over 2s'."""
        t = [r.symbol for r in self.tiebreaks]
        hc = self.hand_class
        if hc == HandClass.STRAIGHT_FLUSH:
            return f"Straight Flush: {t[0]} high"
        if hc == HandClass.FOUR_OF_A_KIND:
            return f"Four {t[0]}s (plus {t[1]})"
        if hc == HandClass.FULL_HOUSE:
            return f"Full house: {t[0]}s over {t[1]}s"
        if hc == HandClass.FLUSH:
            return f"Flush: {self.pretty_tiebreaks()}"
        if hc == HandClass.STRAIGHT:
            return f"Straight: {t[0]} high"
        if hc == HandClass.THREE_OF_A_KIND:
            return f"Three {t[0]}s (plus {t[1]}, {t[2]})"
        if hc == HandClass.TWO_PAIR:
            return f"Two pair: {t[0]}s and {t[1]}s (plus {t[2]})"
        if hc == HandClass.ONE_PAIR:
            return f"Pair {t[0]}s (plus {t[1]}, {t[2]}, {t[3]})"
        return f"High card: {self.pretty_tiebreaks()}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "class": self.hand_class.label,
            "tiebreaks": [r.symbol for r in self.tiebreaks],
        }


def make_level(hand_class: str, *ranks: str) -> HandLevel:
    """Build a level from text, e.g. make_level('FullHouse', '3', '2')."""
    return HandLevel(HandClass.parse(hand_class), tuple(Rank.parse(r) for r in ranks))


def min_level() -> HandLevel:
    """A level beaten by every legitimate high hand."""
    return HandLevel(HandClass.HIGH_CARD, (Rank.TWO,) * 5)
