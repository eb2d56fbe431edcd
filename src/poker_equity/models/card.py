"""Card, Rank, and Suit models."""

import re
from enum import Enum, IntEnum
from typing import Iterable, List

from poker_equity.errors import CardFormatError

_CARD_PATTERN = re.compile(r"^(10|[2-9JQKA])([CDHS])$")


class Suit(str, Enum):
    CLUBS = "C"
    DIAMONDS = "D"
    HEARTS = "H"
    SPADES = "S"

    @classmethod
    def from_symbol(cls, s: str) -> "Suit":
        try:
            return cls(s.upper())
        except ValueError:
            raise CardFormatError(s, "suit") from None

    @property
    def symbol(self) -> str:
        return {"C": "♣", "D": "♦", "H": "♥", "S": "♠"}[self.value]


class Rank(IntEnum):
    """Card rank. Integer values follow ace-high order (Two=2 .. Ace=14)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def low_value(self) -> int:
        """Value in ace-to-five ordering, where the ace counts as one."""
        return 1 if self is Rank.ACE else int(self)

    @property
    def symbol(self) -> str:
        return _RANK_SYMBOLS[self]

    @classmethod
    def parse(cls, text: str) -> "Rank":
        """Parse a rank such as '2', '10', 'J' or 'A'."""
        rank = _SYMBOL_RANKS.get(text.strip().upper())
        if rank is None:
            raise CardFormatError(text, "rank")
        return rank

    def __str__(self) -> str:
        return self.symbol


_RANK_SYMBOLS = {
    Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4", Rank.FIVE: "5",
    Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8", Rank.NINE: "9",
    Rank.TEN: "10", Rank.JACK: "J", Rank.QUEEN: "Q", Rank.KING: "K",
    Rank.ACE: "A",
}
_SYMBOL_RANKS = {symbol: rank for rank, symbol in _RANK_SYMBOLS.items()}

# Arbitrary but fixed suit order, used only to make card sorting deterministic
_SUIT_ORDER = {suit: i for i, suit in enumerate(Suit)}


def rank_key(rank: Rank, ace_low: bool = False) -> int:
    """Sort key for a rank in the chosen ordering mode."""
    return rank.low_value if ace_low else int(rank)


def is_rank_less(r1: Rank, r2: Rank, ace_low: bool = False) -> bool:
    """Whether r1 ranks strictly below r2 in the chosen ordering mode."""
    return rank_key(r1, ace_low) < rank_key(r2, ace_low)


class Card:
    """A single playing card."""

    __slots__ = ("rank", "suit")

    def __init__(self, rank: Rank, suit: Suit):
        self.rank = rank
        self.suit = suit

    @classmethod
    def parse(cls, s: str) -> "Card":
        """Parse a card string like 'AH', '10S' or 'qd' (case-insensitive)."""
        match = _CARD_PATTERN.match(s.strip().upper())
        if match is None:
            raise CardFormatError(s)
        return cls(_SYMBOL_RANKS[match.group(1)], Suit(match.group(2)))

    def __repr__(self) -> str:
        return f"Card({self.to_short()!r})"

    def __str__(self) -> str:
        return self.to_short()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank and self.suit == other.suit

    def __hash__(self) -> int:
        return hash((self.rank, self.suit))

    def to_short(self) -> str:
        """Return the canonical code, e.g. '10S'."""
        return f"{self.rank.symbol}{self.suit.value}"

    def pretty(self) -> str:
        """Return a display form using the suit glyph, e.g. '10♠'."""
        return f"{self.rank.symbol}{self.suit.symbol}"


def parse_cards(text: str) -> List[Card]:
    """Parse a comma and/or whitespace separated list of cards.

    An empty or blank string yields an empty list.
    """
    tokens = [t for t in re.split(r"[,\s]+", text.strip()) if t]
    return [Card.parse(t) for t in tokens]


def sort_cards(cards: Iterable[Card], ace_low: bool = False) -> List[Card]:
    """Return the cards sorted by rank descending, then by suit.

    In ace-low mode the ace sorts below the two.
    """
    return sorted(cards, key=lambda c: (-rank_key(c.rank, ace_low), _SUIT_ORDER[c.suit]))


def format_cards(cards: Iterable[Card]) -> str:
    return " ".join(c.to_short() for c in cards)
