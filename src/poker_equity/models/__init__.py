"""Data models for poker equity."""

from poker_equity.models.card import Card, Rank, Suit, parse_cards, sort_cards
from poker_equity.models.hand_level import HandClass, HandLevel, make_level, min_level
from poker_equity.models.outcome import (
    HandOutcome, Omaha8Level, Omaha8PlayerOutcome, PlayerOutcome
)

__all__ = [
    "Card", "Rank", "Suit", "parse_cards", "sort_cards",
    "HandClass", "HandLevel", "make_level", "min_level",
    "HandOutcome", "Omaha8Level", "Omaha8PlayerOutcome", "PlayerOutcome",
]
