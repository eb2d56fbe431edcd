"""Tests for cards, ranks and hand levels."""

import pytest

from poker_equity.errors import CardFormatError, PokerError
from poker_equity.models.card import (
    Card, Rank, Suit, format_cards, is_rank_less, parse_cards, sort_cards
)
from poker_equity.models.hand_level import HandClass, HandLevel, make_level, min_level


class TestCardParsing:
    """Tests for card text notation."""

    def test_parse_simple(self):
        card = Card.parse("AH")
        assert card.rank == Rank.ACE
        assert card.suit == Suit.HEARTS

    def test_parse_ten(self):
        """Ten is written as '10', not 'T'."""
        card = Card.parse("10S")
        assert card.rank == Rank.TEN
        assert card.suit == Suit.SPADES

    def test_parse_case_insensitive(self):
        assert Card.parse("qd") == Card(Rank.QUEEN, Suit.DIAMONDS)
        assert Card.parse(" 7c ") == Card(Rank.SEVEN, Suit.CLUBS)

    @pytest.mark.parametrize("text", ["", "1S", "TS", "AX", "10", "AHH", "11S"])
    def test_parse_invalid(self, text):
        with pytest.raises(CardFormatError) as exc_info:
            Card.parse(text)
        assert exc_info.value.text == text

    def test_format_error_is_poker_error(self):
        with pytest.raises(PokerError):
            Card.parse("ZZ")
        with pytest.raises(ValueError):
            Card.parse("ZZ")

    def test_str_and_repr(self):
        card = Card.parse("10S")
        assert str(card) == "10S"
        assert repr(card) == "Card('10S')"
        assert card.pretty() == "10♠"

    def test_equality_and_hash(self):
        assert Card.parse("AS") == Card(Rank.ACE, Suit.SPADES)
        assert Card.parse("AS") != Card.parse("AH")
        assert len({Card.parse("AS"), Card.parse("as"), Card.parse("KS")}) == 2

    def test_parse_cards(self):
        cards = parse_cards("AS, 10h  KD")
        assert cards == [Card.parse("AS"), Card.parse("10H"), Card.parse("KD")]

    def test_parse_cards_empty(self):
        assert parse_cards("") == []
        assert parse_cards("   ") == []

    def test_parse_cards_invalid(self):
        with pytest.raises(CardFormatError):
            parse_cards("AS 1D")

    def test_format_cards(self):
        assert format_cards(parse_cards("as 10d 2c")) == "AS 10D 2C"


class TestRank:
    """Tests for rank ordering."""

    def test_values(self):
        assert int(Rank.TWO) == 2
        assert int(Rank.ACE) == 14
        assert Rank.ACE.low_value == 1
        assert Rank.KING.low_value == 13

    def test_parse(self):
        assert Rank.parse("10") == Rank.TEN
        assert Rank.parse("j") == Rank.JACK
        with pytest.raises(CardFormatError):
            Rank.parse("T")

    def test_is_rank_less(self):
        assert is_rank_less(Rank.TWO, Rank.ACE)
        assert not is_rank_less(Rank.ACE, Rank.TWO)
        assert is_rank_less(Rank.ACE, Rank.TWO, ace_low=True)
        assert not is_rank_less(Rank.FIVE, Rank.FIVE)

    def test_sort_cards(self):
        cards = parse_cards("2C AS 10D")
        assert sort_cards(cards) == parse_cards("AS 10D 2C")
        assert sort_cards(cards, ace_low=True) == parse_cards("10D 2C AS")

    def test_sort_cards_returns_new_list(self):
        cards = parse_cards("2C AS")
        sort_cards(cards)
        assert cards == parse_cards("2C AS")

    def test_sort_cards_same_rank_is_deterministic(self):
        assert sort_cards(parse_cards("KS KC")) == sort_cards(parse_cards("KC KS"))

    def test_suit_from_symbol(self):
        assert Suit.from_symbol("h") == Suit.HEARTS
        with pytest.raises(CardFormatError):
            Suit.from_symbol("X")


class TestHandLevel:
    """Tests for hand classes and levels."""

    @pytest.mark.parametrize("text", ["FullHouse", "full house", "FULL_HOUSE"])
    def test_parse_hand_class(self, text):
        assert HandClass.parse(text) == HandClass.FULL_HOUSE

    def test_parse_unknown_class(self):
        with pytest.raises(ValueError):
            HandClass.parse("Royal Straight")

    def test_class_order(self):
        assert HandClass.STRAIGHT_FLUSH > HandClass.FOUR_OF_A_KIND > HandClass.HIGH_CARD
        assert HandClass.FOUR_OF_A_KIND.label == "Four Of A Kind"

    def test_make_level(self):
        level = make_level("FullHouse", "3", "2")
        assert level == HandLevel(HandClass.FULL_HOUSE, (Rank.THREE, Rank.TWO))

    def test_str_and_describe(self):
        level = make_level("FullHouse", "3", "2")
        assert str(level) == "Full House [3, 2]"
        assert level.describe() == "Full house: 3s over 2s"
        assert make_level("Straight", "5").describe() == "Straight: 5 high"

    def test_to_dict(self):
        level = make_level("TwoPair", "10", "4", "A")
        assert level.to_dict() == {"class": "Two Pair", "tiebreaks": ["10", "4", "A"]}

    def test_min_level(self):
        level = min_level()
        assert level.hand_class == HandClass.HIGH_CARD
        assert level.tiebreaks == (Rank.TWO,) * 5
