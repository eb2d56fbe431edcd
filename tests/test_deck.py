"""Tests for the Deck class."""

import random
from collections import Counter

import pytest

from poker_equity.errors import InvalidArgumentError
from poker_equity.models.card import parse_cards
from poker_equity.simulation.deck import OMAHA_HOLE_CARDS, Deck


@pytest.fixture
def rng():
    return random.Random(1234)


class TestDeck:
    """Tests for shuffling and dealing."""

    def test_fresh_deck(self):
        deck = Deck()
        assert len(deck) == 52
        assert deck.is_permutation()

    def test_shuffle_keeps_permutation(self, rng):
        deck = Deck()
        deck.shuffle(rng)
        assert deck.is_permutation()
        assert deck.cards != Deck().cards

    def test_shuffle_reproducible(self):
        d1, d2 = Deck(), Deck()
        d1.shuffle(random.Random(99))
        d2.shuffle(random.Random(99))
        assert d1.cards == d2.cards

    def test_is_permutation_detects_duplicates(self):
        deck = Deck()
        deck.cards[0] = deck.cards[1]
        assert not deck.is_permutation()

    def test_shuffle_fixing_positions(self, rng):
        board = parse_cards("AS KD 3C")
        hero = parse_cards("2H 7S")
        deck = Deck()
        for _ in range(20):
            deck.shuffle_fixing(board, hero, rng)
            assert deck.cards[0:3] == board
            assert deck.cards[5:7] == hero
            assert deck.is_permutation()

    def test_shuffle_fixing_full_board(self, rng):
        board = parse_cards("KS 7D AH 8C 8D")
        hero = parse_cards("9D 7C")
        deck = Deck()
        deck.shuffle_fixing(board, hero, rng)
        dealt_board, hands = deck.deal(3)
        assert dealt_board == board
        assert hands[0] == hero

    def test_shuffle_fixing_omaha_hero(self, rng):
        hero = parse_cards("AS 2S 3D 4D")
        deck = Deck()
        deck.shuffle_fixing([], hero, rng, max_hole_cards=OMAHA_HOLE_CARDS)
        _, hands = deck.deal(2, OMAHA_HOLE_CARDS)
        assert hands[0] == hero

    def test_shuffle_fixing_randomizes_the_rest(self, rng):
        """Free positions see many different cards over repeated shuffles."""
        hero = parse_cards("AS AH")
        deck = Deck()
        seen = Counter()
        for _ in range(500):
            deck.shuffle_fixing([], hero, rng)
            seen[deck.cards[0]] += 1
        assert len(seen) > 40
        assert hero[0] not in seen and hero[1] not in seen

    def test_shuffle_fixing_rejects_duplicates(self, rng):
        with pytest.raises(InvalidArgumentError):
            Deck().shuffle_fixing(parse_cards("AS KD"), parse_cards("AS 2C"), rng)

    def test_shuffle_fixing_rejects_too_many(self, rng):
        with pytest.raises(InvalidArgumentError):
            Deck().shuffle_fixing(parse_cards("AS KD QC JH 10S 9S"), [], rng)
        with pytest.raises(InvalidArgumentError):
            Deck().shuffle_fixing([], parse_cards("AS KD QC"), rng)

    def test_deal_layout(self, rng):
        deck = Deck()
        deck.shuffle(rng)
        board, hands = deck.deal(3)
        assert board == deck.cards[:5]
        assert hands == [deck.cards[5:7], deck.cards[7:9], deck.cards[9:11]]
        dealt = board + [c for hand in hands for c in hand]
        assert len(set(dealt)) == 11

    def test_deal_omaha(self, rng):
        deck = Deck()
        deck.shuffle(rng)
        board, hands = deck.deal(11, OMAHA_HOLE_CARDS)
        assert len(board) == 5
        assert all(len(h) == 4 for h in hands)
        assert len(set(board + [c for h in hands for c in h])) == 49

    def test_deal_invalid_players(self):
        with pytest.raises(InvalidArgumentError):
            Deck().deal(0)
        with pytest.raises(InvalidArgumentError):
            Deck().deal(24)
        with pytest.raises(InvalidArgumentError):
            Deck().deal(12, OMAHA_HOLE_CARDS)

    def test_undealt(self):
        used = parse_cards("AS KD")
        rest = Deck.undealt(used)
        assert len(rest) == 50
        assert not set(used) & set(rest)
        assert rest == [c for c in Deck().cards if c not in used]
