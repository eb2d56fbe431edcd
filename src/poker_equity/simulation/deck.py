"""Deck management for poker simulation."""

import random
from typing import List, Sequence, Tuple

from poker_equity.errors import InvalidArgumentError
from poker_equity.models.card import Card, Rank, Suit

DECK_SIZE = 52
BOARD_SIZE = 5
HOLDEM_HOLE_CARDS = 2
OMAHA_HOLE_CARDS = 4


class Deck:
    """A standard 52-card deck.

    The deck is always a permutation of all 52 cards; dealing reads
    positions rather than removing cards. Layout after a shuffle: positions
    0-4 are the board, then each player's hole cards in turn.
    """

    def __init__(self):
        """Initialize a new deck with all 52 cards in a fixed order."""
        self.cards: List[Card] = []
        self._reset()

    def _reset(self):
        self.cards = [Card(rank, suit) for suit in Suit for rank in Rank]

    def shuffle(self, rng: random.Random):
        """Shuffle the deck in place (Fisher-Yates via the given random source)."""
        rng.shuffle(self.cards)

    def shuffle_fixing(self, board: Sequence[Card], hero: Sequence[Card],
                       rng: random.Random, max_hole_cards: int = HOLDEM_HOLE_CARDS):
        """Shuffle, keeping the given board and hero cards in place.

        After the call positions 0..len(board)-1 hold the board cards and
        positions 5..5+len(hero)-1 hold the hero's cards, both in the given
        order. Every other position holds the remaining cards in uniformly
        random order.

        Args:
            board: Known board cards (at most five).
            hero: Known hole cards of player one (at most max_hole_cards).
            rng: Random source to consume.
            max_hole_cards: Hole cards per player in the game being dealt.
        """
        if len(board) > BOARD_SIZE or len(hero) > max_hole_cards:
            raise InvalidArgumentError(
                f"Maximum of {BOARD_SIZE} table cards and {max_hole_cards} hole cards "
                f"supported, found {len(board)} and {len(hero)}"
            )
        fixed = list(board) + list(hero)
        if len(set(fixed)) != len(fixed):
            raise InvalidArgumentError(f"Duplicate cards in {[c.to_short() for c in fixed]}")

        # Shuffle everything, then swap each fixed card into its slot
        self.shuffle(rng)
        targets = list(range(len(board))) + [BOARD_SIZE + i for i in range(len(hero))]
        for target, card in zip(targets, fixed):
            idx = self.index_of(card)
            self.cards[target], self.cards[idx] = self.cards[idx], self.cards[target]

    def deal(self, players: int, hole_cards: int = HOLDEM_HOLE_CARDS) -> Tuple[List[Card], List[List[Card]]]:
        """Read the board and every player's hole cards from the deck.

        Returns:
            Tuple of (board cards, list of hole cards per player).
        """
        if players < 1:
            raise InvalidArgumentError(f"At least one player required, found {players}")
        if BOARD_SIZE + players * hole_cards > DECK_SIZE:
            raise InvalidArgumentError(
                f"Cannot deal {hole_cards} cards to each of {players} players from one deck"
            )

        board = self.cards[:BOARD_SIZE]
        hands = []
        for player in range(players):
            start = BOARD_SIZE + player * hole_cards
            hands.append(self.cards[start:start + hole_cards])
        return board, hands

    def index_of(self, card: Card) -> int:
        return self.cards.index(card)

    def is_permutation(self) -> bool:
        """Whether the deck holds exactly one of each of the 52 cards."""
        occupancy = {(rank, suit): 0 for suit in Suit for rank in Rank}
        for card in self.cards:
            occupancy[(card.rank, card.suit)] += 1
        return len(self.cards) == DECK_SIZE and all(n == 1 for n in occupancy.values())

    @staticmethod
    def undealt(used: Sequence[Card]) -> List[Card]:
        """Cards of a fresh deck not in used, in the deck's fixed order."""
        used_set = set(used)
        return [c for c in Deck().cards if c not in used_set]

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        return f"Deck(cards={len(self.cards)})"
