"""Hand classification and best-hand selection."""

from collections import Counter
from typing import Callable, List, Optional, Sequence, Tuple

from poker_equity.errors import InvalidArgumentError
from poker_equity.models.card import Card, Rank, rank_key, sort_cards
from poker_equity.models.hand_level import HandClass, HandLevel
from poker_equity.simulation.combinatorics import all_combinations

HAND_SIZE = 5

RANKS_DESC: Tuple[Rank, ...] = tuple(sorted(Rank, reverse=True))
RANKS_DESC_ACE_LOW: Tuple[Rank, ...] = tuple(sorted(Rank, key=lambda r: r.low_value, reverse=True))


def _build_straights() -> Tuple[Tuple[Rank, ...], ...]:
    # Highest first; the wheel is listed explicitly as the lowest straight
    straights = [tuple(Rank(high - i) for i in range(5)) for high in range(Rank.ACE, Rank.SIX - 1, -1)]
    straights.append((Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO, Rank.ACE))
    return tuple(straights)


STRAIGHTS = _build_straights()

Classifier = Callable[[Sequence[Card]], HandLevel]
Comparator = Callable[[HandLevel, HandLevel], bool]


class HandEvaluator:
    """Evaluates five-card poker hands, high and ace-to-five low."""

    @staticmethod
    def classify(cards: Sequence[Card]) -> HandLevel:
        """Classify exactly five cards under standard (ace-high) rules.

        Classes are tested from best to worst; given five cards each test
        excludes all the better ones, so the first match is the answer.

        Args:
            cards: Exactly five distinct cards.

        Returns:
            The hand's level.
        """
        ordered = HandEvaluator._sorted_hand(cards, ace_low=False)
        counts = Counter(c.rank for c in ordered)
        is_flush = len({c.suit for c in ordered}) == 1
        straight_high = HandEvaluator._straight_high(counts)

        if is_flush and straight_high is not None:
            return HandLevel(HandClass.STRAIGHT_FLUSH, (straight_high,))

        level = HandEvaluator._four_or_full_house(ordered, counts)
        if level is not None:
            return level

        if is_flush:
            return HandLevel(HandClass.FLUSH, tuple(c.rank for c in ordered))

        if straight_high is not None:
            return HandLevel(HandClass.STRAIGHT, (straight_high,))

        return HandEvaluator._by_pairs(ordered, counts, RANKS_DESC)

    @staticmethod
    def classify_low(cards: Sequence[Card]) -> HandLevel:
        """Classify exactly five cards for ace-to-five lowball.

        Straights and flushes are ignored and the ace counts low; only rank
        multiplicities matter.
        """
        ordered = HandEvaluator._sorted_hand(cards, ace_low=True)
        counts = Counter(c.rank for c in ordered)

        level = HandEvaluator._four_or_full_house(ordered, counts)
        if level is not None:
            return level

        return HandEvaluator._by_pairs(ordered, counts, RANKS_DESC_ACE_LOW)

    @staticmethod
    def beats(l1: HandLevel, l2: HandLevel) -> bool:
        """Whether l1 strictly beats l2 under standard rules."""
        if l1.hand_class != l2.hand_class:
            return l1.hand_class > l2.hand_class
        for r1, r2 in zip(l1.tiebreaks, l2.tiebreaks):
            if r1 != r2:
                return r1 > r2
        return False

    @staticmethod
    def beats_low(l1: HandLevel, l2: HandLevel) -> bool:
        """Whether l1 strictly beats l2 under ace-to-five low rules."""
        if l1.hand_class != l2.hand_class:
            return l1.hand_class < l2.hand_class
        for r1, r2 in zip(l1.tiebreaks, l2.tiebreaks):
            if r1 != r2:
                return rank_key(r1, ace_low=True) < rank_key(r2, ace_low=True)
        return False

    @staticmethod
    def compare(l1: HandLevel, l2: HandLevel, beats: Comparator = None) -> int:
        """Compare two levels.

        Returns:
            1 if l1 wins, -1 if l2 wins, 0 if tie.
        """
        beats = beats or HandEvaluator.beats
        if beats(l1, l2):
            return 1
        if beats(l2, l1):
            return -1
        return 0

    @staticmethod
    def best_hand(mandatory: Sequence[Card], optional: Sequence[Card]) -> Tuple[HandLevel, List[Card]]:
        """Find the best five-card hand using all mandatory cards.

        Every combination of 5 - len(mandatory) optional cards is joined to
        the mandatory cards and classified. On ties the first hand seen is
        kept, which affects only which cards are returned, never the level.

        Args:
            mandatory: Cards that must be part of the hand (at most five).
            optional: Cards from which the rest of the hand is chosen.

        Returns:
            Tuple of (best level, the five cards making it).
        """
        needed = HAND_SIZE - len(mandatory)
        if needed < 0 or needed > len(optional):
            raise InvalidArgumentError(
                f"Cannot build a {HAND_SIZE}-card hand from {len(mandatory)} "
                f"mandatory and {len(optional)} optional cards"
            )
        candidates = [list(mandatory) + combo for combo in all_combinations(optional, needed)]
        return HandEvaluator.best_of(candidates)

    @staticmethod
    def best_of(candidates: Sequence[List[Card]],
                classify: Classifier = None,
                beats: Comparator = None) -> Tuple[HandLevel, List[Card]]:
        """Pick the best of a non-empty sequence of five-card hands."""
        classify = classify or HandEvaluator.classify
        beats = beats or HandEvaluator.beats
        if not candidates:
            raise InvalidArgumentError("No candidate hands to choose from")

        best_cards = candidates[0]
        best_level = classify(best_cards)
        for hand in candidates[1:]:
            level = classify(hand)
            if beats(level, best_level):
                best_level = level
                best_cards = hand
        return best_level, list(best_cards)

    @staticmethod
    def _sorted_hand(cards: Sequence[Card], ace_low: bool) -> List[Card]:
        if len(cards) != HAND_SIZE:
            raise InvalidArgumentError(f"Expected exactly five cards, found {len(cards)}")
        return sort_cards(cards, ace_low=ace_low)

    @staticmethod
    def _straight_high(counts: Counter) -> Optional[Rank]:
        for straight in STRAIGHTS:
            if all(counts[r] == 1 for r in straight):
                return straight[0]
        return None

    @staticmethod
    def _four_or_full_house(cards: List[Card], counts: Counter) -> Optional[HandLevel]:
        for rank, count in counts.items():
            if count == 4:
                kicker = next(c.rank for c in cards if c.rank != rank)
                return HandLevel(HandClass.FOUR_OF_A_KIND, (rank, kicker))

        if sorted(counts.values()) == [2, 3]:
            trips = next(r for r, n in counts.items() if n == 3)
            pair = next(r for r, n in counts.items() if n == 2)
            return HandLevel(HandClass.FULL_HOUSE, (trips, pair))
        return None

    @staticmethod
    def _by_pairs(cards: List[Card], counts: Counter, rank_order: Sequence[Rank]) -> HandLevel:
        """Classify by multiplicities once quads and full houses are excluded.

        Kickers follow the order of the already-sorted cards.
        """
        trips = [r for r in rank_order if counts[r] == 3]
        pairs = [r for r in rank_order if counts[r] == 2]
        singles = [r for r in rank_order if counts[r] == 1]

        if trips:
            kickers = tuple(c.rank for c in cards if c.rank != trips[0])
            return HandLevel(HandClass.THREE_OF_A_KIND, (trips[0],) + kickers)

        if len(pairs) == 2:
            return HandLevel(HandClass.TWO_PAIR, (pairs[0], pairs[1], singles[0]))

        if pairs:
            kickers = tuple(c.rank for c in cards if c.rank != pairs[0])
            return HandLevel(HandClass.ONE_PAIR, (pairs[0],) + kickers)

        return HandLevel(HandClass.HIGH_CARD, tuple(c.rank for c in cards))
