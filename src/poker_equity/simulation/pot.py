"""Ranking players and splitting pots between winners."""

from functools import cmp_to_key
from typing import List, Sequence

from poker_equity.models.hand_level import HandLevel
from poker_equity.models.outcome import PlayerOutcome
from poker_equity.simulation.evaluator import Comparator, HandEvaluator


class PotSplitter:
    """Decides winners and pot shares for a single deal."""

    @staticmethod
    def sort_outcomes(outcomes: Sequence[PlayerOutcome],
                      beats: Comparator = None) -> List[PlayerOutcome]:
        """Sort by hand strength descending, then player number ascending."""
        beats = beats or HandEvaluator.beats

        def order(a: PlayerOutcome, b: PlayerOutcome) -> int:
            if beats(a.level, b.level):
                return -1
            if beats(b.level, a.level):
                return 1
            return a.player - b.player

        return sorted(outcomes, key=cmp_to_key(order))

    @staticmethod
    def best_level(levels: Sequence[HandLevel], beats: Comparator = None) -> HandLevel:
        beats = beats or HandEvaluator.beats
        best = levels[0]
        for level in levels[1:]:
            if beats(level, best):
                best = level
        return best

    @staticmethod
    def winner_flags(levels: Sequence[HandLevel], beats: Comparator = None) -> List[bool]:
        """Flag every level that the strongest level does not beat."""
        beats = beats or HandEvaluator.beats
        if not levels:
            return []
        best = PotSplitter.best_level(levels, beats)
        return [not beats(best, level) for level in levels]

    @staticmethod
    def split(share: float, winners: Sequence[bool]) -> List[float]:
        """Divide share equally among the flagged winners.

        Args:
            share: Fraction of the pot being divided (1.0 for a whole pot).
            winners: Winner flag per player.

        Returns:
            Fraction of the whole pot won by each player.
        """
        count = sum(1 for w in winners if w)
        if count == 0:
            return [0.0] * len(winners)
        return [share / count if w else 0.0 for w in winners]

    @staticmethod
    def award(outcomes: Sequence[PlayerOutcome]) -> None:
        """Fill in winner flags and pot fractions for a single high pot."""
        flags = PotSplitter.winner_flags([o.level for o in outcomes])
        for outcome, flag, fraction in zip(outcomes, flags, PotSplitter.split(1.0, flags)):
            outcome.is_winner = flag
            outcome.pot_fraction_won = fraction
