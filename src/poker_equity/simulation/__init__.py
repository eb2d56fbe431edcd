"""Poker evaluation and simulation module."""

from poker_equity.simulation.deck import Deck
from poker_equity.simulation.pot import PotSplitter
from poker_equity.simulation.evaluator import HandEvaluator
from poker_equity.simulation.simulator import Omaha8Simulator, Simulator, pot_odds_break_even
from poker_equity.simulation.engine import StartingPair, simulate_holdem, simulate_omaha8

__all__ = [
    "Deck", "PotSplitter", "HandEvaluator",
    "Simulator", "Omaha8Simulator", "pot_odds_break_even",
    "StartingPair", "simulate_holdem", "simulate_omaha8",
]
