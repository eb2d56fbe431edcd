"""Poker hand evaluation and equity simulation for Hold'em and Omaha/8."""

__version__ = "0.1.0"
