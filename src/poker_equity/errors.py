"""Exceptions raised by the poker equity core."""


class PokerError(Exception):
    """Base class for all poker_equity errors."""


class CardFormatError(PokerError, ValueError):
    """Card or rank text that does not match the expected notation."""

    def __init__(self, text: str, what: str = "card"):
        self.text = text
        super().__init__(f"Illegally formatted {what} {text!r}")


class InvalidArgumentError(PokerError, ValueError):
    """A structurally invalid argument (caller error, not recoverable)."""
