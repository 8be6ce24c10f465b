"""
Exception types for the Hold'em rules core.
"""


class HoldemError(Exception):
    """Base class for errors raised by the rules core."""


class InvalidCardError(HoldemError, ValueError):
    """A card string or (rank, suit) pair does not name one of the 52 cards."""


class InvalidHandError(HoldemError, ValueError):
    """Cards passed to the evaluator break its calling contract."""


class ConfigError(HoldemError):
    """An environment setting could not be parsed."""
