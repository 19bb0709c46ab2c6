"""Errors raised by the hand and game state machines.

Every error leaves the receiving Hand/Game untouched, so callers may retry
with corrected input.
"""


class PinochleError(Exception):
    """Base class for all errors raised by this service."""


class HandError(PinochleError):
    pass


class HandPhaseError(HandError):
    """The hand is not in the phase the operation requires."""

    def __init__(self, message: str):
        super().__init__(f"Invalid state transition: {message}")


class InvalidBidError(HandError):
    def __init__(self, amount: int):
        self.amount = amount
        super().__init__(
            f"Invalid bid: {amount}. Must follow increment rules"
        )


class InvalidTricksError(HandError):
    """Tricks must sum to 50 once a single zero has been inferred."""

    def __init__(self, us: int, them: int):
        self.us = us
        self.them = them
        super().__init__(f"Total tricks must equal 50: {us} + {them}")


class GameError(PinochleError):
    pass


class GamePhaseError(GameError):
    def __init__(self, message: str):
        super().__init__(f"Invalid state transition: {message}")


class NoCurrentHandError(GameError):
    def __init__(self, message: str = "No current hand"):
        super().__init__(f"Invalid game operation: {message}")


class GameHandError(GameError):
    """A hand transition failed while the game delegated to it."""

    def __init__(self, hand_error: HandError):
        self.hand_error = hand_error
        super().__init__(f"Hand error: {hand_error}")
