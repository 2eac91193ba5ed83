"""
Exceptions raised by the deck and turn engine.
"""


class CardGameError(Exception):
    """Base class for card game errors."""

    def to_dict(self):
        return {"error": str(self), "type": type(self).__name__}


class EmptyDeckError(CardGameError):
    def __init__(self, message="Cannot draw from an empty deck"):
        super().__init__(message)


class GameStalledError(EmptyDeckError):
    """
    A card had to be revealed or drawn while both the hidden deck and the
    played deck were empty. Every card is held by the players and the
    game cannot continue.
    """

    def __init__(self, message="No cards left in the hidden or played deck"):
        super().__init__(message)


class GameOverError(CardGameError):
    def __init__(self, message="Game is already over"):
        super().__init__(message)
