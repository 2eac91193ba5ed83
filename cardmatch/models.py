from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, List, Optional

from cardmatch.errors import EmptyDeckError

# -----------------------------
# CARD
# -----------------------------

class Suit(Enum):
    CLUB = "Club"
    SPADE = "Spade"
    HEART = "Heart"
    DIAMOND = "Diamond"


class Rank(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


@dataclass(frozen=True)
class Card:
    suit: Suit
    rank: Rank

    def __str__(self):
        return f"{self.rank.name.title()} of {self.suit.value}"


# -----------------------------
# DECK
# -----------------------------

class Deck:
    """
    Ordered, mutable sequence of cards. The end of the list is the top
    of the deck: draws take from it.
    """

    def __init__(self, cards: Optional[Iterable[Card]] = None):
        self.cards: List[Card] = list(cards) if cards is not None else []

    @property
    def size(self) -> int:
        return len(self.cards)

    def __len__(self):
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)

    def __repr__(self):
        return f"{type(self).__name__}({self.cards!r})"

    def add_card(self, card: Card) -> None:
        self.cards.append(card)

    def remove_card(self, index: int) -> Card:
        return self.cards.pop(index)

    def draw_card(self) -> Card:
        if not self.cards:
            raise EmptyDeckError()
        return self.cards.pop()

    def clear(self) -> List[Card]:
        taken = self.cards[:]
        self.cards.clear()
        return taken


class PlayedDeck(Deck):
    """
    The face-up discard pile. `top_card` is the card the next play must
    match, or None when nothing has been played since the last reshuffle.
    """

    def __init__(self, cards: Optional[Iterable[Card]] = None, top_card: Optional[Card] = None):
        super().__init__(cards)
        self.top_card = top_card

    def play(self, card: Card) -> None:
        self.cards.append(card)
        self.top_card = card

    def clear(self) -> List[Card]:
        self.top_card = None
        return super().clear()


# -----------------------------
# TURN
# -----------------------------

class PlayerTurn(IntEnum):
    PLAYER_ONE = 0
    PLAYER_TWO = 1

    def other(self) -> "PlayerTurn":
        return PlayerTurn.PLAYER_TWO if self is PlayerTurn.PLAYER_ONE else PlayerTurn.PLAYER_ONE

    @property
    def label(self) -> str:
        return f"Player {self.value + 1}"


@dataclass
class TurnResult:
    """What happened during one resolved turn."""
    player: PlayerTurn
    top_card: Card
    revealed: bool = False
    played: Optional[Card] = None
    drawn: Optional[Card] = None
    reshuffled: bool = False
    reshuffles: int = 0
    reshuffled_count: int = 0

    def to_dict(self):
        return {
            "player": self.player.label,
            "top_card": str(self.top_card),
            "revealed": self.revealed,
            "played": str(self.played) if self.played else None,
            "drawn": str(self.drawn) if self.drawn else None,
            "reshuffled": self.reshuffled,
            "reshuffles": self.reshuffles,
            "reshuffled_count": self.reshuffled_count,
        }
