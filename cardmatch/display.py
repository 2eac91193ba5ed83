"""
Human-readable names for cards and decks.
"""
from cardmatch.models import Rank, Suit
from utils import safe_print


def suit_to_string(suit: Suit) -> str:
    return suit.value


def rank_to_string(rank: Rank) -> str:
    return rank.name.title()


def card_to_string(card) -> str:
    return f"{rank_to_string(card.rank)} of {suit_to_string(card.suit)}"


def deck_to_strings(deck):
    return [card_to_string(card) for card in deck]


def display_deck(deck, out=safe_print):
    """Write one line per card, bottom of the deck first."""
    for line in deck_to_strings(deck):
        out(line)
