import random

from cardmatch.models import Card, Deck, Rank, Suit

SUITS = [Suit.CLUB, Suit.SPADE, Suit.HEART, Suit.DIAMOND]
RANKS = list(Rank)
PACK_SIZE = len(SUITS) * len(RANKS)


def initialize_deck(num_packs):
    """
    Build an unshuffled deck of `num_packs` standard packs, pack by pack,
    suit by suit, Two through Ace.
    """
    if num_packs < 1:
        raise ValueError(f"Number of packs must be at least 1, got {num_packs}")

    deck = Deck()
    for _ in range(num_packs):
        for suit in SUITS:
            for rank in RANKS:
                deck.add_card(Card(suit, rank))
    return deck


def shuffle_deck(deck, rng=None):
    """Fisher-Yates shuffle in place. `rng` defaults to the global random module."""
    rng = rng or random
    cards = deck.cards
    for i in range(len(cards) - 1, 0, -1):
        j = rng.randint(0, i)
        cards[i], cards[j] = cards[j], cards[i]


def sort_hand(deck):
    # stable, so equal ranks keep their dealt order
    deck.cards.sort(key=lambda card: card.rank)
