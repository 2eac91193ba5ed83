import random
from collections import Counter

import pytest

from cardmatch.deck import PACK_SIZE, initialize_deck, shuffle_deck, sort_hand
from cardmatch.models import Card, Deck, Rank, Suit


class FixedRng:
    """Always picks index 0 and records the ranges it was asked for."""

    def __init__(self):
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return 0


@pytest.mark.parametrize("num_packs", range(1, 11))
def test_initialize_deck_has_every_card_per_pack(num_packs):
    deck = initialize_deck(num_packs)
    assert deck.size == num_packs * 52

    counts = Counter(deck.cards)
    assert len(counts) == 52
    assert set(counts.values()) == {num_packs}


def test_initialize_deck_order():
    deck = initialize_deck(1)
    assert PACK_SIZE == 52
    assert deck.cards[0] == Card(Suit.CLUB, Rank.TWO)
    assert deck.cards[12] == Card(Suit.CLUB, Rank.ACE)
    assert deck.cards[13] == Card(Suit.SPADE, Rank.TWO)
    assert deck.cards[-1] == Card(Suit.DIAMOND, Rank.ACE)


def test_initialize_deck_rejects_zero_packs():
    with pytest.raises(ValueError):
        initialize_deck(0)


def test_shuffle_is_a_permutation():
    deck = initialize_deck(2)
    before = Counter(deck.cards)
    shuffle_deck(deck, random.Random(3))
    assert deck.size == 104
    assert Counter(deck.cards) == before


def test_shuffle_is_deterministic_for_a_seed():
    a, b = initialize_deck(1), initialize_deck(1)
    shuffle_deck(a, random.Random(42))
    shuffle_deck(b, random.Random(42))
    assert a.cards == b.cards
    assert a.cards != initialize_deck(1).cards


def test_shuffle_walks_down_from_last_index():
    cards = [Card(Suit.CLUB, Rank.TWO), Card(Suit.CLUB, Rank.THREE), Card(Suit.CLUB, Rank.FOUR)]
    deck = Deck(cards)
    rng = FixedRng()
    shuffle_deck(deck, rng)

    assert rng.calls == [(0, 2), (0, 1)]
    assert deck.cards == [cards[1], cards[2], cards[0]]


@pytest.mark.parametrize("size", [0, 1])
def test_shuffle_small_decks(size):
    deck = Deck(initialize_deck(1).cards[:size])
    rng = FixedRng()
    shuffle_deck(deck, rng)
    assert deck.size == size
    assert rng.calls == []


def test_sort_hand_ascending_by_rank():
    deck = initialize_deck(1)
    shuffle_deck(deck, random.Random(11))
    hand = Deck(deck.cards[:8])
    sort_hand(hand)
    ranks = [c.rank for c in hand]
    assert all(ranks[i] <= ranks[i + 1] for i in range(len(ranks) - 1))
    assert Counter(hand.cards) == Counter(deck.cards[:8])


def test_sort_hand_ignores_suit():
    hand = Deck([
        Card(Suit.DIAMOND, Rank.KING),
        Card(Suit.CLUB, Rank.THREE),
        Card(Suit.HEART, Rank.KING),
        Card(Suit.SPADE, Rank.TWO),
    ])
    sort_hand(hand)
    assert [c.rank for c in hand] == [Rank.TWO, Rank.THREE, Rank.KING, Rank.KING]
