import pytest

from cardmatch.models import Card, Deck, PlayedDeck, Rank, Suit


def card(suit, rank):
    return Card(Suit[suit], Rank[rank])


def deck(*pairs):
    """deck(("HEART", "NINE"), ...) -- last pair is the top of the deck."""
    return Deck(card(s, r) for s, r in pairs)


def played(*pairs):
    cards = [card(s, r) for s, r in pairs]
    return PlayedDeck(cards, top_card=cards[-1] if cards else None)


@pytest.fixture
def client():
    from app import app

    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client
