import pytest

from cardmatch.manager import GameManager


@pytest.fixture
def manager():
    return GameManager(echo=False)


def test_create_and_get_game(manager):
    game_id = manager.create_game(2, seed=5)
    engine = manager.get_game(game_id)
    assert engine.total_cards() == 104
    assert len(engine.players[0]) == 8


def test_same_seed_same_deal(manager):
    a = manager.get_game(manager.create_game(1, seed=21))
    b = manager.get_game(manager.create_game(1, seed=21))
    assert a.players[0].cards == b.players[0].cards
    assert a.players[1].cards == b.players[1].cards


@pytest.mark.parametrize("num_packs", [0, 11, -3])
def test_create_game_rejects_invalid_pack_count(manager, num_packs):
    with pytest.raises(ValueError):
        manager.create_game(num_packs)
    assert manager.games == {}


def test_unknown_game(manager):
    with pytest.raises(KeyError):
        manager.get_game("missing")


def test_delete_and_list_games(manager):
    keep = manager.create_game(1, seed=1)
    drop = manager.create_game(3, seed=2)

    listing = manager.list_games()
    assert set(listing) == {keep, drop}
    assert listing[drop]["num_packs"] == 3
    assert listing[keep]["status"] == "active"
    assert listing[keep]["turns"] == 0

    assert manager.delete_game(drop) is True
    assert manager.delete_game(drop) is False
    assert set(manager.list_games()) == {keep}
