from cardmatch.models import PlayerTurn


class GameState:
    """
    Holds mutable game state that is not part of the decks.
    """
    def __init__(self, current_player=PlayerTurn.PLAYER_ONE):
        self.current_player = current_player
        self.turn_count = 0
        self.reshuffle_count = 0
        self.game_over = False
        self.empty_hand = None  # PlayerTurn whose hand emptied first
        self.stalled = False
        self.last_turn = None

    def finish(self, empty_hand=None, stalled=False):
        self.game_over = True
        self.empty_hand = empty_hand
        self.stalled = stalled
