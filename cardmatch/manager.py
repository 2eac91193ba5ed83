import uuid
import time

from config import GameConfig
from cardmatch.engine import CardGameEngine
from utils import safe_print


class GameManager:
    """
    Responsible for creating, storing, and managing game sessions.
    Sessions live in memory only and are gone when the process exits.
    """

    def __init__(self, echo=None):
        # game_id -> session data
        self.games = {}
        self.echo = echo

    # -----------------------------
    # CREATE GAME
    # -----------------------------

    def create_game(self, num_packs=GameConfig.DEFAULT_PACKS, seed=None):
        """
        Creates a new game session and returns game_id.
        """
        if not GameConfig.is_valid_pack_count(num_packs):
            raise ValueError(
                f"Number of packs must be between {GameConfig.MIN_PACKS} and {GameConfig.MAX_PACKS}"
            )

        game_id = str(uuid.uuid4())
        rng = GameConfig.make_rng(seed)
        engine = CardGameEngine.new_game(num_packs, rng=rng, echo=self.echo)

        self.games[game_id] = {
            "engine": engine,
            "num_packs": num_packs,
            "seed": seed,
            "created_at": time.time(),
        }

        safe_print(f"[MANAGER] Created game {game_id} ({num_packs} pack(s))")

        return game_id

    # -----------------------------
    # GET GAME
    # -----------------------------

    def get_game(self, game_id):
        session = self.games.get(game_id)

        if not session:
            raise KeyError("Game not found")

        return session["engine"]

    # -----------------------------
    # DELETE GAME
    # -----------------------------

    def delete_game(self, game_id):
        if game_id not in self.games:
            return False
        del self.games[game_id]
        safe_print(f"[MANAGER] Deleted game {game_id}")
        return True

    # -----------------------------
    # LIST GAMES (DEBUG / ADMIN)
    # -----------------------------

    def list_games(self):
        return {
            gid: {
                "num_packs": data["num_packs"],
                "status": "finished" if data["engine"].state.game_over else "active",
                "turns": data["engine"].state.turn_count,
                "age": time.time() - data["created_at"]
            }
            for gid, data in self.games.items()
        }
