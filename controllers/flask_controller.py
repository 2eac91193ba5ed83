from flask import jsonify

from cardmatch.errors import GameOverError, GameStalledError
from cardmatch.models import PlayerTurn
from utils import safe_print


class FlaskGameController:
    def __init__(self, engine):
        self.engine = engine

    def get_state(self):
        return jsonify(self.engine.get_state())

    def take_turn(self):
        acting = self.engine.state.current_player
        safe_print(f"[FLASK_CTRL] Turn request - Player: {acting.label}, Turn: {self.engine.state.turn_count}")

        try:
            result = self.engine.take_turn()
        except GameOverError as e:
            return jsonify({**e.to_dict(), "ui_state": self.engine.consume_ui_state()}), 409
        except GameStalledError as e:
            safe_print(f"[FLASK_CTRL] Game stalled after {self.engine.state.turn_count} turns")
            return jsonify({**e.to_dict(), "ui_state": self.engine.consume_ui_state()}), 409

        return jsonify({"turn": result.to_dict(), "ui_state": self.engine.consume_ui_state()})

    def run(self, max_turns):
        if self.engine.state.game_over:
            return jsonify({**GameOverError().to_dict(), "ui_state": self.engine.consume_ui_state()}), 409

        state = self.engine.run(max_turns=max_turns)
        safe_print(f"[FLASK_CTRL] Run finished - turns: {state.turn_count}, game over: {state.game_over}")

        return jsonify({"finished": state.game_over, "ui_state": self.engine.consume_ui_state()})

    def player_details(self):
        players = []
        for turn in PlayerTurn:
            hand = self.engine.player_hand(turn)
            players.append({
                "id": int(turn),
                "name": turn.label,
                "hand_count": len(hand),
                "hand": [str(c) for c in hand]
            })

        return jsonify({
            "players": players,
            "current_player": self.engine.state.current_player.label,
            "game_over": self.engine.state.game_over,
        })
