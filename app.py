from flask import Flask, request, jsonify, abort
from werkzeug.datastructures import ImmutableMultiDict

from config import FlaskConfig
from cardmatch.manager import GameManager
from controllers.flask_controller import FlaskGameController
from Forms import GameStartForm, RunGameForm
from utils import safe_print

app = Flask(__name__)
app.config.from_object(FlaskConfig)

# -----------------------------
# GAME MANAGER (GLOBAL)
# -----------------------------

manager = GameManager()


def _json_formdata():
    """Request JSON object as form data, or None when the body is not an object."""
    payload = request.get_json(silent=True)
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        return None
    # null values count as missing fields
    return ImmutableMultiDict({k: v for k, v in payload.items() if v is not None})


def _engine_or_404(game_id):
    try:
        return manager.get_game(game_id)
    except KeyError:
        abort(404, description="Game not found")


@app.errorhandler(404)
def not_found(e):
    return jsonify({"error": e.description}), 404


# -----------------------------
# GAME LIFECYCLE
# -----------------------------

@app.route("/api/games")
def list_games():
    return jsonify(manager.list_games())


@app.route("/api/game/create", methods=["POST"])
def create_game():
    formdata = _json_formdata()
    if formdata is None:
        return jsonify({"error": "Invalid game settings"}), 400

    form = GameStartForm(formdata=formdata)
    if not form.validate():
        safe_print(f"[APP - CREATE_GAME] Invalid request: {form.errors}")
        return jsonify({"error": "Invalid game settings", "fields": form.errors}), 400

    game_id = manager.create_game(form.num_packs.data, seed=form.seed.data)
    engine = manager.get_game(game_id)

    return jsonify({
        "game_id": game_id,
        "num_packs": form.num_packs.data,
        "state": engine.consume_ui_state(),
    }), 201


@app.route("/api/game/<game_id>", methods=["DELETE"])
def delete_game(game_id):
    if not manager.delete_game(game_id):
        abort(404, description="Game not found")
    return jsonify({"deleted": game_id})


@app.route("/api/game/<game_id>/state")
def game_state(game_id):
    controller = FlaskGameController(_engine_or_404(game_id))
    return controller.get_state()


@app.route("/api/game/<game_id>/player_details")
def player_details(game_id):
    controller = FlaskGameController(_engine_or_404(game_id))
    return controller.player_details()


# -----------------------------
# GAME ACTIONS
# -----------------------------

@app.route("/api/game/<game_id>/turn", methods=["POST"])
def take_turn(game_id):
    controller = FlaskGameController(_engine_or_404(game_id))
    return controller.take_turn()


@app.route("/api/game/<game_id>/run", methods=["POST"])
def run_game(game_id):
    controller = FlaskGameController(_engine_or_404(game_id))

    formdata = _json_formdata()
    if formdata is None:
        return jsonify({"error": "Invalid run settings"}), 400

    form = RunGameForm(formdata=formdata)
    if not form.validate():
        return jsonify({"error": "Invalid run settings", "fields": form.errors}), 400

    return controller.run(form.max_turns.data)


if __name__ == "__main__":
    app.run(debug=True)
