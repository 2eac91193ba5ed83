import random

from config import GameConfig
from cardmatch.deck import initialize_deck, shuffle_deck, sort_hand
from cardmatch.errors import GameOverError, GameStalledError
from cardmatch.game_state import GameState
from cardmatch.models import Deck, PlayedDeck, PlayerTurn, TurnResult
from cardmatch.rules import find_playable_index, is_game_finished
from utils import safe_print


def _silent(msg):
    pass


# ---------------------
# RESHUFFLE
# ---------------------

def reshuffle_played_deck(hidden_deck, played_deck, rng=None, log=_silent):
    """
    Move the whole played deck, in its current order, under the (empty)
    hidden deck and shuffle. The played deck is left empty with no top card.
    Returns the number of cards moved.
    """
    moved = played_deck.clear()
    hidden_deck.cards.extend(moved)
    shuffle_deck(hidden_deck, rng)
    log("Reshuffling the deck!")
    return len(moved)


def _ensure_hidden_card(hidden_deck, played_deck, result, rng, log):
    if len(hidden_deck) > 0:
        return
    if len(played_deck) == 0:
        raise GameStalledError()
    _record_reshuffle(result, reshuffle_played_deck(hidden_deck, played_deck, rng, log))


def _record_reshuffle(result, moved):
    result.reshuffled = True
    result.reshuffles += 1
    result.reshuffled_count += moved


# ---------------------
# TURN
# ---------------------

def take_turn(hidden_deck, player, played_deck, current_player, rng=None, log=None):
    """
    Resolve one turn for `current_player` holding `player`.

    With nothing played yet, the top of the hidden deck is revealed onto the
    played deck and becomes the top card. The first card in the hand that
    matches the top card by rank or suit is played onto the played deck;
    otherwise the player draws from the hidden deck. Whenever the hidden
    deck ends up empty, the played deck is shuffled back into it.

    Raises GameStalledError when a card is needed but both the hidden deck
    and the played deck are empty, and ValueError when the played deck
    holds cards but has no top card.
    """
    log = log or _silent
    label = current_player.label
    revealed = False

    if played_deck.top_card is None:
        if len(played_deck) > 0:
            raise ValueError("Played deck has cards but no top card")
        if len(hidden_deck) == 0:
            raise GameStalledError()
        top_card = hidden_deck.draw_card()
        played_deck.play(top_card)
        revealed = True
        log(f"{label}'s turn - Top card: {top_card}")
    else:
        top_card = played_deck.top_card
        log(f"{label}'s turn - Top card: {top_card} (last played)")

    result = TurnResult(player=current_player, top_card=top_card, revealed=revealed)

    index = find_playable_index(player.cards, top_card)
    if index is not None:
        card = player.remove_card(index)
        played_deck.play(card)
        result.played = card
        log(f"{label} played card {card}")
    else:
        _ensure_hidden_card(hidden_deck, played_deck, result, rng, log)
        drawn = hidden_deck.draw_card()
        player.add_card(drawn)
        result.drawn = drawn
        log(f"{label} picks a card from the hidden deck")

    if len(hidden_deck) == 0:
        _record_reshuffle(result, reshuffle_played_deck(hidden_deck, played_deck, rng, log))

    return result


# ---------------------
# ENGINE
# ---------------------

class CardGameEngine:
    """
    Owns the four decks of one game and alternates turns between the two
    players until one of their hands is empty.
    """

    def __init__(self, hidden_deck, player_one, player_two, played_deck=None,
                 current_player=PlayerTurn.PLAYER_ONE, rng=None, echo=None):
        self.hidden_deck = hidden_deck
        self.players = [player_one, player_two]
        self.played_deck = played_deck if played_deck is not None else PlayedDeck()
        self.rng = rng or random
        self.echo = GameConfig.ECHO if echo is None else echo
        self.state = GameState(current_player)
        self.ui_log = []
        self._check_finished()

    @classmethod
    def new_game(cls, num_packs=GameConfig.DEFAULT_PACKS, rng=None,
                 hand_size=GameConfig.HAND_SIZE, echo=None):
        """Build and shuffle the hidden deck, deal both hands and sort them."""
        hidden_deck = initialize_deck(num_packs)
        if hand_size * 2 > len(hidden_deck):
            raise ValueError(f"Cannot deal {hand_size} cards each from {len(hidden_deck)} cards")

        shuffle_deck(hidden_deck, rng)

        player_one, player_two = Deck(), Deck()
        for _ in range(hand_size):
            player_one.add_card(hidden_deck.draw_card())
            player_two.add_card(hidden_deck.draw_card())

        sort_hand(player_one)
        sort_hand(player_two)

        engine = cls(hidden_deck, player_one, player_two, rng=rng, echo=echo)
        engine._debug(f"[ENGINE] Game initialized with {num_packs} pack(s)")
        return engine

    # ---------------------
    # STATE HELPERS
    # ---------------------

    def player_hand(self, turn):
        return self.players[int(turn)]

    def is_game_finished(self):
        return is_game_finished(*self.players)

    def total_cards(self):
        return len(self.hidden_deck) + len(self.played_deck) + sum(len(p) for p in self.players)

    def _log(self, msg):
        self.ui_log.append(msg)
        if self.echo:
            safe_print(msg)

    def _debug(self, msg):
        if self.echo:
            safe_print(msg)

    def _check_finished(self):
        if self.state.game_over:
            return True
        for turn in PlayerTurn:
            if len(self.player_hand(turn)) == 0:
                self.state.finish(empty_hand=turn)
                self._debug(f"[ENGINE] {turn.label}'s hand is empty")
                return True
        return False

    # ---------------------
    # TURN CONTROL
    # ---------------------

    def take_turn(self):
        if self._check_finished():
            raise GameOverError()

        current = self.state.current_player
        try:
            result = take_turn(self.hidden_deck, self.player_hand(current), self.played_deck,
                               current, rng=self.rng, log=self._log)
        except GameStalledError:
            self.state.finish(stalled=True)
            self._log("No cards left to draw or reveal. The game is stalled.")
            raise

        self.state.turn_count += 1
        self.state.reshuffle_count += result.reshuffles
        self.state.last_turn = result
        self.state.current_player = current.other()
        self._check_finished()
        return result

    def run(self, max_turns=None):
        """
        Play turns until a hand empties, the game stalls or `max_turns`
        turns have been resolved by this call.
        """
        self._log("Game started!")
        turns = 0
        self._check_finished()
        while not self.state.game_over:
            if max_turns is not None and turns >= max_turns:
                self._debug(f"[ENGINE] Stopped after {turns} turns")
                break
            try:
                self.take_turn()
            except GameStalledError:
                break
            turns += 1

        if self.state.game_over:
            self._log("Game over!")
        return self.state

    # ---------------------
    # UI STATE
    # ---------------------

    def get_state(self):
        top = self.played_deck.top_card
        return {
            "current_player": self.state.current_player.label,
            "turn_count": self.state.turn_count,
            "reshuffle_count": self.state.reshuffle_count,
            "hidden_count": len(self.hidden_deck),
            "played_count": len(self.played_deck),
            "top_card": str(top) if top else None,
            "hands": {turn.label: [str(c) for c in self.player_hand(turn)] for turn in PlayerTurn},
            "game_over": self.state.game_over,
            "empty_hand": self.state.empty_hand.label if self.state.empty_hand is not None else None,
            "stalled": self.state.stalled,
            "ui_log": list(self.ui_log),
        }

    def consume_ui_state(self):
        data = self.get_state()
        last = self.state.last_turn
        data["last_turn"] = last.to_dict() if last else None
        self.ui_log.clear()
        return data
