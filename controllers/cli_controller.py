from config import GameConfig
from cardmatch.display import display_deck
from cardmatch.errors import GameStalledError
from cardmatch.models import PlayerTurn
from utils import safe_print


def get_num_packs_from_user(input_fn=input, out=safe_print):
    """
    Prompt until the user enters a pack count within the allowed range.
    Returns None when input ends before a valid count is given.
    """
    prompt = (f"Enter the number of packs of cards from "
              f"{GameConfig.MIN_PACKS} to {GameConfig.MAX_PACKS}: ")
    while True:
        try:
            choice = input_fn(prompt).strip()
        except EOFError:
            return None
        try:
            num_packs = int(choice)
        except ValueError:
            out("Enter a whole number.")
            continue

        if GameConfig.is_valid_pack_count(num_packs):
            return num_packs
        out(f"The number of packs must be between {GameConfig.MIN_PACKS} and {GameConfig.MAX_PACKS}.")


class CLIController:
    def __init__(self, engine, out=safe_print):
        self.engine = engine
        self.out = out

    # -----------------------------
    # DISPLAY HELPERS
    # -----------------------------

    def show_hand(self, turn):
        self.out(f"\n{turn.label}'s cards:")
        display_deck(self.engine.player_hand(turn), out=self.out)

    def flush_log(self):
        for line in self.engine.consume_ui_state()["ui_log"]:
            self.out(line)

    def show_result(self):
        state = self.engine.state
        if state.stalled:
            self.out("The game stalled: every card is in the players' hands.")
        elif state.empty_hand is not None:
            self.out(f"{state.empty_hand.label} has no cards left.")

    # -----------------------------
    # MAIN GAME LOOP
    # -----------------------------

    def run(self, max_turns=None):
        for turn in PlayerTurn:
            self.show_hand(turn)

        self.out("\nGame started!")
        turns = 0
        while not self.engine.state.game_over:
            if max_turns is not None and turns >= max_turns:
                break
            acting = self.engine.state.current_player
            self.out("")
            try:
                self.engine.take_turn()
            except GameStalledError:
                self.flush_log()
                break
            turns += 1
            self.flush_log()
            self.show_hand(acting)

        if self.engine.state.game_over:
            self.out("\nGame over!")
            self.show_result()
        return self.engine.state
