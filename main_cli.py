import random

from config import GameConfig
from cardmatch.engine import CardGameEngine
from controllers.cli_controller import CLIController, get_num_packs_from_user
from utils import safe_print


def main(input_fn=input):
    random.seed(GameConfig.SEED)

    num_packs = get_num_packs_from_user(input_fn=input_fn)
    if num_packs is None:
        safe_print("\nNo number of packs given. Exiting.")
        return None

    engine = CardGameEngine.new_game(num_packs, echo=False)

    cli = CLIController(engine)
    return cli.run()


if __name__ == "__main__":
    main()
