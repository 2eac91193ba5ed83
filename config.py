"""
Game Configuration
Centralized settings for the card matching game
"""
import os
import random

from utils import env_flag, env_int


class GameConfig:
    """Core game configuration"""

    # Pack settings
    MIN_PACKS = 1
    MAX_PACKS = 10
    DEFAULT_PACKS = 1

    # Deal settings
    HAND_SIZE = 8

    # Upper bound for a full run requested over the API
    MAX_TURNS = 10000

    # Reproducibility: seed for the global random source, None for entropy
    SEED = env_int(os.environ.get('CARDMATCH_SEED'))

    # Echo engine narration to stdout
    ECHO = env_flag(os.environ.get('CARDMATCH_ECHO'), default=True)

    @staticmethod
    def is_valid_pack_count(num_packs):
        return GameConfig.MIN_PACKS <= num_packs <= GameConfig.MAX_PACKS

    @staticmethod
    def make_rng(seed=None):
        """Dedicated random source for one game; seeded when a seed is given."""
        return random.Random(seed)


class FlaskConfig:
    """Web API configuration"""
    SECRET_KEY = os.environ.get('CARDMATCH_SECRET_KEY', 'dev-cardmatch-secret-key')
