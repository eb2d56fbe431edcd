"""Configuration loading from environment variables and defaults."""

import os
import random
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name, "").strip()
    return int(value) if value else None


# Simulation defaults
DEFAULT_HANDS_TO_PLAY = int(os.getenv("POKER_HANDS_TO_PLAY", "10000"))
DEFAULT_PLAYERS = int(os.getenv("POKER_PLAYERS", "7"))

# Seed for reproducible runs; unset means fresh entropy per run
RANDOM_SEED = _optional_int("POKER_RANDOM_SEED")

# Logging
LOG_LEVEL = os.getenv("POKER_LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.getenv("POKER_LOG_FILE", "") or None


def make_random(seed: Optional[int] = None) -> random.Random:
    """Create a random source for a simulation run.

    Args:
        seed: Explicit seed. Falls back to RANDOM_SEED, then to system entropy.

    Returns:
        A new random.Random instance owned by the caller.
    """
    if seed is None:
        seed = RANDOM_SEED
    return random.Random(seed)
