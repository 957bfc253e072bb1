"""FastAPI dependencies for diceroller."""

from __future__ import annotations

import random
import re

from diceroller.dice import DICE_PATTERN


def get_dice_pattern() -> re.Pattern[str]:
    """Return the process-wide notation pattern, compiled once at import."""
    return DICE_PATTERN


def get_rng() -> random.Random:
    """Return a fresh generator for this request.

    Tests override this dependency with a seeded Random.
    """
    return random.Random()
