"""The dice roll endpoint."""

from __future__ import annotations

import random
import re

from fastapi import APIRouter, Depends

from diceroller.dependencies import get_dice_pattern, get_rng
from diceroller.dice import evaluate

router = APIRouter()


@router.get("/roll/{dice}", response_model=list[int])
async def roll_dice(
    dice: str,
    pattern: re.Pattern[str] = Depends(get_dice_pattern),
    rng: random.Random = Depends(get_rng),
) -> list[int]:
    """Roll the dice described by the path segment, e.g. /roll/3d6.

    DiceError propagates to the handler registered in main.py.
    """
    return evaluate(dice, pattern=pattern, rng=rng)
