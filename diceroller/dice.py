"""Dice notation evaluator.

Accepts ``NdM`` notation only: ``N`` dice with ``M`` sides each.
Examples: 3d6, 1d20, 100d1000.

Validation runs in a fixed order so the same bad input always yields the
same error: pattern match, numeric conversion, zero check, then limits.
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass

DICE_PATTERN = re.compile(r"^(\d+)d(\d+)$")

MAX_ROLLS = 100
MAX_SIDES = 1000

# Largest value a field may hold before it counts as unreadable.
MAX_FIELD_VALUE = 2**64 - 1


class DiceError(ValueError):
    """Raised when a dice request cannot be evaluated."""

    kind = "dice_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MalformedInput(DiceError):
    kind = "malformed_input"

    def __init__(self) -> None:
        super().__init__("Invalid format. Use [rolls]d[sides].")


class NonNumericField(DiceError):
    kind = "non_numeric_field"

    def __init__(self, field: str) -> None:
        super().__init__(f"Invalid {field} format. Must be a positive integer.")
        self.field = field


class ZeroValue(DiceError):
    kind = "zero_value"

    def __init__(self) -> None:
        super().__init__("Rolls and sides must be greater than 0.")


class LimitExceeded(DiceError):
    kind = "limit_exceeded"

    def __init__(self) -> None:
        super().__init__(
            f"Rolls must be {MAX_ROLLS} or fewer, and sides must be {MAX_SIDES} or fewer."
        )


@dataclass(frozen=True)
class RollSpecification:
    rolls: int
    sides: int


def _to_int(digits: str, field: str) -> int:
    # \d also matches non-ASCII decimal digits
    if not (digits.isascii() and digits.isdigit()):
        raise NonNumericField(field)
    try:
        value = int(digits)
    except ValueError as exc:
        raise NonNumericField(field) from exc
    if value > MAX_FIELD_VALUE:
        raise NonNumericField(field)
    return value


def parse(notation: str, pattern: re.Pattern[str] = DICE_PATTERN) -> RollSpecification:
    """Parse dice notation into a RollSpecification.

    Args:
        notation: Dice notation string, e.g. "3d6".
        pattern: Compiled pattern with two capture groups (rolls, sides).

    Returns:
        The unvalidated specification; counts may still be zero or too large.

    Raises:
        MalformedInput: If the notation does not match the pattern exactly.
        NonNumericField: If a captured field cannot be read as an integer.
    """
    m = pattern.fullmatch(notation)
    if not m:
        raise MalformedInput()

    rolls = _to_int(m.group(1), "rolls")
    sides = _to_int(m.group(2), "sides")
    return RollSpecification(rolls=rolls, sides=sides)


def validate(spec: RollSpecification) -> RollSpecification:
    """Check bounds; the zero check always wins over the limit check."""
    if spec.rolls == 0 or spec.sides == 0:
        raise ZeroValue()
    if spec.rolls > MAX_ROLLS or spec.sides > MAX_SIDES:
        raise LimitExceeded()
    return spec


def roll(spec: RollSpecification, rng: random.Random | None = None) -> list[int]:
    """Roll every die in spec and return the faces in draw order.

    A fresh generator is created when rng is None, so concurrent requests
    never share generator state.
    """
    if rng is None:
        rng = random.Random()
    return [rng.randint(1, spec.sides) for _ in range(spec.rolls)]


def evaluate(
    notation: str,
    *,
    pattern: re.Pattern[str] = DICE_PATTERN,
    rng: random.Random | None = None,
) -> list[int]:
    """Parse, validate and roll notation.

    Raises:
        DiceError: One of MalformedInput, NonNumericField, ZeroValue or
            LimitExceeded.
    """
    return roll(validate(parse(notation, pattern)), rng)
