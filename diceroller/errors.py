"""Translate evaluator errors into HTTP responses.

The evaluator raises DiceError subclasses and knows nothing about HTTP;
this module is the only place that maps an error kind to a status code.
"""

from __future__ import annotations

import logging

from fastapi.responses import PlainTextResponse
from starlette.requests import Request

from diceroller.dice import DiceError, LimitExceeded, MalformedInput, NonNumericField, ZeroValue

logger = logging.getLogger(__name__)

# Every kind is caller error.
STATUS_BY_KIND: dict[str, int] = {
    MalformedInput.kind: 400,
    NonNumericField.kind: 400,
    ZeroValue.kind: 400,
    LimitExceeded.kind: 400,
}


def status_for(exc: DiceError) -> int:
    return STATUS_BY_KIND.get(exc.kind, 400)


async def dice_error_handler(request: Request, exc: DiceError) -> PlainTextResponse:
    logger.debug("Rejected dice request %r: %s", request.url.path, exc.kind)
    return PlainTextResponse(exc.message, status_code=status_for(exc))
