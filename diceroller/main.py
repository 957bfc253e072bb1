from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from diceroller.access_log import access_log_middleware
from diceroller.config import settings
from diceroller.dice import DiceError
from diceroller.errors import dice_error_handler
from diceroller.routers import roll

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log records to stderr; access lines are already fully formatted."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    configure_logging(settings.log_level)
    logger.info("diceroller starting (environment=%s)", settings.environment)
    yield


app = FastAPI(title="diceroller", lifespan=lifespan)

app.middleware("http")(access_log_middleware)
app.include_router(roll.router)
app.add_exception_handler(DiceError, dice_error_handler)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        # Replaced by access_log_middleware.
        access_log=False,
    )


if __name__ == "__main__":
    run()
