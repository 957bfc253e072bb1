"""Per-request access logging in the shape of nginx's ``log_format main``.

Each request produces one line on the ``diceroller.access`` logger::

    1.2.3.4 - - [19/Oct/2026:10:00:00 +0000] "GET /roll/3d6 HTTP/1.1" 200 9 "-" "curl/8.5.0" "-" 0.412ms "-"

Fields: remote address, timestamp, request line, status, response bytes,
Referer, User-Agent, X-Forwarded-For, duration in milliseconds and
X-Request-ID. Absent values render as ``-``.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone

from starlette.requests import Request
from starlette.responses import Response

from diceroller.config import settings

access_logger = logging.getLogger("diceroller.access")

_TIME_FORMAT = "%d/%b/%Y:%H:%M:%S %z"


def _header(request: Request, name: str) -> str:
    return request.headers.get(name) or "-"


def request_line(request: Request) -> str:
    """Return the request line as the client sent it, still percent-encoded."""
    raw_path = request.scope.get("raw_path") or request.scope["path"].encode()
    target = raw_path.decode("latin-1")
    query = request.scope.get("query_string", b"")
    if query:
        target = f"{target}?{query.decode('latin-1')}"
    version = request.scope.get("http_version", "1.1")
    return f"{request.method} {target} HTTP/{version}"


def format_access_line(
    request: Request,
    status_code: int,
    body_bytes: str,
    duration_ms: float,
    now: datetime | None = None,
) -> str:
    """Render one access-log line.

    Args:
        request: The incoming request.
        status_code: Status of the response sent back.
        body_bytes: Response content-length, or "-" when unknown.
        duration_ms: Time spent handling the request, in milliseconds.
        now: Timestamp to print; defaults to the current UTC time.
    """
    now = now or datetime.now(timezone.utc)
    remote = request.client.host if request.client else "-"
    return (
        f"{remote} - - [{now.strftime(_TIME_FORMAT)}] "
        f'"{request_line(request)}" {status_code} {body_bytes} '
        f'"{_header(request, "referer")}" "{_header(request, "user-agent")}" '
        f'"{_header(request, "x-forwarded-for")}" {duration_ms:.3f}ms '
        f'"{_header(request, "x-request-id")}"'
    )


async def access_log_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    if not settings.access_log:
        return await call_next(request)

    start = time.perf_counter()
    status_code = 500
    body_bytes = "-"
    try:
        response = await call_next(request)
        status_code = response.status_code
        body_bytes = response.headers.get("content-length", "-")
        return response
    finally:
        duration_ms = (time.perf_counter() - start) * 1000
        access_logger.info(format_access_line(request, status_code, body_bytes, duration_ms))
