"""
Request timeout + request logging middleware.
"""

from __future__ import annotations

import asyncio
import logging
import time

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from .errors import RequestTimeout, to_response

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


class RequestTimeoutMiddleware:
    """
    Answer 408 for any request that runs longer than `timeout_seconds`.

    The downstream app runs under `asyncio.wait_for`, so on timeout the
    handler task itself is cancelled. A connection it had checked out is
    released through asyncpg's `acquire()` context, which resets or
    terminates it, so a half-finished query never goes back to the pool.
    """

    def __init__(self, app: ASGIApp, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        self.app = app
        self.timeout_seconds = timeout_seconds

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        started = time.perf_counter()
        response_started = False
        status_code = 500

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started, status_code
            if message["type"] == "http.response.start":
                response_started = True
                status_code = message["status"]
            await send(message)

        try:
            await asyncio.wait_for(self.app(scope, receive, send_wrapper), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning(
                "request_timeout method=%s path=%s timeout_s=%s response_started=%s",
                scope.get("method"),
                scope.get("path"),
                self.timeout_seconds,
                response_started,
            )
            # Headers already on the wire cannot be replaced; the body is just cut short.
            if not response_started:
                response = to_response(RequestTimeout())
                status_code = response.status_code
                await response(scope, receive, send)

        logger.info(
            "request method=%s path=%s status=%s duration_ms=%.1f",
            scope.get("method"),
            scope.get("path"),
            status_code,
            (time.perf_counter() - started) * 1000,
        )
