"""Request timing middleware.

Adds an ``X-Process-Time`` header and warns about analyses slower than
the configured threshold.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from ecolojia.observability.logging import get_logger


if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp


logger = get_logger(__name__)


class TimingMiddleware(BaseHTTPMiddleware):
    """Measure request processing time."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        slow_threshold: float,
        header_name: str = "X-Process-Time",
    ) -> None:
        """Initialize the middleware.

        Args:
            app: The wrapped ASGI application.
            slow_threshold: Seconds after which a request is logged as slow.
            header_name: Response header receiving the elapsed time.
        """
        super().__init__(app)
        self.slow_threshold = slow_threshold
        self.header_name = header_name

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process request and measure time."""
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start

        elapsed_ms = round(elapsed * 1000, 2)
        response.headers[self.header_name] = f"{elapsed_ms}ms"

        if elapsed > self.slow_threshold:
            logger.warning(
                "Slow request detected",
                method=request.method,
                path=request.url.path,
                process_time_ms=elapsed_ms,
                threshold_ms=self.slow_threshold * 1000,
            )
        return response
