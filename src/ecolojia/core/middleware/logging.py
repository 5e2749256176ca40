"""Access logging middleware.

One line when an analysis request arrives and one when it completes, with
method, path and client bound to the log context in between.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from ecolojia.observability.logging import bind_context, get_logger


if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp


logger = get_logger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Structured request/response logging."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        exclude_suffixes: tuple[str, ...] = ("/health", "/ready", "/metrics"),
    ) -> None:
        super().__init__(app)
        self.exclude_suffixes = exclude_suffixes

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log request and response."""
        path = request.url.path
        if path.endswith(self.exclude_suffixes) or path == "/favicon.ico":
            return await call_next(request)

        bind_context(
            method=request.method,
            path=path,
            client_ip=client_ip(request),
        )
        logger.info(
            "Request started",
            content_length=request.headers.get("content-length"),
        )

        response = await call_next(request)

        logger.info("Request completed", status_code=response.status_code)
        return response


def client_ip(request: Request) -> str:
    """Client address, honouring the reverse proxy headers."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip

    if request.client:
        return request.client.host
    return "unknown"
