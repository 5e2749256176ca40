"""HTTP middleware: request correlation, access logging and timing."""

from ecolojia.core.middleware.logging import LoggingMiddleware
from ecolojia.core.middleware.request_id import RequestIDMiddleware
from ecolojia.core.middleware.timing import TimingMiddleware


__all__ = [
    "LoggingMiddleware",
    "RequestIDMiddleware",
    "TimingMiddleware",
]
