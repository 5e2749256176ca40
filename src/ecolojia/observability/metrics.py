"""Prometheus metrics instrumentation.

Request count, latency and payload size for every analysis endpoint,
exposed under the API prefix so the gateway can scrape them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from prometheus_fastapi_instrumentator import Instrumentator, metrics

from ecolojia.core.config import get_settings
from ecolojia.observability.logging import get_logger


if TYPE_CHECKING:
    from fastapi import FastAPI

    from ecolojia.core.config import Settings

logger = get_logger(__name__)

METRIC_NAMESPACE: Final[str] = "ecolojia"
METRIC_SUBSYSTEM: Final[str] = "http"


def setup_metrics(app: FastAPI, settings: Settings | None = None) -> Instrumentator:
    """Configure Prometheus metrics instrumentation.

    Probes and documentation routes are excluded from the request metrics.

    Args:
        app: The FastAPI application instance.
        settings: Optional settings override, defaults to get_settings().

    Returns:
        The Instrumentator (not attached to the app when metrics are disabled).
    """
    if settings is None:
        settings = get_settings()

    if not settings.observability.metrics.enabled:
        logger.info("Metrics collection disabled")
        return Instrumentator()

    prefix = settings.api.v1_prefix
    instrumentator = Instrumentator(
        should_group_status_codes=True,
        should_ignore_untemplated=True,
        should_instrument_requests_inprogress=True,
        excluded_handlers=[
            f"{prefix}/health",
            f"{prefix}/ready",
            f"{prefix}/metrics",
            "/openapi.json",
            "/docs",
            "/redoc",
        ],
        inprogress_name="http_requests_inprogress",
        inprogress_labels=True,
    )

    instrumentator.add(
        metrics.default(
            metric_namespace=METRIC_NAMESPACE,
            metric_subsystem=METRIC_SUBSYSTEM,
            should_only_respect_2xx_for_highr=False,
        )
    )
    instrumentator.add(
        metrics.request_size(
            should_include_handler=True,
            should_include_method=True,
            should_include_status=True,
            metric_namespace=METRIC_NAMESPACE,
            metric_subsystem=METRIC_SUBSYSTEM,
        )
    )

    instrumentator.instrument(app)

    endpoint = f"{prefix}/metrics"
    instrumentator.expose(
        app,
        endpoint=endpoint,
        include_in_schema=True,
        tags=["Monitoring"],
    )

    logger.info("Prometheus metrics configured", endpoint=endpoint)
    return instrumentator


__all__ = ["setup_metrics"]
