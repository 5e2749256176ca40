"""Application lifespan event handlers.

Startup configures logging and builds the analysis services from the
scoring settings; they live on ``app.state`` for the application's
lifetime. Shutdown only has to drop them since the services hold no
connections.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from ecolojia.core.config import Settings, get_settings
from ecolojia.observability.logging import get_logger, setup_logging
from ecolojia.schemas.enums import ProductCategory
from ecolojia.services.cosmetic import CosmeticAnalysisService
from ecolojia.services.detergent import DetergentAnalysisService
from ecolojia.services.scoring import (
    COSMETIC_SCORING,
    DETERGENT_SCORING,
    RiskPolicy,
    ScoringProfile,
)


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI


logger = get_logger(__name__)


def _build_profile(
    category: ProductCategory,
    weights: dict[str, float],
    default: ScoringProfile,
) -> ScoringProfile:
    """Validate configured weights against the category's components.

    Raises:
        ValueError: If the weights name other components than the analyzers
            produce, or do not sum to 1.
    """
    profile = ScoringProfile(category=category, weights=weights)
    if set(profile.components) != set(default.components):
        msg = (
            f"{category} weights must cover exactly "
            f"{sorted(default.components)}, got {sorted(profile.components)}"
        )
        raise ValueError(msg)
    return profile


def build_services(
    settings: Settings,
) -> tuple[CosmeticAnalysisService, DetergentAnalysisService]:
    """Build both analysis services from the scoring settings."""
    thresholds = settings.scoring.risk_thresholds
    risk_policy = RiskPolicy(
        high_threshold=thresholds.high,
        medium_threshold=thresholds.medium,
    )
    cosmetic = CosmeticAnalysisService(
        scoring=_build_profile(
            ProductCategory.COSMETIC,
            settings.scoring.cosmetic_weights,
            COSMETIC_SCORING,
        ),
        risk_policy=risk_policy,
    )
    detergent = DetergentAnalysisService(
        scoring=_build_profile(
            ProductCategory.DETERGENT,
            settings.scoring.detergent_weights,
            DETERGENT_SCORING,
        ),
        risk_policy=risk_policy,
    )
    return cosmetic, detergent


async def _startup(app: FastAPI, settings: Settings) -> None:
    """Initialize logging and the analysis services.

    Args:
        app: The FastAPI application instance.
        settings: Application settings.
    """
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
        log_file=settings.logging.file,
    )
    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
        debug=settings.app.debug,
    )

    try:
        cosmetic, detergent = build_services(settings)
    except ValueError:
        logger.exception("Invalid scoring configuration")
        raise

    app.state.cosmetic_service = cosmetic
    app.state.detergent_service = detergent
    logger.info(
        "Analysis services initialized",
        risk_high=settings.scoring.risk_thresholds.high,
        risk_medium=settings.scoring.risk_thresholds.medium,
    )
    logger.info("Application startup complete")


async def _shutdown(app: FastAPI) -> None:
    """Release the analysis services.

    Args:
        app: The FastAPI application instance.
    """
    logger.info("Shutting down application")
    app.state.cosmetic_service = None
    app.state.detergent_service = None
    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None - control returns to the application to handle requests.
    """
    settings: Settings = getattr(app.state, "settings", None) or get_settings()
    await _startup(app, settings)
    yield
    await _shutdown(app)
