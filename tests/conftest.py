"""Shared test fixtures and configuration for the Ecolojia scoring tests.

Selects the ``test`` configuration environment before any settings are
loaded and provides the analysis services used across test modules.
"""

from __future__ import annotations

import os


os.environ["APP_ENV"] = "test"

from typing import TYPE_CHECKING  # noqa: E402

import pytest  # noqa: E402

from ecolojia.core.config import get_settings  # noqa: E402
from ecolojia.services.cosmetic import CosmeticAnalysisService  # noqa: E402
from ecolojia.services.detergent import DetergentAnalysisService  # noqa: E402


if TYPE_CHECKING:
    from collections.abc import Generator


# Ingredient lists shared by the service and API tests
SAFE_COSMETIC = "AQUA, GLYCERIN, HYALURONIC ACID, TOCOPHEROL, ALOE EXTRACT"
RISKY_COSMETIC = "AQUA, BUTYLPARABEN, TRICLOSAN, BHA, BENZOPHENONE-3"
ECO_DETERGENT = "AQUA, COCO GLUCOSIDE, SODIUM BICARBONATE, CITRIC ACID, PROTEASE"
TOXIC_DETERGENT = (
    "AQUA, SODIUM LAURYL SULFATE, SODIUM TRIPOLYPHOSPHATE, "
    "METHYLISOTHIAZOLINONE, DICHLOROMETHANE, BHA"
)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None]:
    """Drop cached settings so environment changes in a test do not leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def cosmetic_service() -> CosmeticAnalysisService:
    """Cosmetic analysis service with the default policies."""
    return CosmeticAnalysisService()


@pytest.fixture
def detergent_service() -> DetergentAnalysisService:
    """Detergent analysis service with the default policies."""
    return DetergentAnalysisService()
