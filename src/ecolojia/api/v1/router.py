"""API v1 router aggregating all endpoint routers.

All endpoints are mounted under /api/v1/ecolojia/ via the v1_prefix
configuration.
"""

from __future__ import annotations

from fastapi import APIRouter

from ecolojia.api.v1.endpoints import cosmetics, detergents, health


router = APIRouter()

router.include_router(health.router)
router.include_router(cosmetics.router)
router.include_router(detergents.router)
