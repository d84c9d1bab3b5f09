"""
Health probe.

GET /health -> {"ok": true, "uptime": <seconds since process start>}
"""

from __future__ import annotations

import time

from fastapi import APIRouter

from storefront.schemas.common import HealthOut

router = APIRouter(tags=["infra"])

_STARTED_AT = time.monotonic()


def uptime_seconds() -> float:
    return round(time.monotonic() - _STARTED_AT, 3)


@router.get("/health", response_model=HealthOut)
def health() -> HealthOut:
    return HealthOut(ok=True, uptime=uptime_seconds())
