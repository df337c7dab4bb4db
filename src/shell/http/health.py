"""
Health endpoints.

Key behaviors:
- /: Liveness text, kept byte-for-byte stable for existing probes
- /health: JSON status for monitoring
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

LIVENESS_TEXT = "API is running"


def create_health_router(service: str = "api") -> APIRouter:
    """
    Create FastAPI router for health endpoints.

    Args:
        service: Service name reported by /health

    Returns:
        FastAPI router with health endpoints
    """
    router = APIRouter(tags=["health"])

    @router.get(
        "/",
        response_class=PlainTextResponse,
        responses={200: {"description": "Process is alive"}},
    )
    def liveness_check() -> str:
        """Liveness probe. Always 200 while the process serves requests."""
        return LIVENESS_TEXT

    @router.get("/health")
    def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "ok", "service": service}

    return router
