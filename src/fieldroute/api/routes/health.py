"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...services.container import Services
from ..dependencies import get_services

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/storage", status_code=status.HTTP_200_OK)
def health_storage(services: Services = Depends(get_services)) -> dict:
    """Report which collections the configured store currently holds."""
    try:
        collections = services.store.keys()
        return {"backend": type(services.store).__name__, "healthy": True, "collections": collections}
    except Exception as exc:
        return {"backend": type(services.store).__name__, "healthy": False, "error": str(exc)}
