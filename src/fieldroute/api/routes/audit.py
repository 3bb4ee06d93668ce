"""Audit log endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query, status

from ...models.domain import AuditLog
from ...services.container import Services
from ..dependencies import get_services

router = APIRouter(prefix="/audit-logs", tags=["audit"])


@router.get("", response_model=List[AuditLog], status_code=status.HTTP_200_OK)
def list_logs(
    limit: int = Query(default=100, ge=1, le=1000),
    services: Services = Depends(get_services),
) -> List[AuditLog]:
    return services.audit.list_logs()[:limit]
