"""Time tracking endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...models.domain import TimeRecord
from ...schemas.operations import TimeRecordRequest
from ...services.container import Services
from ..dependencies import get_services

router = APIRouter(prefix="/time-records", tags=["time-records"])


@router.get("", response_model=List[TimeRecord], status_code=status.HTTP_200_OK)
def list_time_records(
    employee_id: Optional[str] = Query(default=None),
    services: Services = Depends(get_services),
) -> List[TimeRecord]:
    return services.timesheet.list_time_records(employee_id)


@router.post("", response_model=TimeRecord, status_code=status.HTTP_201_CREATED)
def clock(payload: TimeRecordRequest, services: Services = Depends(get_services)) -> TimeRecord:
    try:
        return services.timesheet.clock(
            employee_id=payload.employee_id,
            employee_name=payload.employee_name,
            type=payload.type,
            location=payload.location,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
