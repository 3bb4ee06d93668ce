"""Service report endpoints."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...data.repository import NotFoundError
from ...models.domain import ServiceReport
from ...schemas.operations import ReportCreateRequest
from ...services.container import Services
from ..dependencies import get_services

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("", response_model=List[ServiceReport], status_code=status.HTTP_200_OK)
def list_reports(
    order_id: Optional[str] = Query(default=None),
    services: Services = Depends(get_services),
) -> List[ServiceReport]:
    return services.reports.list_reports(order_id)


@router.post("", response_model=ServiceReport, status_code=status.HTTP_201_CREATED)
def submit_report(payload: ReportCreateRequest, services: Services = Depends(get_services)) -> ServiceReport:
    try:
        return services.reports.submit_report(payload.to_report())
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error submitting report for order {payload.order_id}: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to submit report: {str(exc)}"
        ) from exc
