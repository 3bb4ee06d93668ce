"""Technician route endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ...schemas.routing import RoutePreviewRequest, RouteViewResponse
from ...services.container import Services
from ...services.routing.service import build_route_view
from ..dependencies import get_services

router = APIRouter(prefix="/routes", tags=["routes"])


@router.get("/{technician_id}", response_model=RouteViewResponse, status_code=status.HTTP_200_OK)
def technician_route(technician_id: str, services: Services = Depends(get_services)) -> RouteViewResponse:
    """Sequenced, projected route for every order assigned to ``technician_id``."""
    try:
        return RouteViewResponse.from_view(services.orders.route_for_technician(technician_id))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error building route for technician {technician_id}: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to build route: {str(exc)}"
        ) from exc


@router.post("/preview", response_model=RouteViewResponse, status_code=status.HTTP_200_OK)
def preview_route(payload: RoutePreviewRequest) -> RouteViewResponse:
    """Route an ad-hoc list of stops without touching stored orders."""
    try:
        view = build_route_view(
            [stop.to_order() for stop in payload.stops],
            maps_base_url=payload.maps_base_url,
        )
        return RouteViewResponse.from_view(view)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error previewing route: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to preview route: {str(exc)}"
        ) from exc
