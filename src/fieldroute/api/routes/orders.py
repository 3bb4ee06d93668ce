"""Service order endpoints."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...data.repository import NotFoundError
from ...models.domain import ServiceOrder
from ...schemas.orders import OrderCreateRequest, OrderPayload
from ...services.container import Services
from ..dependencies import get_services

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=List[ServiceOrder], status_code=status.HTTP_200_OK)
def list_orders(
    technician_id: Optional[str] = Query(default=None, description="Only orders assigned to this technician"),
    services: Services = Depends(get_services),
) -> List[ServiceOrder]:
    if technician_id:
        return services.orders.orders_for_technician(technician_id)
    return services.orders.list_orders()


@router.get("/{order_id}", response_model=ServiceOrder, status_code=status.HTTP_200_OK)
def get_order(order_id: str, services: Services = Depends(get_services)) -> ServiceOrder:
    try:
        return services.orders.get_order(order_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.post("", response_model=ServiceOrder, status_code=status.HTTP_201_CREATED)
def create_order(payload: OrderCreateRequest, services: Services = Depends(get_services)) -> ServiceOrder:
    try:
        return services.orders.save_order(payload.to_patch(), payload.id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error saving order: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to save order: {str(exc)}"
        ) from exc


@router.patch("/{order_id}", response_model=ServiceOrder, status_code=status.HTTP_200_OK)
def update_order(order_id: str, payload: OrderPayload, services: Services = Depends(get_services)) -> ServiceOrder:
    try:
        return services.orders.update_order(order_id, payload.to_patch())
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error updating order {order_id}: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update order: {str(exc)}"
        ) from exc
