"""Inventory endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ...data.repository import NotFoundError
from ...models.domain import InventoryItem
from ...schemas.operations import InventoryAdjustRequest, InventoryItemRequest, InventorySummary
from ...services.container import Services
from ..dependencies import get_services

router = APIRouter(prefix="/inventory", tags=["inventory"])


@router.get("", response_model=List[InventoryItem], status_code=status.HTTP_200_OK)
def list_items(services: Services = Depends(get_services)) -> List[InventoryItem]:
    return services.inventory.list_items()


@router.get("/low-stock", response_model=List[InventoryItem], status_code=status.HTTP_200_OK)
def low_stock(services: Services = Depends(get_services)) -> List[InventoryItem]:
    return services.inventory.low_stock()


@router.get("/summary", response_model=InventorySummary, status_code=status.HTTP_200_OK)
def summary(services: Services = Depends(get_services)) -> InventorySummary:
    return InventorySummary(
        item_count=len(services.inventory.list_items()),
        low_stock_count=len(services.inventory.low_stock()),
        stock_value=round(services.inventory.stock_value(), 2),
    )


@router.post("", response_model=InventoryItem, status_code=status.HTTP_201_CREATED)
def create_item(payload: InventoryItemRequest, services: Services = Depends(get_services)) -> InventoryItem:
    try:
        return services.inventory.save_item(payload.to_patch())
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.patch("/{item_id}", response_model=InventoryItem, status_code=status.HTTP_200_OK)
def update_item(item_id: str, payload: InventoryItemRequest, services: Services = Depends(get_services)) -> InventoryItem:
    try:
        services.inventory.get_item(item_id)
        return services.inventory.save_item(payload.to_patch(), item_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.post("/{item_id}/adjust", response_model=InventoryItem, status_code=status.HTTP_200_OK)
def adjust_item(item_id: str, payload: InventoryAdjustRequest, services: Services = Depends(get_services)) -> InventoryItem:
    try:
        return services.inventory.adjust_quantity(item_id, payload.delta)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
