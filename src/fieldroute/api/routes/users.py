"""User endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...data.repository import NotFoundError
from ...models.domain import Role, User
from ...schemas.users import UserPayload
from ...services.container import Services
from ..dependencies import get_services

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[User], status_code=status.HTTP_200_OK)
def list_users(
    role: Optional[Role] = Query(default=None),
    services: Services = Depends(get_services),
) -> List[User]:
    return services.users.list_users(role)


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserPayload, services: Services = Depends(get_services)) -> User:
    return services.users.create_user(payload.to_patch())


@router.patch("/{user_id}", response_model=User, status_code=status.HTTP_200_OK)
def update_user(user_id: str, payload: UserPayload, services: Services = Depends(get_services)) -> User:
    try:
        return services.users.update_user(user_id, payload.to_patch())
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
