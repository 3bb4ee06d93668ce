"""User account schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from ..models.domain import Role
from ..models.patches import UserPatch


class UserPayload(BaseModel):
    name: Optional[str] = None
    role: Optional[Role] = None
    email: Optional[str] = None
    avatar: Optional[str] = None
    status: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    salary: Optional[float] = Field(default=None, ge=0.0)

    def to_patch(self) -> UserPatch:
        return UserPatch(**_present(self.model_dump(exclude_unset=True)))


NULLABLE_FIELDS = {"email", "avatar", "status", "department", "position", "salary"}


def _present(values: dict) -> dict:
    # name and role are required on the user; a null for them means "leave as is".
    return {key: value for key, value in values.items() if value is not None or key in NULLABLE_FIELDS}
