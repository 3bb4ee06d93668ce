"""Staff and client accounts."""

from __future__ import annotations

from typing import Callable, Optional

from ..data.repository import Repository
from ..models.domain import Role, User
from ..models.patches import UserPatch
from .audit import AuditService
from .records import new_id, utc_now

AVATAR_URL = "https://api.dicebear.com/7.x/avataaars/svg?seed={seed}"


class UserService:
    def __init__(self, repository: Repository[User], audit: AuditService, clock: Callable = utc_now) -> None:
        self.repository = repository
        self.audit = audit
        self.clock = clock

    def list_users(self, role: Optional[Role] = None) -> list[User]:
        users = self.repository.list()
        if role is None:
            return users
        return [user for user in users if user.role == role]

    def get_user(self, user_id: str) -> User:
        return self.repository.get(user_id)

    def create_user(self, patch: UserPatch, *, actor_name: str = "System") -> User:
        name = patch.name or "New user"
        user = User(
            id=new_id("u"),
            name=name,
            role=patch.role or Role.EMPLOYEE,
            email=patch.email or None,
            avatar=patch.avatar or AVATAR_URL.format(seed=name.replace(" ", "+")),
            status="active",
            department=patch.department or None,
            position=patch.position or None,
            salary=patch.salary or None,
            hire_date=self.clock().date().isoformat(),
        )
        self.repository.add(user)
        self.audit.record("CREATE_USER", actor_name, f"User {user.id} created: {user.name}")
        return user

    def update_user(self, user_id: str, patch: UserPatch, *, actor_name: str = "System") -> User:
        updated = self.repository.apply(user_id, patch)
        self.audit.record("UPDATE_USER", actor_name, f"User {user_id} updated")
        return updated
