"""Audit trail for changes made through the services."""

from __future__ import annotations

import logging
from typing import Callable

from ..data.repository import Repository
from ..models.domain import AuditLog, Severity
from .records import new_id, parse_timestamp, utc_now

logger = logging.getLogger(__name__)


class AuditService:
    def __init__(self, repository: Repository[AuditLog], clock: Callable = utc_now) -> None:
        self.repository = repository
        self.clock = clock

    def record(self, action: str, actor_name: str, details: str, severity: Severity = Severity.INFO) -> AuditLog:
        entry = AuditLog(
            id=new_id("al"),
            action=action,
            actor_name=actor_name,
            details=details,
            timestamp=self.clock().isoformat(),
            severity=severity,
        )
        logger.info(f"[audit] {action} by {actor_name}: {details}")
        return self.repository.add(entry, prepend=True)

    def list_logs(self) -> list[AuditLog]:
        return sorted(self.repository.list(), key=lambda entry: parse_timestamp(entry.timestamp), reverse=True)
