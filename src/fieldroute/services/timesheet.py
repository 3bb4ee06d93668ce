"""Clock-in / clock-out records."""

from __future__ import annotations

from typing import Callable, Optional

from ..data.repository import Repository
from ..models.domain import TimeRecord, TimeRecordType
from .records import new_id, parse_timestamp, utc_now


class TimesheetService:
    def __init__(self, repository: Repository[TimeRecord], now: Callable = utc_now) -> None:
        self.repository = repository
        self.now = now

    def list_time_records(self, employee_id: Optional[str] = None) -> list[TimeRecord]:
        records = [
            record for record in self.repository.list() if employee_id is None or record.employee_id == employee_id
        ]
        return sorted(records, key=lambda record: parse_timestamp(record.timestamp))

    def last_record(self, employee_id: str) -> Optional[TimeRecord]:
        records = self.list_time_records(employee_id)
        return records[-1] if records else None

    def clock(
        self,
        *,
        employee_id: str,
        employee_name: str,
        type: TimeRecordType,
        location: Optional[str] = None,
        timestamp: Optional[str] = None,
    ) -> TimeRecord:
        """Append a clock event. Two consecutive events of the same type are rejected."""

        with self.repository.lock:
            last = self.last_record(employee_id)
            if last is not None and last.type == type:
                raise ValueError(f"Employee {employee_id} is already {'clocked in' if type == TimeRecordType.CLOCK_IN else 'clocked out'}.")
            record = TimeRecord(
                id=new_id("tr"),
                employee_id=employee_id,
                employee_name=employee_name,
                type=type,
                timestamp=timestamp or self.now().isoformat(),
                location=location or "GPS Location",
            )
            return self.repository.add(record)
