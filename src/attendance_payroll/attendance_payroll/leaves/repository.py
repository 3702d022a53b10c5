from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import LeaveRequest


class LeaveRepository(Protocol):
    def list_approved_overlapping(self, user_id: str, start_date: date, end_date: date) -> Sequence[LeaveRequest]:
        """APPROVED requests whose [start_date, end_date] intersects the given range.

        Requests spanning into adjacent months are included.
        """

        raise NotImplementedError
