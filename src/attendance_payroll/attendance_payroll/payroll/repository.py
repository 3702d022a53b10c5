from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import SalaryRecord


class SalaryRecordRepository(Protocol):
    def upsert(self, record: SalaryRecord) -> SalaryRecord:
        """Create or replace the record keyed on (user_id, month, year)."""

        raise NotImplementedError

    def get(self, *, user_id: str, month: int, year: int) -> Optional[SalaryRecord]:
        raise NotImplementedError

    def list_for_month(self, *, month: int, year: int) -> Sequence[SalaryRecord]:
        raise NotImplementedError
