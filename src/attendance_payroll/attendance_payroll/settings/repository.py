from __future__ import annotations

from typing import Optional, Protocol

from .model import SystemSettings


class SettingsRepository(Protocol):
    def get(self) -> Optional[SystemSettings]:
        """Return the singleton settings record, or None when not configured."""

        raise NotImplementedError
