from __future__ import annotations

from typing import Optional

from .model import ShiftConfig


class InMemoryShiftRepository:
    def __init__(self, *, config: ShiftConfig | None = None):
        self._config = config

    def get_config(self) -> Optional[ShiftConfig]:
        return self._config

    def save_config(self, config: ShiftConfig) -> None:
        self._config = config
