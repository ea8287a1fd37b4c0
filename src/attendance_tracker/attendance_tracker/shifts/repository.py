from __future__ import annotations

from typing import Optional, Protocol

from .model import ShiftConfig


class ShiftRepository(Protocol):
    def get_config(self) -> Optional[ShiftConfig]:
        raise NotImplementedError

    def save_config(self, config: ShiftConfig) -> None:
        raise NotImplementedError
