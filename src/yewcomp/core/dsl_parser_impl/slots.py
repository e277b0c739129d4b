"""
Section slot table.

Each of the six sections owns one slot that is either unfilled or filled
exactly once. Missing sections are reported in ``REQUIRED_SECTIONS`` order;
requiring another section only means adding it to that table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..ir.sections import REQUIRED_SECTIONS, SectionKind


@dataclass(frozen=True)
class Filled:
    """A filled slot and its payload."""

    payload: Any


class SectionSlots:
    """Tracks which sections have been defined."""

    def __init__(self, order: tuple[SectionKind, ...] = REQUIRED_SECTIONS):
        self.order = order
        self._slots: dict[SectionKind, Filled | None] = {kind: None for kind in order}

    def is_filled(self, kind: SectionKind) -> bool:
        return self._slots[kind] is not None

    def fill(self, kind: SectionKind, payload: Any) -> None:
        if self.is_filled(kind):
            raise ValueError(f"{kind.label} is already filled")
        self._slots[kind] = Filled(payload)

    def first_missing(self) -> SectionKind | None:
        """Return the first unfilled section in table order."""
        for kind in self.order:
            if self._slots[kind] is None:
                return kind
        return None

    def payload(self, kind: SectionKind) -> Any:
        slot = self._slots[kind]
        if slot is None:
            raise KeyError(kind.label)
        return slot.payload
