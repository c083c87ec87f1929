"""Collection of fail-soft events raised during a cost computation."""

from __future__ import annotations

from ..value_objects import Diagnostic

__all__ = ["DiagnosticLog"]


class DiagnosticLog:
    """Ordered, append-only list of diagnostics for one computation."""

    def __init__(self) -> None:
        self._entries: list[Diagnostic] = []

    def add(self, location: str, reason: str) -> None:
        self._entries.append(Diagnostic(location=location, reason=reason))

    def freeze(self) -> tuple[Diagnostic, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)
