"""Law-check trace, kept apart from the structures themselves.

A Trace collects Evidence about which laws were checked against which
instances. It never influences results: witnesses and folds behave the
same with or without one. Parent links are stored on each event and the
tree is rebuilt only on demand via as_tree().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Evidence:
    """A single recorded event, e.g. one failed associativity check."""

    action: str
    id: int = 0
    parent_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)


class Trace:
    """Recorder for law-check runs.

    A run is opened with begin() and closed with end(). Events recorded
    while a run is open become its children; runs may nest.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._open: list[int] = []

    @property
    def events(self) -> tuple[Evidence, ...]:
        return tuple(self._events)

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        parent_id: int | None = None,
    ) -> int | None:
        """Append an event and return its id (its position in the trace).

        The parent defaults to the innermost open run. Returns None when
        the trace is disabled.
        """
        if not self.enabled:
            return None
        if parent_id is None and self._open:
            parent_id = self._open[-1]
        event_id = len(self._events)
        self._events.append(Evidence(action, event_id, parent_id, info=info or {}))
        return event_id

    def begin(self, instance: str) -> int | None:
        """Open a run of checks against ``instance``."""
        event_id = self.record("law_check_begin", {"instance": instance})
        if event_id is not None:
            self._open.append(event_id)
        return event_id

    def end(self, begin_id: int | None, instance: str, run: int, passed: int) -> None:
        """Close the run opened as ``begin_id`` and record its counts."""
        if begin_id is None:
            return
        self._open.remove(begin_id)
        self.record(
            "law_check_end",
            {"instance": instance, "run": run, "passed": passed},
            parent_id=begin_id,
        )

    def find_all(self, **kwargs: Any) -> list[Evidence]:
        """Events whose attributes or info entries match every keyword."""
        return [
            e
            for e in self._events
            if all(e.info.get(k) == v or getattr(e, k, None) == v for k, v in kwargs.items())
        ]

    def as_tree(self) -> dict[int | None, list[int]]:
        """Map each parent_id to the ids of its children."""
        tree: dict[int | None, list[int]] = {}
        for ev in self._events:
            tree.setdefault(ev.parent_id, []).append(ev.id)
        return tree

    def __len__(self) -> int:
        return len(self._events)
