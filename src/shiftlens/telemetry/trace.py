"""Optional trace observers for the analytics engines.

Engines accept ``observer=None``. When an observer is supplied it receives one
``emit(event, payload)`` call per notable step, e.g. ``shift_excluded`` with the shift id
and the reason it was skipped. Results never depend on whether an observer is attached.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Protocol, runtime_checkable
from uuid import uuid4

from .jsonl import append_jsonl

__all__ = [
    "TraceObserver",
    "NullTraceObserver",
    "RecordingTraceObserver",
    "JsonlTraceObserver",
    "emit",
]


def _iso_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


@runtime_checkable
class TraceObserver(Protocol):
    def emit(self, event: str, payload: Mapping[str, Any]) -> None: ...


class NullTraceObserver:
    """Observer that drops every event."""

    def emit(self, event: str, payload: Mapping[str, Any]) -> None:
        return None


@dataclass(slots=True)
class RecordingTraceObserver:
    """Keep ``(event, payload)`` pairs in memory."""

    events: list[tuple[str, dict[str, Any]]] = field(default_factory=list)

    def emit(self, event: str, payload: Mapping[str, Any]) -> None:
        self.events.append((event, dict(payload)))

    def named(self, event: str) -> list[dict[str, Any]]:
        return [payload for name, payload in self.events if name == event]


@dataclass(slots=True)
class JsonlTraceObserver:
    """Append each event as a JSON line.

    Parameters
    ----------
    log_path:
        JSONL file receiving the records (parent folders are created on demand).
    context:
        Extra metadata copied into every record (command name, input file, ...).
    """

    log_path: Path
    context: Mapping[str, Any] | None = None
    run_id: str = field(default_factory=lambda: uuid4().hex, init=False)

    def __post_init__(self) -> None:
        self.log_path = Path(self.log_path)

    def emit(self, event: str, payload: Mapping[str, Any]) -> None:
        record = {
            "event": event,
            "run_id": self.run_id,
            "timestamp": _iso_now(),
            "context": dict(self.context or {}),
            **dict(payload),
        }
        append_jsonl(self.log_path, record)


def emit(observer: TraceObserver | None, event: str, **payload: Any) -> None:
    """Forward to ``observer`` when one is attached."""
    if observer is not None:
        observer.emit(event, payload)
