"""Diagnostic tracing helpers."""

from .jsonl import append_jsonl, read_jsonl
from .trace import (
    JsonlTraceObserver,
    NullTraceObserver,
    RecordingTraceObserver,
    TraceObserver,
    emit,
)

__all__ = [
    "append_jsonl",
    "read_jsonl",
    "TraceObserver",
    "NullTraceObserver",
    "RecordingTraceObserver",
    "JsonlTraceObserver",
    "emit",
]
