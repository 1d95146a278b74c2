"""Roster loading utilities (JSON / CSV shift records, YAML settings)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pandas as pd
import yaml
from pydantic import TypeAdapter

from shiftlens.core.errors import ShiftLensValueError
from shiftlens.roster.contract.models import AnalyticsConfig, Shift

__all__ = ["load_shifts", "load_config", "read_csv"]

_SHIFT_LIST = TypeAdapter(list[Shift])


def read_csv(path: Path) -> pd.DataFrame:
    """Load a CSV file as text columns; blank cells stay empty strings."""
    return pd.read_csv(path, dtype=str, keep_default_na=False)


def _records_from_json(path: Path) -> list[dict[str, Any]]:
    with path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    if isinstance(data, dict):
        data = data.get("shifts", [])
    if not isinstance(data, list):
        raise ShiftLensValueError(f"{path} must hold a list of shifts or a 'shifts' list")
    return [row for row in data if isinstance(row, dict)]


def load_shifts(path: str | Path) -> list[Shift]:
    """Load shift records from ``.json`` or ``.csv``.

    Parameters
    ----------
    path:
        JSON file holding either a list of records or ``{"shifts": [...]}``, or a CSV
        file with one record per row.

    Returns
    -------
    list[Shift]
        Records validated into :class:`Shift` models. Keys may use the web client's
        camelCase names (``employeeName``, ``startTime``, ``endTime``) or snake_case.
        Malformed dates or times are kept; the engines skip them.
    """
    source = Path(path)
    if not source.exists():
        raise FileNotFoundError(source)
    suffix = source.suffix.lower()
    if suffix == ".json":
        rows = _records_from_json(source)
    elif suffix == ".csv":
        rows = read_csv(source).to_dict("records")
    else:
        raise ShiftLensValueError(f"Unsupported shift file type {suffix!r}; use .json or .csv")
    return _SHIFT_LIST.validate_python(rows)


def load_config(path: str | Path) -> AnalyticsConfig:
    """Load :class:`AnalyticsConfig` from a YAML mapping (an empty file gives defaults)."""
    source = Path(path)
    with source.open("r", encoding="utf-8") as handle:
        meta = yaml.safe_load(handle) or {}
    if not isinstance(meta, dict):
        raise ShiftLensValueError(f"{source} must contain a YAML mapping")
    section = meta.get("analytics", meta)
    return TypeAdapter(AnalyticsConfig).validate_python(section)
