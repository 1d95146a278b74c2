"""Roster input/output helpers."""

from .loaders import load_config, load_shifts, read_csv

__all__ = ["load_shifts", "load_config", "read_csv"]
