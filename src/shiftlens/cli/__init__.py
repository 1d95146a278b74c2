"""Command-line interface for shiftlens."""
