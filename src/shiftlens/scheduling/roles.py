"""Default role palette used when rendering shifts."""

from __future__ import annotations

from collections.abc import Mapping

__all__ = ["DEFAULT_ROLE_COLORS", "FALLBACK_ROLE_COLOR", "role_color", "merged_role_colors"]

DEFAULT_ROLE_COLORS: dict[str, str] = {
    "Front Desk": "#3b82f6",
    "Server": "#a855f7",
    "Manager": "#eab308",
    "Cook": "#ef4444",
}

FALLBACK_ROLE_COLOR = "#6b7280"


def merged_role_colors(overrides: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return the default palette with ``overrides`` layered on top."""
    palette = dict(DEFAULT_ROLE_COLORS)
    if overrides:
        palette.update(overrides)
    return palette


def role_color(role: str, palette: Mapping[str, str] | None = None) -> str:
    """Look up the colour for ``role``; unknown roles get the neutral gray."""
    lookup = DEFAULT_ROLE_COLORS if palette is None else palette
    return lookup.get(role, FALLBACK_ROLE_COLOR)
