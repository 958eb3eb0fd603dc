"""Aggregate statistics over a window of draws."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DrawStatistics:
    """Derived metrics for one most-recent-first window of draws.

    Only meaningful relative to the exact record sequence it was computed
    from; recomputed per request.
    """

    latest_draw_no: int
    hot_numbers: list[tuple[int, int]]
    cold_numbers: list[int]
    recent_sums: list[int]
    section_distribution: dict[str, int]
    draws_analyzed: int = 0
    earliest_draw_no: int = 0
    latest_numbers: tuple[int, ...] = field(default_factory=tuple)
