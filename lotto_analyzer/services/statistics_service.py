"""Business logic for the draw statistics summary (hot/cold numbers, sums, sections)."""

from __future__ import annotations

from collections.abc import Sequence

from lotto_analyzer.errors import InsufficientDataError, InvalidRecordError
from lotto_analyzer.models.draw_record import MAX_NUMBER, MIN_NUMBER, DrawRecord
from lotto_analyzer.models.draw_statistics import DrawStatistics


HOT_LIMIT = 5
COLD_LIMIT = 7
COLD_GAP = 10
RECENT_SUM_WINDOW = 5

# (low, high, label); checked in order, together they cover 1..45 exactly once.
SECTIONS: tuple[tuple[int, int, str], ...] = (
    (1, 10, "1-10"),
    (11, 20, "11-20"),
    (21, 30, "21-30"),
    (31, 40, "31-40"),
    (41, 45, "41-45"),
)


def section_of(number: int) -> str:
    """Return the label of the section that contains `number`."""

    for lo, hi, label in SECTIONS:
        if lo <= number <= hi:
            return label
    raise InvalidRecordError(
        message=f"Number {number} is outside every section",
        details={"number": [f"Must be within {MIN_NUMBER}..{MAX_NUMBER}"]},
    )


class DrawStatisticsService:
    """Compute and render statistics over a window of draws.

    Stateless: every accumulator lives inside a single call, so one instance
    can be shared across concurrent requests.
    """

    def analyze(self, records: Sequence[DrawRecord]) -> DrawStatistics:
        """Aggregate `records` into hot/cold numbers, recent sums and sections.

        `records` must be ordered most-recent-first (strictly decreasing
        draw_no). The first draw a number shows up in while walking that order
        is therefore its most recent appearance.

        Raises:
            InsufficientDataError: `records` is empty.
            InvalidRecordError: `records` is not most-recent-first.
        """

        if not records:
            raise InsufficientDataError(message="Cannot analyze an empty draw window")
        self._check_order(records)

        latest_draw_no = int(records[0].draw_no)

        recent_sums = [r.total for r in records[:RECENT_SUM_WINDOW]]
        recent_sums.reverse()

        counts: dict[int, int] = {}
        last_seen: dict[int, int] = {}
        sections: dict[str, int] = {label: 0 for _, _, label in SECTIONS}

        for record in records:
            for n in record.numbers:
                counts[n] = counts.get(n, 0) + 1
                last_seen.setdefault(n, int(record.draw_no))
                sections[section_of(n)] += 1

        # sorted() is stable, so equal counts keep first-encountered order.
        ordered = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
        hot_numbers = [(n, c) for n, c in ordered[:HOT_LIMIT]]

        cold_numbers: list[int] = []
        for n in range(MIN_NUMBER, MAX_NUMBER + 1):
            seen = last_seen.get(n)
            if seen is None or latest_draw_no - seen >= COLD_GAP:
                cold_numbers.append(n)
        cold_numbers = cold_numbers[:COLD_LIMIT]

        return DrawStatistics(
            latest_draw_no=latest_draw_no,
            hot_numbers=hot_numbers,
            cold_numbers=cold_numbers,
            recent_sums=recent_sums,
            section_distribution=sections,
            draws_analyzed=len(records),
            earliest_draw_no=int(records[-1].draw_no),
            latest_numbers=tuple(records[0].numbers),
        )

    @staticmethod
    def _check_order(records: Sequence[DrawRecord]) -> None:
        for newer, older in zip(records, records[1:]):
            if int(older.draw_no) >= int(newer.draw_no):
                raise InvalidRecordError(
                    message="Draws must be ordered most-recent-first",
                    details={"draw_no": [f"{older.draw_no} follows {newer.draw_no}"]},
                )

    def render_summary(self, stats: DrawStatistics) -> str:
        """Render `stats` as plain text for the recommendation prompt."""

        hot = ", ".join(f"{n} (x{c})" for n, c in stats.hot_numbers) or "none"
        cold = ", ".join(str(n) for n in stats.cold_numbers) or "none"
        sums = " → ".join(str(s) for s in stats.recent_sums) or "none"
        latest = ", ".join(str(n) for n in stats.latest_numbers) or "none"
        sections = ", ".join(
            f"{label}: {stats.section_distribution.get(label, 0)}" for _, _, label in SECTIONS
        )

        lines = [
            "[Draw statistics]",
            f"- Window: last {stats.draws_analyzed} draws "
            f"(draw {stats.earliest_draw_no} ~ draw {stats.latest_draw_no})",
            f"- Latest draw: {stats.latest_draw_no}",
            f"- Latest winning numbers (draw {stats.latest_draw_no}): {latest}",
            f"- Most frequent numbers: {hot}",
            f"- Cold numbers (absent or unseen for {COLD_GAP}+ draws): {cold}",
            f"- Sum trend, oldest to newest: {sums}",
            f"- Occurrences per section: {sections}",
        ]
        return "\n".join(lines)
