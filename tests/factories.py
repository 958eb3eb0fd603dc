"""Builders for draw fixtures shared by the test modules."""

from __future__ import annotations

from datetime import date, timedelta

from lotto_analyzer.models.draw_record import DrawRecord


def make_draw(draw_no: int, numbers: list[int], bonus: int | None = None) -> DrawRecord:
    if bonus is None:
        bonus = min(set(range(1, 46)) - set(numbers))
    return DrawRecord(
        draw_no=draw_no,
        draw_date=date(2002, 12, 7) + timedelta(weeks=draw_no - 1),
        numbers=tuple(numbers),
        bonus_number=bonus,
    )


# Most-recent-first, like the repository returns them.
SCENARIO = [
    make_draw(103, [1, 2, 3, 4, 5, 6]),
    make_draw(102, [1, 2, 3, 7, 8, 9]),
    make_draw(101, [10, 11, 12, 13, 14, 15]),
]

WINDOW_8 = [
    make_draw(208, [3, 11, 19, 28, 37, 44]),
    make_draw(207, [5, 14, 22, 33, 41, 45]),
    make_draw(206, [2, 9, 22, 30, 41, 43]),
    make_draw(205, [8, 17, 25, 36, 40, 42]),
    make_draw(204, [7, 14, 24, 35, 39, 43]),
    make_draw(203, [1, 6, 13, 27, 31, 38]),
    make_draw(202, [4, 10, 16, 21, 26, 34]),
    make_draw(201, [12, 18, 20, 23, 29, 32]),
]


def upstream_payload(draw_no: int, numbers: list[int], bonus: int, drawn_on: str = "2024-01-06") -> dict:
    """A `getLottoNumber` success body (numbers in draw order, not sorted)."""

    payload = {
        "returnValue": "success",
        "drwNo": draw_no,
        "drwNoDate": drawn_on,
        "bnusNo": bonus,
        "totSellamnt": 111_000_000_000,
        "firstWinamnt": 2_000_000_000,
        "firstPrzwnerCo": 12,
        "firstAccumamnt": 24_000_000_000,
    }
    for i, n in enumerate(numbers, start=1):
        payload[f"drwtNo{i}"] = n
    return payload
