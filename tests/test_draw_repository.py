"""tests/test_draw_repository.py"""
import threading
from datetime import datetime

import pytest
import requests

from factories import upstream_payload
from lotto_analyzer.errors import ValidationError
from lotto_analyzer.repositories.draw_repository import (
    FIRST_DRAW_AT,
    KST,
    DrawRepository,
    estimate_latest_draw_no,
)


# Draw 1101 was held on 2024-01-06.
AFTER_DRAW_1101 = datetime(2024, 1, 6, 21, 0, tzinfo=KST)


class FakeResponse:
    def __init__(self, status_code=200, payload=None, body_is_json=True):
        self.status_code = status_code
        self._payload = payload
        self._body_is_json = body_is_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if not self._body_is_json:
            raise ValueError("Expecting value")
        return self._payload


class FakeSession:
    """Answers `getLottoNumber` requests from a {draw_no: response|exception} table."""

    def __init__(self, table):
        self._table = table
        self._lock = threading.Lock()
        self.requested = []

    def get(self, url, params=None, timeout=None):
        draw_no = params["drwNo"]
        with self._lock:
            self.requested.append((url, dict(params), timeout))
        answer = self._table.get(draw_no, FakeResponse(payload={"returnValue": "fail"}))
        if isinstance(answer, Exception):
            raise answer
        return answer


def _ok(draw_no, numbers, bonus):
    return FakeResponse(payload=upstream_payload(draw_no, numbers, bonus))


class TestEstimateLatestDrawNo:
    def test_first_draw(self):
        assert estimate_latest_draw_no(FIRST_DRAW_AT) == 1

    def test_known_draw(self):
        assert estimate_latest_draw_no(AFTER_DRAW_1101) == 1101

    def test_naive_datetime_is_treated_as_kst(self):
        assert estimate_latest_draw_no(datetime(2024, 1, 6, 21, 0)) == 1101


class TestFetchRecent:
    def _repo(self, table, **kwargs):
        self.http = FakeSession(table)
        return DrawRepository(
            api_url="https://lotto.example/common.do",
            http=self.http,
            clock=lambda: AFTER_DRAW_1101,
            max_workers=4,
            **kwargs,
        )

    def test_returns_most_recent_first(self):
        repo = self._repo(
            {
                1101: _ok(1101, [45, 7, 21, 3, 33, 12], 9),
                1100: _ok(1100, [1, 2, 3, 4, 5, 6], 7),
                1099: _ok(1099, [10, 20, 30, 40, 41, 42], 43),
            }
        )
        records = repo.fetch_recent(3)
        assert [r.draw_no for r in records] == [1101, 1100, 1099]
        assert records[0].numbers == (3, 7, 12, 21, 33, 45)
        assert records[0].bonus_number == 9
        assert records[0].draw_date.isoformat() == "2024-01-06"

    def test_requests_one_period_each(self):
        repo = self._repo({})
        repo.fetch_recent(4)
        requested = sorted(p["drwNo"] for _, p, _ in self.http.requested)
        assert requested == [1098, 1099, 1100, 1101]
        assert all(p["method"] == "getLottoNumber" for _, p, _ in self.http.requested)
        assert all(url == "https://lotto.example/common.do" for url, _, _ in self.http.requested)

    def test_failed_periods_are_dropped(self):
        repo = self._repo(
            {
                1101: FakeResponse(payload={"returnValue": "fail"}),
                1100: _ok(1100, [1, 2, 3, 4, 5, 6], 7),
                1099: requests.ConnectionError("boom"),
                1098: FakeResponse(status_code=500),
                1097: FakeResponse(body_is_json=False),
                1096: _ok(1096, [1, 1, 3, 4, 5, 6], 7),
                1095: _ok(1095, [11, 12, 13, 14, 15, 16], 17),
            }
        )
        records = repo.fetch_recent(7)
        assert [r.draw_no for r in records] == [1100, 1095]

    def test_all_failed_returns_empty(self):
        repo = self._repo({})
        assert repo.fetch_recent(3) == []

    def test_never_requests_below_draw_one(self):
        self.http = FakeSession({})
        repo = DrawRepository(http=self.http, clock=lambda: FIRST_DRAW_AT)
        repo.fetch_recent(5)
        assert [p["drwNo"] for _, p, _ in self.http.requested] == [1]

    @pytest.mark.parametrize("count", [0, -1, 101])
    def test_invalid_count(self, count):
        repo = self._repo({})
        with pytest.raises(ValidationError):
            repo.fetch_recent(count)
        assert self.http.requested == []


class TestFromConfig:
    def test_reads_flask_style_mapping(self):
        repo = DrawRepository.from_config(
            {
                "LOTTO_API_URL": "https://lotto.example/common.do",
                "LOTTO_FETCH_TIMEOUT": 2.5,
                "LOTTO_MAX_WINDOW": 20,
            }
        )
        with pytest.raises(ValidationError):
            repo.fetch_recent(21)
