"""Repository layer for recent draw results fetched from the lottery API."""

from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone
from typing import Any

import requests
from marshmallow import ValidationError as MarshmallowValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from lotto_analyzer.errors import InvalidRecordError, ValidationError
from lotto_analyzer.models.draw_record import DrawRecord
from lotto_analyzer.schemas.draw import UpstreamDrawSchema


logger = logging.getLogger(__name__)

KST = timezone(timedelta(hours=9))
FIRST_DRAW_AT = datetime(2002, 12, 7, 20, 0, tzinfo=KST)
DEFAULT_API_URL = "https://www.dhlottery.co.kr/common.do"


def build_http_session(retries: int, backoff_factor: float, pool_size: int = 20) -> requests.Session:
    """Create a requests session with retry/backoff for transient network errors."""

    retry = Retry(
        total=retries,
        connect=retries,
        read=retries,
        status=retries,
        backoff_factor=backoff_factor,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=("GET",),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry, pool_connections=pool_size, pool_maxsize=pool_size)

    session = requests.Session()
    session.headers.update({"User-Agent": "Mozilla/5.0"})
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def estimate_latest_draw_no(now: datetime | None = None) -> int:
    """Estimate the newest draw number from the weekly schedule.

    Draw 1 was held on 2002-12-07 20:00 KST and one draw is held every
    Saturday, so this may name a draw that has not happened yet; the
    upstream API answers those with returnValue == "fail".
    """

    now = now or datetime.now(KST)
    if now.tzinfo is None:
        now = now.replace(tzinfo=KST)
    elapsed = abs((now - FIRST_DRAW_AT).total_seconds())
    days = math.ceil(elapsed / 86400)
    return days // 7 + 1


class DrawRepository:
    """Read the most recent draws from the upstream API.

    Every period is requested concurrently. Periods that fail to download,
    are not drawn yet, or do not parse are logged and left out; the rest of
    the batch is still returned.
    """

    def __init__(
        self,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout_seconds: float = 5.0,
        retries: int = 2,
        backoff_factor: float = 0.3,
        max_workers: int = 10,
        max_window: int = 100,
        http: requests.Session | None = None,
        clock: Any | None = None,
    ) -> None:
        self._api_url = api_url
        self._timeout = float(timeout_seconds)
        self._max_workers = max(1, int(max_workers))
        self._max_window = int(max_window)
        self._http = http or build_http_session(retries, backoff_factor, pool_size=self._max_workers)
        self._clock = clock or (lambda: datetime.now(KST))
        self._schema = UpstreamDrawSchema()

    @classmethod
    def from_config(cls, config: Any) -> "DrawRepository":
        return cls(
            api_url=str(config.get("LOTTO_API_URL", DEFAULT_API_URL)),
            timeout_seconds=float(config.get("LOTTO_FETCH_TIMEOUT", 5.0)),
            retries=int(config.get("LOTTO_FETCH_RETRIES", 2)),
            backoff_factor=float(config.get("LOTTO_FETCH_BACKOFF", 0.3)),
            max_workers=int(config.get("LOTTO_FETCH_WORKERS", 10)),
            max_window=int(config.get("LOTTO_MAX_WINDOW", 100)),
        )

    def fetch_recent(self, count: int) -> list[DrawRecord]:
        """Return up to `count` completed draws, most recent first."""

        if count < 1 or count > self._max_window:
            raise ValidationError(
                message="Invalid count",
                details={"count": [f"Must be within 1..{self._max_window}"]},
            )

        latest = estimate_latest_draw_no(self._clock())
        draw_nos = [n for n in range(latest, latest - count, -1) if n >= 1]
        logger.info("Fetching draws %s..%s", draw_nos[-1], draw_nos[0])

        workers = min(self._max_workers, len(draw_nos))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(self._fetch_one, draw_nos))

        records = [r for r in results if r is not None]
        records.sort(key=lambda r: r.draw_no, reverse=True)
        logger.info("Fetched %s of %s requested draws", len(records), len(draw_nos))
        return records

    def _fetch_one(self, draw_no: int) -> DrawRecord | None:
        try:
            resp = self._http.get(
                self._api_url,
                params={"method": "getLottoNumber", "drwNo": draw_no},
                timeout=self._timeout,
            )
            resp.raise_for_status()
            payload: dict[str, Any] = resp.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Skipping draw %s: request failed (%s)", draw_no, exc)
            return None

        if not isinstance(payload, dict) or payload.get("returnValue") != "success":
            logger.info("Skipping draw %s: not drawn yet", draw_no)
            return None

        try:
            return self._schema.load(payload)
        except (MarshmallowValidationError, InvalidRecordError) as exc:
            logger.warning("Skipping draw %s: invalid payload (%s)", draw_no, exc)
            return None
