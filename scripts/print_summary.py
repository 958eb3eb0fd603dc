"""Print the statistics summary for the most recent draws.

Runs the same fetch + analysis as GET /lotto/statistics without starting the
web app or calling the recommendation model.

Usage:
  python scripts/print_summary.py --count 20
  python scripts/print_summary.py --count 20 --json
"""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Sequence

from dotenv import load_dotenv

from lotto_analyzer.errors import AppError
from lotto_analyzer.repositories.draw_repository import DrawRepository
from lotto_analyzer.schemas.analysis import DrawStatisticsSchema
from lotto_analyzer.services.statistics_service import DrawStatisticsService


logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    """Fetch, analyze and print; returns a process exit code."""

    load_dotenv()

    from lotto_analyzer.config import get_config

    config = get_config()

    parser = argparse.ArgumentParser(description="Summarize recent lotto draws")
    parser.add_argument("--count", type=int, default=config.LOTTO_DEFAULT_WINDOW)
    parser.add_argument("--timeout", dest="timeout_seconds", type=float, default=config.LOTTO_FETCH_TIMEOUT)
    parser.add_argument("--json", action="store_true", help="Print the statistics as JSON instead of text")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    repo = DrawRepository(
        api_url=config.LOTTO_API_URL,
        timeout_seconds=args.timeout_seconds,
        retries=config.LOTTO_FETCH_RETRIES,
        backoff_factor=config.LOTTO_FETCH_BACKOFF,
        max_workers=config.LOTTO_FETCH_WORKERS,
        max_window=config.LOTTO_MAX_WINDOW,
    )
    service = DrawStatisticsService()

    try:
        stats = service.analyze(repo.fetch_recent(args.count))
    except AppError as exc:
        logger.error("%s: %s", exc.code, exc.message)
        return 1

    if args.json:
        print(json.dumps(DrawStatisticsSchema().dump(stats), ensure_ascii=False, indent=2))
    else:
        print(service.render_summary(stats))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
