"""Use-case layer: fetch recent draws, compute statistics, ask for recommendations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from lotto_analyzer.errors import InsufficientDataError
from lotto_analyzer.models.draw_statistics import DrawStatistics
from lotto_analyzer.repositories.draw_repository import DrawRepository
from lotto_analyzer.services.recommendation_service import Combination, RecommendationService
from lotto_analyzer.services.statistics_service import DrawStatisticsService


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatisticsResult:
    stats: DrawStatistics
    summary: str


@dataclass(frozen=True)
class AnalysisResult:
    report: str
    combinations: list[Combination]
    stats: DrawStatistics


class LottoAnalysisService:
    """Lotto analysis use-cases."""

    def __init__(
        self,
        repository: DrawRepository,
        recommender: RecommendationService,
        statistics: DrawStatisticsService | None = None,
    ) -> None:
        self._repo = repository
        self._recommender = recommender
        self._statistics = statistics or DrawStatisticsService()

    @classmethod
    def from_config(cls, config: Any) -> "LottoAnalysisService":
        return cls(
            repository=DrawRepository.from_config(config),
            recommender=RecommendationService.from_config(config),
        )

    def statistics(self, count: int) -> StatisticsResult:
        records = self._repo.fetch_recent(count)
        if not records:
            raise InsufficientDataError(
                message="No completed draws could be fetched",
                details={"requested": count},
            )

        stats = self._statistics.analyze(records)
        return StatisticsResult(stats=stats, summary=self._statistics.render_summary(stats))

    def analyze(self, count: int) -> AnalysisResult:
        result = self.statistics(count)
        logger.info(
            "Analyzed %s draws up to draw %s", result.stats.draws_analyzed, result.stats.latest_draw_no
        )

        recommendation = self._recommender.recommend(result.summary)
        return AnalysisResult(
            report=recommendation.report,
            combinations=recommendation.combinations,
            stats=result.stats,
        )
