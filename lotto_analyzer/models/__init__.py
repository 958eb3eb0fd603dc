"""Domain models (transient, never persisted)."""

from lotto_analyzer.models.draw_record import DrawRecord
from lotto_analyzer.models.draw_statistics import DrawStatistics

__all__ = ["DrawRecord", "DrawStatistics"]
