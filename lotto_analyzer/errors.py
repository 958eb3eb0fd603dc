"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    status_code: int
    details: Any | None = None


class NotFoundError(AppError):
    """Resource not found."""

    def __init__(self, message: str = "Not found", details: Any | None = None) -> None:
        super().__init__(code="not_found", message=message, status_code=404, details=details)


class ValidationError(AppError):
    """Input validation error."""

    def __init__(self, message: str = "Validation error", details: Any | None = None) -> None:
        super().__init__(code="validation_error", message=message, status_code=400, details=details)


class InvalidRecordError(AppError):
    """A draw record violates the 6/45 data model (count, range, ordering)."""

    def __init__(self, message: str = "Invalid draw record", details: Any | None = None) -> None:
        super().__init__(code="invalid_record", message=message, status_code=422, details=details)


class InsufficientDataError(AppError):
    """No draw records were available to analyze."""

    def __init__(self, message: str = "No draw data available", details: Any | None = None) -> None:
        super().__init__(code="insufficient_data", message=message, status_code=503, details=details)


class RecommendationError(AppError):
    """The text-generation collaborator failed or answered with garbage."""

    def __init__(self, message: str = "Recommendation failed", details: Any | None = None) -> None:
        super().__init__(code="recommendation_failed", message=message, status_code=502, details=details)
