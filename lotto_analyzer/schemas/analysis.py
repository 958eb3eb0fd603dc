"""Schemas for the lotto analysis API."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, ValidationError, fields, post_load, pre_load, validate, validates_schema


class AnalyzeQuerySchema(Schema):
    """Query string of /lotto/analyze and /lotto/statistics."""

    class Meta:
        unknown = EXCLUDE

    count = fields.Integer(
        required=False,
        load_default=None,
        validate=validate.Range(min=1),
    )


class DrawStatisticsSchema(Schema):
    latest_draw_no = fields.Integer()
    hot_numbers = fields.Function(
        lambda stats: [{"number": n, "count": c} for n, c in stats.hot_numbers]
    )
    cold_numbers = fields.List(fields.Integer())
    recent_sums = fields.List(fields.Integer())
    section_distribution = fields.Dict(keys=fields.String(), values=fields.Integer())
    draws_analyzed = fields.Integer()
    earliest_draw_no = fields.Integer()
    latest_numbers = fields.List(fields.Integer())


class CombinationSchema(Schema):
    numbers = fields.List(
        fields.Integer(validate=validate.Range(min=1, max=45)),
        required=True,
        validate=validate.Length(equal=6),
    )
    theme = fields.String(required=True, validate=validate.Length(min=1))

    @validates_schema
    def _validate_unique(self, data, **kwargs):  # type: ignore[no-untyped-def]
        nums = data.get("numbers") or []
        if len(nums) != len(set(nums)):
            raise ValidationError({"numbers": ["Numbers must be unique"]})

    @post_load
    def _sort_numbers(self, data, **kwargs):  # type: ignore[no-untyped-def]
        data["numbers"] = sorted(int(n) for n in data["numbers"])
        return data


class RecommendationSchema(Schema):
    """Structured answer expected from the recommendation model."""

    report = fields.String(required=True, validate=validate.Length(min=1))
    combinations = fields.List(
        fields.Nested(CombinationSchema),
        required=True,
        validate=validate.Length(min=1),
    )

    @pre_load
    def _wrap_plain_lists(self, data, **kwargs):  # type: ignore[no-untyped-def]
        # Older prompts asked for bare [n1..n6] lists without a theme.
        if not isinstance(data, dict):
            return data
        combos = data.get("combinations")
        if not isinstance(combos, list):
            return data
        wrapped = [
            {"numbers": c, "theme": f"Combination {i}"} if isinstance(c, list) else c
            for i, c in enumerate(combos, start=1)
        ]
        return {**data, "combinations": wrapped}


class StatisticsResponseSchema(Schema):
    stats = fields.Nested(DrawStatisticsSchema)
    summary = fields.String()


class AnalysisResponseSchema(Schema):
    report = fields.String()
    combinations = fields.List(fields.Nested(CombinationSchema))
    stats = fields.Nested(DrawStatisticsSchema)
