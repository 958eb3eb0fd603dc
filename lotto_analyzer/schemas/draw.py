"""Schemas for draw results coming from the upstream lottery API."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, post_load, validate

from lotto_analyzer.models.draw_record import DrawRecord


_number = validate.Range(min=1, max=45)


class UpstreamDrawSchema(Schema):
    """One `getLottoNumber` payload. Loads into a DrawRecord.

    Only payloads with returnValue == "success" describe a held draw; callers
    filter the others out before loading.
    """

    class Meta:
        unknown = EXCLUDE

    return_value = fields.String(data_key="returnValue", required=True)
    draw_no = fields.Integer(data_key="drwNo", required=True, validate=validate.Range(min=1))
    draw_date = fields.Date(data_key="drwNoDate", required=True)
    number1 = fields.Integer(data_key="drwtNo1", required=True, validate=_number)
    number2 = fields.Integer(data_key="drwtNo2", required=True, validate=_number)
    number3 = fields.Integer(data_key="drwtNo3", required=True, validate=_number)
    number4 = fields.Integer(data_key="drwtNo4", required=True, validate=_number)
    number5 = fields.Integer(data_key="drwtNo5", required=True, validate=_number)
    number6 = fields.Integer(data_key="drwtNo6", required=True, validate=_number)
    bonus_number = fields.Integer(data_key="bnusNo", required=True, validate=_number)

    @post_load
    def _to_record(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return DrawRecord(
            draw_no=int(data["draw_no"]),
            draw_date=data["draw_date"],
            numbers=(
                int(data["number1"]),
                int(data["number2"]),
                int(data["number3"]),
                int(data["number4"]),
                int(data["number5"]),
                int(data["number6"]),
            ),
            bonus_number=int(data["bonus_number"]),
        )
