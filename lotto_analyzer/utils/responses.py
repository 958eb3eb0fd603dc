"""Helpers for the `{success, data, error}` JSON envelope."""

from __future__ import annotations

from typing import Any

from flask import Response, jsonify
from marshmallow import Schema


def ok(data: Any, status_code: int = 200, *, schema: Schema | None = None) -> tuple[Response, int]:
    """Success response; `schema` dumps `data` first when given."""

    payload = schema.dump(data) if schema is not None else data
    return jsonify({"success": True, "data": payload, "error": None}), status_code


def fail(code: str, message: str, status_code: int, details: Any | None = None) -> tuple[Response, int]:
    """Error response."""

    error = {"code": code, "message": message, "details": details}
    return jsonify({"success": False, "data": None, "error": error}), status_code
