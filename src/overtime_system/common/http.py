from __future__ import annotations

from datetime import date
from typing import Optional

from flask import Flask, current_app, jsonify, request

from ..core.exceptions import NotFoundError, ValidationError
from .datetime_utils import parse_iso_date
from .formatting import brl, mask_currency


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return jsonify({"success": False, "message": str(e)}), 404


def arg_date(name: str) -> Optional[date]:
    value = (request.args.get(name) or "").strip()
    if not value:
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"Data inválida: '{value}'. Use AAAA-MM-DD.")


def confidential_flag() -> bool:
    value = request.args.get("confidential")
    if value is None:
        return bool(current_app.config.get("CONFIDENTIAL_DEFAULT", False))
    return value.lower() in {"1", "true", "yes", "on"}


def money(value: float, *, confidential: bool) -> dict:
    """Monetary figure for a JSON payload; masked after computation in confidential mode."""
    return {
        "amount": None if confidential else round(value, 2),
        "label": mask_currency(brl(value), confidential=confidential),
    }


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Corpo JSON inválido.")
    return data
