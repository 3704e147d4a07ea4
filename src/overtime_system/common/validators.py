from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} é obrigatório.")
    return value.strip()


def require_positive(value, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} deve ser um número positivo.")
    if number <= 0:
        raise ValidationError(f"{field_name} deve ser um número positivo.")
    return number


def parse_brl_amount(value: str) -> float | None:
    """Parse a Brazilian money string (``R$ 2.200,50``) into a float.

    Returns None when nothing numeric is left after cleaning.
    """
    if not value:
        return None
    cleaned = value.replace("R$", "").replace(".", "").replace(",", ".").strip()
    try:
        return float(cleaned)
    except ValueError:
        return None
