from __future__ import annotations

from babel.numbers import format_currency

from ..core.constants import CONFIDENTIAL_MASK, CURRENCY, LOCALE


def brl(value: float, *, locale: str = LOCALE) -> str:
    """Format a monetary amount, e.g. ``R$ 1.234,50``."""
    return format_currency(value, CURRENCY, locale=locale)


def mask_currency(text: str, *, confidential: bool) -> str:
    """Hide an already formatted monetary figure in confidential mode."""
    if not confidential:
        return text
    return CONFIDENTIAL_MASK
