from __future__ import annotations

from typing import Union

from ..core.constants import MONTHLY_HOURS_DIVISOR
from ..core.enums import ServiceType
from .factory import ServiceTypeStrategyFactory

_factory = ServiceTypeStrategyFactory()


def hourly_rate(base_salary: float) -> float:
    """Monthly salary divided by the fixed 220-hour convention."""
    return base_salary / MONTHLY_HOURS_DIVISOR


def rate_for(base_salary: float, service_type: Union[ServiceType, str]) -> float:
    """Hourly overtime rate including the service type premium."""
    return _factory.for_service_type(service_type).premium_rate(hourly_rate(base_salary))


def overtime_value(base_salary: float, hours: float, service_type: Union[ServiceType, str]) -> float:
    """Money owed for ``hours`` of overtime; unrounded.

    Non-positive salary or hours yield 0 (sentinel, never an exception).
    """
    if base_salary <= 0 or hours <= 0:
        return 0
    return rate_for(base_salary, service_type) * hours
