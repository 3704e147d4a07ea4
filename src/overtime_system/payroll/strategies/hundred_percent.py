from __future__ import annotations

from ...core.constants import HUNDRED_PERCENT_MULTIPLIER
from ...core.enums import ServiceType
from .base import ServiceTypeStrategy


class HundredPercentStrategy(ServiceTypeStrategy):
    """Hora extra 100%: hourly rate x 2.0."""

    service_type = ServiceType.HUNDRED

    @property
    def multiplier(self) -> float:
        return HUNDRED_PERCENT_MULTIPLIER
