from __future__ import annotations

from ...core.constants import SIXTY_PERCENT_MULTIPLIER
from ...core.enums import ServiceType
from .base import ServiceTypeStrategy


class SixtyPercentStrategy(ServiceTypeStrategy):
    """Hora extra 60%: hourly rate x 1.6."""

    service_type = ServiceType.SIXTY

    @property
    def multiplier(self) -> float:
        return SIXTY_PERCENT_MULTIPLIER
