from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..core.enums import ServiceType
from .strategies.base import ServiceTypeStrategy
from .strategies.hundred_percent import HundredPercentStrategy
from .strategies.sixty_percent import SixtyPercentStrategy

_STRATEGIES: dict[ServiceType, ServiceTypeStrategy] = {
    ServiceType.SIXTY: SixtyPercentStrategy(),
    ServiceType.HUNDRED: HundredPercentStrategy(),
}


@dataclass
class ServiceTypeStrategyFactory:
    """Factory Pattern: choose the premium strategy for a service type.

    Service types are validated at the entry/import boundary, so an unknown
    value here is a programming error and raises ValueError.
    """

    def for_service_type(self, service_type: Union[ServiceType, str]) -> ServiceTypeStrategy:
        return _STRATEGIES[ServiceType(service_type)]
