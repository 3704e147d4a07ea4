from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import ServiceType


class ServiceTypeStrategy(ABC):
    """Strategy Pattern: encapsulate the pay premium of a service type."""

    service_type: ServiceType

    @property
    @abstractmethod
    def multiplier(self) -> float:
        raise NotImplementedError

    def premium_rate(self, hourly_rate: float) -> float:
        return hourly_rate * self.multiplier
