from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ServiceType


@dataclass(frozen=True)
class OvertimeRecord:
    """Domain entity: one overtime session.

    ``date`` is an ISO calendar day (``YYYY-MM-DD``); ``start_time`` and
    ``end_time`` are wall-clock times on that same day (``HH:MM`` or ``HH:MM:SS``).
    """

    record_id: str
    employee_id: str
    date: str
    start_time: str
    end_time: str
    service_type: ServiceType
    observation: str = ""


@dataclass(frozen=True)
class OvertimeDraft:
    """Field set for a new overtime record before the store assigns an id."""

    employee_id: str
    date: str
    start_time: str
    end_time: str
    service_type: ServiceType
    observation: str = ""
