from __future__ import annotations

from enum import Enum


class ServiceType(str, Enum):
    """Categoria de hora extra (define o multiplicador sobre a hora normal)."""

    SIXTY = "60%"
    HUNDRED = "100%"


class SortDirection(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


class SortKey(str, Enum):
    """Columns an overtime listing can be ordered by."""

    DATE = "date"
    START_TIME = "start_time"
    END_TIME = "end_time"
    SERVICE_TYPE = "service_type"
    OBSERVATION = "observation"
    EMPLOYEE_NAME = "employee_name"
    HOURS = "hours"
    VALUE = "value"


class EmployeeStatusFilter(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ALL = "all"


class RowStatus(str, Enum):
    """Outcome of parsing one pasted batch line."""

    VALID = "valid"
    INVALID = "invalid"
