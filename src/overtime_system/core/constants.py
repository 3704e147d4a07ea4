"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Monthly hours divisor used to derive the hourly rate from a monthly salary.
MONTHLY_HOURS_DIVISOR = 220

SIXTY_PERCENT_MULTIPLIER = 1.6
HUNDRED_PERCENT_MULTIPLIER = 2.0

# Employee selector meaning "no filtering by employee".
ALL_EMPLOYEES = "all"

DEFAULT_TOP_N = 5
UNKNOWN_EMPLOYEE_NAME = "DESCONHECIDO"

CURRENCY = "BRL"
LOCALE = "pt_BR"
CONFIDENTIAL_MASK = "••••••"
