from kyc_utils.dates.counter import count_sundays, count_weekday
from kyc_utils.dates.exceptions import (
    DateRangeError,
    InvalidDateError,
    NegativeTimePeriodError,
)
from kyc_utils.dates.models import Weekday
from kyc_utils.dates.parser import parse_date

__all__ = [
    "DateRangeError",
    "InvalidDateError",
    "NegativeTimePeriodError",
    "Weekday",
    "count_sundays",
    "count_weekday",
    "parse_date",
]
