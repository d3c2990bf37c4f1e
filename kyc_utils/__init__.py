"""Masking and calendar helpers for KYC workflows.

- ``obfuscate_personal_info`` masks emails and phone numbers.
- ``count_weekday`` / ``count_sundays`` count weekdays in a ``DD-MM-YYYY`` range.
- ``append_ordinal_suffix`` formats ``1`` as ``"1st"``.

Every function is stateless and safe to call from multiple threads.
"""

from kyc_utils.bootstrap import configure
from kyc_utils.dates import (
    DateRangeError,
    InvalidDateError,
    NegativeTimePeriodError,
    Weekday,
    count_sundays,
    count_weekday,
)
from kyc_utils.obfuscation import (
    Classification,
    ObfuscationError,
    UnsupportedPatternError,
    obfuscate_personal_info,
)
from kyc_utils.ordinal import NegativeIntegerError, OrdinalError, append_ordinal_suffix

__all__ = [
    "Classification",
    "DateRangeError",
    "InvalidDateError",
    "NegativeIntegerError",
    "NegativeTimePeriodError",
    "ObfuscationError",
    "OrdinalError",
    "UnsupportedPatternError",
    "Weekday",
    "append_ordinal_suffix",
    "configure",
    "count_sundays",
    "count_weekday",
    "obfuscate_personal_info",
]
