"""Strict parser for ``DD-MM-YYYY`` dates.

``datetime.strptime`` tolerates single-digit days and months, so the layout
is checked with a regex first and the calendar check is left to ``date``.
"""

import re
from datetime import date

from kyc_utils.dates.exceptions import InvalidDateError

DATE_FORMAT = "DD-MM-YYYY"

_DATE_RE = re.compile(r"(\d{2})-(\d{2})-(\d{4})", re.ASCII)


def parse_date(text: str, label: str = "date") -> date:
    """Parse *text* as a ``DD-MM-YYYY`` calendar date.

    Args:
        text: Date string, e.g. ``"01-05-2021"``.
        label: Name of the argument being parsed, used in error messages.

    Returns:
        The parsed date.

    Raises:
        InvalidDateError: on a layout mismatch or an impossible date.
    """
    match = _DATE_RE.fullmatch(text)
    if match is None:
        raise InvalidDateError(text, label, f"expected {DATE_FORMAT} layout")

    day, month, year = (int(group) for group in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidDateError(text, label, str(exc)) from exc
