from datetime import timedelta

from kyc_utils.dates.exceptions import NegativeTimePeriodError
from kyc_utils.dates.models import Weekday
from kyc_utils.dates.parser import parse_date
from kyc_utils.logging.logger import Log

_ONE_DAY = timedelta(days=1)


def count_weekday(date_from: str, date_to: str, weekday: Weekday | str) -> int:
    """Count the days in ``[date_from, date_to]`` falling on *weekday*.

    Both bounds are inclusive and use the ``DD-MM-YYYY`` layout. The walk is
    done on ``date`` values, so month lengths, leap years and DST changes
    need no special handling.

    Args:
        date_from: First day of the range.
        date_to: Last day of the range.
        weekday: Target weekday, as a ``Weekday`` or its English name.

    Returns:
        Number of matching days.

    Raises:
        InvalidDateError: if either bound does not parse.
        NegativeTimePeriodError: if *date_from* is after *date_to*.
        ValueError: if *weekday* is an unknown name.
    """
    if isinstance(weekday, str):
        weekday = Weekday.from_name(weekday)

    start = parse_date(date_from, "date_from")
    end = parse_date(date_to, "date_to")
    if start > end:
        Log.warning(f"Rejected reversed date range {date_from} -> {date_to}")
        raise NegativeTimePeriodError(date_from, date_to)

    count = 0
    day = start
    while day <= end:
        if day.weekday() == weekday:
            count += 1
        day += _ONE_DAY

    Log.debug(f"Counted {count} {weekday.name.lower()}s in {date_from} -> {date_to}")
    return count


def count_sundays(date_from: str, date_to: str) -> int:
    """Count the Sundays in ``[date_from, date_to]``."""
    return count_weekday(date_from, date_to, Weekday.SUNDAY)
