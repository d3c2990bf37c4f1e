class DateRangeError(Exception):
    """Base exception for all date-range errors."""


class InvalidDateError(DateRangeError):
    """Raised when a string is not a real calendar date in ``DD-MM-YYYY`` form."""

    def __init__(self, text: str, label: str, reason: str) -> None:
        super().__init__(f"Invalid {label} {text!r}: {reason}")
        self.text = text
        self.label = label
        self.reason = reason


class NegativeTimePeriodError(DateRangeError):
    """Raised when the start of a date range falls after its end."""

    def __init__(self, date_from: str, date_to: str) -> None:
        super().__init__(
            f"Negative time period: {date_from!r} is after {date_to!r}"
        )
        self.date_from = date_from
        self.date_to = date_to
