from enum import IntEnum


class Weekday(IntEnum):
    """Day of the week, numbered like ``datetime.date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def from_name(cls, name: str) -> "Weekday":
        """Look a weekday up by its English name, ignoring case."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(
                f"Unknown weekday '{name}'. Choose from: {[d.name.lower() for d in cls]}"
            ) from None
