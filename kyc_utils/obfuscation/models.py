from enum import Enum


class Classification(Enum):
    """Kind of personal string recognised by the classifier."""

    EMAIL = "email"
    PHONE = "phone"
    UNRECOGNIZED = "unrecognized"
