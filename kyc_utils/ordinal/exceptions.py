class OrdinalError(Exception):
    """Base exception for ordinal formatting errors."""


class NegativeIntegerError(OrdinalError):
    """Raised when an ordinal suffix is requested for a negative number."""

    def __init__(self, value: int) -> None:
        super().__init__(
            f"Ordinal suffixes: negative integers are not supported: {value}"
        )
        self.value = value
