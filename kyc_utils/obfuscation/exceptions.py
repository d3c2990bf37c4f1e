class ObfuscationError(Exception):
    """Base exception for all obfuscation-related errors."""


class UnsupportedPatternError(ObfuscationError):
    """Raised when a string looks neither like an email nor like a phone number."""

    def __init__(self, text: str) -> None:
        super().__init__(f"No obfuscation pattern implemented for {text!r}")
        self.text = text
