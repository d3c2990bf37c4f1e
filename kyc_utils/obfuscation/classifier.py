"""Heuristic classification of personal strings.

Matching is deliberately permissive: it only tells apart "looks like an
email", "looks like a phone number" and "neither". It is not an RFC 5322 or
E.164 validator.
"""

import re
from typing import ClassVar

from kyc_utils.obfuscation.models import Classification


class PatternClassifier:
    """Decides which obfuscation strategy, if any, applies to a string."""

    EMAIL_RE: ClassVar[re.Pattern[str]] = re.compile(r"[A-Za-z0-9+_.-]+@.+")

    # Same language as ``\+?(\d+\s?){9,}``: each repetition needs one digit,
    # so nine repetitions are reachable iff there are at least nine digits.
    PHONE_SHAPE_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\+?\d+(?:\s\d+)*\s?", re.ASCII
    )
    PHONE_MIN_DIGITS: ClassVar[int] = 9

    @classmethod
    def classify(cls, text: str) -> Classification:
        """Classify *text*; the email test always wins over the phone test."""
        if cls.is_email(text):
            return Classification.EMAIL
        if cls.is_phone(text):
            return Classification.PHONE
        return Classification.UNRECOGNIZED

    @classmethod
    def is_email(cls, text: str) -> bool:
        return cls.EMAIL_RE.fullmatch(text) is not None

    @classmethod
    def is_phone(cls, text: str) -> bool:
        if cls.PHONE_SHAPE_RE.fullmatch(text) is None:
            return False
        return sum(ch.isdigit() for ch in text) >= cls.PHONE_MIN_DIGITS
