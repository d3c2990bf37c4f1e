from typing import ClassVar

from kyc_utils.obfuscation.base import BaseObfuscationStrategy


class EmailStrategy(BaseObfuscationStrategy):
    """Keeps the first and last character of the local part, lower-cased."""

    MASK: ClassVar[str] = "*****"

    def obfuscate(self, text: str) -> str:
        local, _, domain = text.lower().partition("@")
        return f"{local[0]}{self.MASK}{local[-1]}@{domain}"


class PhoneStrategy(BaseObfuscationStrategy):
    """Masks every digit but the last four; spaces become hyphens.

    ``"+33 6 12 34 56 78"`` -> ``"+**-*-**-**-56-78"``
    """

    REVEALED_DIGITS: ClassVar[int] = 4

    def obfuscate(self, text: str) -> str:
        hyphenated = text.replace(" ", "-")
        masked = ["*" if _is_digit(ch) else ch for ch in hyphenated]

        revealed = 0
        for i in range(len(hyphenated) - 1, -1, -1):
            if revealed == self.REVEALED_DIGITS:
                break
            if _is_digit(hyphenated[i]):
                masked[i] = hyphenated[i]
                revealed += 1

        return "".join(masked)


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"
