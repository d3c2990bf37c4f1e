from typing import ClassVar

from kyc_utils.logging.logger import Log
from kyc_utils.obfuscation.base import BaseObfuscationStrategy
from kyc_utils.obfuscation.classifier import PatternClassifier
from kyc_utils.obfuscation.exceptions import UnsupportedPatternError
from kyc_utils.obfuscation.models import Classification
from kyc_utils.obfuscation.strategies import EmailStrategy, PhoneStrategy


class Obfuscator:
    """Picks the masking strategy matching a string's classification.

    Supporting a new kind of personal string (e.g. an address) means adding a
    ``Classification`` member, its test in ``PatternClassifier`` and an entry
    in ``STRATEGIES``.
    """

    STRATEGIES: ClassVar[dict[Classification, BaseObfuscationStrategy]] = {
        Classification.EMAIL: EmailStrategy(),
        Classification.PHONE: PhoneStrategy(),
    }

    @classmethod
    def obfuscate(cls, text: str) -> str:
        """Classify *text* and mask it with the matching strategy.

        Raises:
            UnsupportedPatternError: if *text* is neither an email nor a phone.
        """
        classification = PatternClassifier.classify(text)
        strategy = cls.STRATEGIES.get(classification)
        if strategy is None:
            Log.warning(f"Rejected unrecognized input of {len(text)} chars")
            raise UnsupportedPatternError(text)

        Log.debug(f"Obfuscating {classification.value} of {len(text)} chars")
        return strategy.obfuscate(text)


def obfuscate_personal_info(text: str) -> str:
    """Mask an email address or phone number.

    Raises:
        UnsupportedPatternError: if *text* matches no supported pattern.
    """
    return Obfuscator.obfuscate(text)
