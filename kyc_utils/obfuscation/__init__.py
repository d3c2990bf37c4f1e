from kyc_utils.obfuscation.classifier import PatternClassifier
from kyc_utils.obfuscation.exceptions import ObfuscationError, UnsupportedPatternError
from kyc_utils.obfuscation.models import Classification
from kyc_utils.obfuscation.obfuscator import Obfuscator, obfuscate_personal_info

__all__ = [
    "Classification",
    "ObfuscationError",
    "Obfuscator",
    "PatternClassifier",
    "UnsupportedPatternError",
    "obfuscate_personal_info",
]
