from kyc_utils.ordinal.exceptions import NegativeIntegerError, OrdinalError
from kyc_utils.ordinal.formatter import append_ordinal_suffix

__all__ = ["NegativeIntegerError", "OrdinalError", "append_ordinal_suffix"]
