from kyc_utils.ordinal.exceptions import NegativeIntegerError

_TEENS = frozenset({11, 12, 13})
_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


def append_ordinal_suffix(n: int) -> str:
    """Return *n* followed by its English ordinal suffix (``21`` -> ``"21st"``).

    Raises:
        NegativeIntegerError: if *n* is negative.
    """
    if n < 0:
        raise NegativeIntegerError(n)

    # 11th, 12th, 13th, 111th, 212th, ...
    if n % 100 in _TEENS:
        suffix = "th"
    else:
        suffix = _SUFFIXES.get(n % 10, "th")
    return f"{n}{suffix}"
