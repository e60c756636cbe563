"""Phone number normalization.

Every phone used as a lookup key or SMS recipient goes through
normalize_phone() so "(214) 991-9940", "12149919940" and "+12149919940"
compare equal.
"""

import re
from typing import Optional

_NON_DIGITS = re.compile(r"\D")


def normalize_phone(raw: Optional[str]) -> str:
    """
    Canonicalize a phone number to "+<digits>".

    US numbers get a "+1" country code. Anything else is only stripped
    of formatting and prefixed with "+". Input without any digits (e.g.
    "abc") yields "", never a bare "+". Never raises.

    Args:
        raw: Phone number in any formatting (or None)

    Returns:
        Normalized number, or "" for empty or digit-less input
    """
    if not raw:
        return ""

    digits = _NON_DIGITS.sub("", str(raw))
    if not digits:
        return ""

    if len(digits) == 11 and digits.startswith("1"):
        return f"+{digits}"
    if len(digits) == 10:
        return f"+1{digits}"
    return f"+{digits}"
