"""Currency text utilities for amounts entered as locale-formatted IDR"""

import re
from typing import Optional, Union

_NON_DIGITS = re.compile(r"[^0-9]")


def parse_amount(text: Optional[Union[str, int]]) -> int:
    """
    Parse a currency string into whole IDR.

    Every non-digit character is stripped ("Rp 1.250.000" -> 1250000), so signs and
    decimal separators are dropped too. Empty or digit-free input gives 0.
    """
    if text is None:
        return 0
    digits = _NON_DIGITS.sub("", str(text))
    return int(digits) if digits else 0
