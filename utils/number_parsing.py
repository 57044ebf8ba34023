from __future__ import annotations

import math
import re
from typing import Optional, Union

_NUMBER_RE = re.compile(r"^[+-]?(?:(\d+)(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


def _finite(value: Union[int, float]) -> Optional[Union[int, float]]:
    # ints beyond float range count as infinite
    try:
        return value if math.isfinite(float(value)) else None
    except OverflowError:
        return None


def parse_number(value) -> Optional[Union[int, float]]:
    """Parse a finite number from an int/float or a numeric string.

    Strings like '42', ' 1500 ', '2.5', '1e3' are accepted; integral literals
    come back as int. Returns None for booleans, non-finite values and
    anything unparsable.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return _finite(value)
    if not isinstance(value, str):
        return None
    s = value.strip()
    if not s:
        return None
    m = _NUMBER_RE.match(s)
    if not m:
        return None
    if m.group(1) is not None and m.group(2) is None and m.group(3) is None:
        try:
            return _finite(int(s))
        except ValueError:
            # past the interpreter's int digit limit
            return None
    return _finite(float(s))
