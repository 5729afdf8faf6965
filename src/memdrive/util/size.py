from __future__ import annotations

import math

_UNITS: tuple[str, ...] = ("Bytes", "KB", "MB", "GB")
_STEP = 1024


def format_file_size(num_bytes: int) -> str:
    """
    Human-readable size using 1024-based units.

    Examples: 0 -> "0 Bytes", 1024 -> "1 KB", 1536 -> "1.5 KB".
    Values are rounded half-up to two decimals; sizes past GB stay in GB.
    """
    if num_bytes < 0:
        raise ValueError("num_bytes must be non-negative")
    if num_bytes == 0:
        return "0 Bytes"

    value = float(num_bytes)
    unit = 0
    while value >= _STEP and unit < len(_UNITS) - 1:
        value /= _STEP
        unit += 1

    rounded = math.floor(value * 100 + 0.5) / 100
    text = f"{rounded:.2f}".rstrip("0").rstrip(".")
    return f"{text} {_UNITS[unit]}"
