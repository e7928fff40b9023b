from __future__ import annotations

import enum
from typing import Union

Mask = Union[int, enum.Flag]


def is_set(value: Mask, mask: Mask) -> bool:
    """True when every bit of ``mask`` is also set in ``value``."""
    return (value & mask) == mask


def is_byte_set(value: int, mask: int) -> bool:
    return is_set(value & 0xFF, mask & 0xFF)
