from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Optional

Compare = Callable[[Any, Any], int]


def natural_compare(one: Any, other: Any) -> int:
    # NaN sorts below every number and equal to itself
    one_nan = bool(one != one)
    other_nan = bool(other != other)
    if one_nan or other_nan:
        return other_nan - one_nan
    if one < other:
        return -1
    if one > other:
        return 1
    return 0


class ComparableComparer:
    """Total order over naturally ordered values, with ``None`` first.

    Instances are stateless: any two of them are equal and hash alike, so
    they can be used interchangeably as dictionary keys.
    """

    __slots__ = ()

    def __call__(self, one: Optional[Any], other: Optional[Any]) -> int:
        return self.compare(one, other)

    def compare(self, one: Optional[Any], other: Optional[Any]) -> int:
        if one is None:
            return -1 if other is not None else 0
        if other is None:
            return 1
        return natural_compare(one, other)

    @property
    def key(self):
        return cmp_to_key(self.compare)

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self).__name__)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
