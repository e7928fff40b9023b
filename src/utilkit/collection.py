from __future__ import annotations

import logging
from collections.abc import MutableMapping, MutableSequence, Sized
from typing import Any, Callable, Iterable, Iterator, Optional, TypeVar

from .comparer import Compare, natural_compare

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

Predicate = Callable[[T], bool]
Factory = Callable[[], T]

_MISSING = object()


def _require_callable(name: str, fn: Any) -> None:
    if not callable(fn):
        raise TypeError(f"{name} must be callable, got {fn!r}")


# emptiness


def is_empty(iterable: Iterable[Any]) -> bool:
    """True when ``iterable`` holds no element.

    Sized containers answer through ``len``. Any other iterable is probed by
    drawing one element, which consumes it from a one-shot iterator.
    """
    if isinstance(iterable, Sized):
        return len(iterable) <= 0
    for _ in iterable:
        return False
    return True


def is_null_or_empty(iterable: Optional[Iterable[Any]]) -> bool:
    return iterable is None or is_empty(iterable)


# get-or-put


def get_or_put(sequence: MutableSequence[T], predicate: Predicate[T], factory: Factory[T]) -> T:
    """Return the first element matching ``predicate``, appending ``factory()`` if none does."""
    _require_callable("predicate", predicate)
    _require_callable("factory", factory)
    for item in sequence:
        if predicate(item):
            return item
    return create_and_add(sequence, factory)


def get_or_put_key(mapping: MutableMapping[K, V], key: K, factory: Factory[V]) -> V:
    """Return ``mapping[key]``; when absent store ``factory()`` under ``key`` first.

    ``factory`` is called at most once, and never when ``key`` is present.
    """
    _require_callable("factory", factory)
    if key in mapping:
        return mapping[key]
    value = factory()
    mapping[key] = value
    logger.debug("inserted new value under key %r", key)
    return value


def get_all_or_put(sequence: MutableSequence[T], predicate: Predicate[T], factory: Factory[T]) -> list[T]:
    """All elements matching ``predicate``.

    When nothing matches, exactly one element is created and appended to both
    ``sequence`` and the returned list.
    """
    _require_callable("predicate", predicate)
    _require_callable("factory", factory)
    found = [item for item in sequence if predicate(item)]
    if found:
        return found
    found.append(create_and_add(sequence, factory))
    return found


def first_or_add(sequence: MutableSequence[T], predicate: Predicate[T], factory: Factory[T]) -> T:
    _require_callable("predicate", predicate)
    _require_callable("factory", factory)
    found = try_get(sequence, predicate, _MISSING)
    if found is not _MISSING:
        return found
    return create_and_add(sequence, factory)


def create_and_add(sequence: MutableSequence[T], factory: Factory[T]) -> T:
    _require_callable("factory", factory)
    item = factory()
    sequence.append(item)
    logger.debug("appended new %s, sequence length now %d", type(item).__name__, len(sequence))
    return item


# extremum selection


def _select(source: Iterable[T], selector: Callable[[T], Any], cmp: Optional[Compare], sign: int) -> T:
    if source is None:
        raise TypeError("source must not be None")
    _require_callable("selector", selector)
    if cmp is None:
        cmp = natural_compare
    _require_callable("cmp", cmp)

    it = iter(source)
    try:
        best = next(it)
    except StopIteration:
        raise ValueError("sequence contains no elements") from None
    best_key = selector(best)
    for candidate in it:
        candidate_key = selector(candidate)
        # strict improvement only: ties keep the earliest element
        if sign * cmp(candidate_key, best_key) <= 0:
            continue
        best, best_key = candidate, candidate_key
    return best


def min_by(source: Iterable[T], selector: Callable[[T], Any], cmp: Optional[Compare] = None) -> T:
    """Element of ``source`` with the smallest projected key.

    ``cmp`` is a three-way comparison of keys; natural ordering when omitted.
    Raises ``ValueError`` on an empty ``source``.
    """
    return _select(source, selector, cmp, -1)


def max_by(source: Iterable[T], selector: Callable[[T], Any], cmp: Optional[Compare] = None) -> T:
    """Element of ``source`` with the largest projected key (see ``min_by``)."""
    return _select(source, selector, cmp, 1)


# removal & mutation


def remove_all(sequence: MutableSequence[T], predicate: Predicate[T]) -> list[T]:
    """Delete every element matching ``predicate`` and return the deleted ones.

    The pass runs from the last index to the first, so deleting never shifts
    an index that is still to be visited. Removed elements come back in
    removal order, i.e. reversed with respect to their original positions.
    """
    _require_callable("predicate", predicate)
    removed: list[T] = []
    for index in range(len(sequence) - 1, -1, -1):
        item = sequence[index]
        if not predicate(item):
            continue
        del sequence[index]
        removed.append(item)
    if removed:
        logger.debug("removed %d of %d elements", len(removed), len(removed) + len(sequence))
    return removed


def swap(sequence: MutableSequence[T], index_a: int, index_b: int) -> MutableSequence[T]:
    size = len(sequence)
    for index in (index_a, index_b):
        if not 0 <= index < size:
            raise IndexError(f"index {index} out of range for sequence of length {size}")
    sequence[index_a], sequence[index_b] = sequence[index_b], sequence[index_a]
    return sequence


def add_range(sequence: MutableSequence[T], items: Iterable[T]) -> None:
    # materialize first: items may be the sequence itself
    for item in list(items):
        sequence.append(item)


def add_values(sequence: MutableSequence[T], *values: T) -> None:
    add_range(sequence, values)


def add_unique(sequence: MutableSequence[T], *values: T) -> None:
    """Append each of ``values`` unless an equal element is already present."""
    for value in values:
        if value not in sequence:
            sequence.append(value)


def add_number_copy(sequence: MutableSequence[T], count: int, value: T) -> None:
    for _ in range(count):
        sequence.append(value)


# composition & lookup


def composite_list(iterables: Iterable[Iterable[T]]) -> list[T]:
    out: list[T] = []
    for iterable in iterables:
        out.extend(iterable)
    return out


def find_all(iterable: Iterable[T], predicate: Predicate[T]) -> list[T]:
    _require_callable("predicate", predicate)
    return [item for item in iterable if predicate(item)]


def try_get(iterable: Iterable[T], predicate: Predicate[T], default: Any = None) -> Any:
    """First element matching ``predicate``, or ``default``. A miss is not an error."""
    _require_callable("predicate", predicate)
    for item in iterable:
        if predicate(item):
            return item
    return default


def first_or_default_comparable(
    iterable: Iterable[T],
    value: Any,
    cmp: Optional[Compare] = None,
    default: Any = None,
) -> Any:
    """First element comparing equal (three-way result 0) to ``value``, or ``default``."""
    if cmp is None:
        cmp = natural_compare
    _require_callable("cmp", cmp)
    return try_get(iterable, lambda item: cmp(item, value) == 0, default)


def empty_list() -> list[Any]:
    return []


def empty_iterable() -> Iterator[Any]:
    return iter(())
