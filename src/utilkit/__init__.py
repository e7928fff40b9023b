from .comparer import ComparableComparer, natural_compare
from .collection import (
    add_number_copy,
    add_range,
    add_unique,
    add_values,
    composite_list,
    create_and_add,
    empty_iterable,
    empty_list,
    find_all,
    first_or_add,
    first_or_default_comparable,
    get_all_or_put,
    get_or_put,
    get_or_put_key,
    is_empty,
    is_null_or_empty,
    max_by,
    min_by,
    remove_all,
    swap,
    try_get,
)
from .sampling import get_default_rng, random_choice, random_element, seed_default_rng
from .flags import is_byte_set, is_set
from . import linalg

__all__ = [
    "ComparableComparer",
    "natural_compare",
    "add_number_copy",
    "add_range",
    "add_unique",
    "add_values",
    "composite_list",
    "create_and_add",
    "empty_iterable",
    "empty_list",
    "find_all",
    "first_or_add",
    "first_or_default_comparable",
    "get_all_or_put",
    "get_or_put",
    "get_or_put_key",
    "is_empty",
    "is_null_or_empty",
    "max_by",
    "min_by",
    "remove_all",
    "swap",
    "try_get",
    "get_default_rng",
    "random_choice",
    "random_element",
    "seed_default_rng",
    "is_byte_set",
    "is_set",
    "linalg",
]
