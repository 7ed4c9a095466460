"""Generic utility functions."""

from .config import BufkitConfig, parse_args
from .env import EnvData, EnvError, load_env
from .helpers import (
    get_default,
    first_or_default,
    last_or_default,
    ascending,
    descending,
    float_sort_func,
    merge,
    merge_unique,
    as_ref,
    as_ref_many,
)

__all__ = [
    "BufkitConfig",
    "parse_args",
    "EnvData",
    "EnvError",
    "load_env",
    "get_default",
    "first_or_default",
    "last_or_default",
    "ascending",
    "descending",
    "float_sort_func",
    "merge",
    "merge_unique",
    "as_ref",
    "as_ref_many",
]
