from .jaro_winkler import (
    Equals,
    InvalidArgumentError,
    common_prefix,
    distance,
    jaro,
    proximity,
)
from .comparers import available_comparers, get_comparer, register_comparer

__all__ = [
    "Equals",
    "InvalidArgumentError",
    "common_prefix",
    "distance",
    "jaro",
    "proximity",
    "available_comparers",
    "get_comparer",
    "register_comparer",
]
