import operator
import typing as T

from .segment_tree import T_V

TKey = T.Callable[[T.Any], T.Any]


def identity(x):
    return x


def keyed_min(key: TKey = identity) -> T.Callable[[T_V, T_V], T_V]:
    """Minimum by `key`; on equal keys the left operand wins."""
    def combine(a: T_V, b: T_V) -> T_V:
        return b if key(b) < key(a) else a
    return combine


def keyed_max(key: TKey = identity) -> T.Callable[[T_V, T_V], T_V]:
    """Maximum by `key`; on equal keys the left operand wins."""
    def combine(a: T_V, b: T_V) -> T_V:
        return b if key(a) < key(b) else a
    return combine


add = operator.add
