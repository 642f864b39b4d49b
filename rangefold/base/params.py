import operator
import typing as T
from dataclasses import dataclass


@dataclass
class SegmentTreeParams:
    check_associativity: int = 0
    # comparison used by the associativity check, exact equality unless replaced
    equal: T.Callable[[T.Any, T.Any], bool] = operator.eq


@dataclass
class LcaParams:
    validate_tree: bool = True
