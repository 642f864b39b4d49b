import typing as T

from . import combiners
from .segment_tree import SegmentTree, T_V
from ..base import SegmentTreeParams


class MaxSegmentTree(SegmentTree):
    def __init__(self, values: T.Iterable[T_V], key: T.Optional[combiners.TKey] = None,
                 params: SegmentTreeParams = SegmentTreeParams()):
        super(MaxSegmentTree, self).__init__(values, combiners.keyed_max(key or combiners.identity), params)

    def max(self, low: int, high: int) -> T_V:
        return super(MaxSegmentTree, self).range_fold(low, high)
