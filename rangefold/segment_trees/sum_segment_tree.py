import typing as T

from . import combiners
from .segment_tree import SegmentTree
from ..base import SegmentTreeParams


class SumSegmentTree(SegmentTree):
    def __init__(self, values: T.Iterable[float], params: SegmentTreeParams = SegmentTreeParams()):
        super(SumSegmentTree, self).__init__(values, combiners.add, params)

    def sum(self, low: int, high: int) -> float:
        return super(SumSegmentTree, self).range_fold(low, high)
