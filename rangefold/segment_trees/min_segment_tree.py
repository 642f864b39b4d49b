import typing as T

from . import combiners
from .segment_tree import SegmentTree, T_V
from ..base import BaseObject, SegmentTreeParams


class MinSegmentTree(BaseObject, T.Generic[T_V]):
    """
    Range minimum over a fixed-size sequence, compared by `key` when one is given.

    Backed by a SegmentTree over positions whose combine keeps the position holding the
    smaller key, the leftmost one on ties. This makes `argmin` free and `min` a lookup.
    """

    def __init__(self, values: T.Iterable[T_V], key: T.Optional[combiners.TKey] = None,
                 params: SegmentTreeParams = SegmentTreeParams()):
        super(MinSegmentTree, self).__init__()
        self.key: combiners.TKey = key if key is not None else combiners.identity
        self._values: T.List[T_V] = list(values)
        self.tree: SegmentTree[int] = SegmentTree(range(len(self._values)),
                                                  combiners.keyed_min(self._position_key), params)

    def _position_key(self, index: int):
        return self.key(self._values[index])

    def argmin(self, low: int, high: int) -> int:
        return self.tree.range_fold(low, high)

    def min(self, low: int, high: int) -> T_V:
        return self._values[self.argmin(low, high)]

    range_fold = min

    def point_update(self, index: int, value: T_V) -> None:
        index = self.tree.check_index(index)
        previous = self._values[index]
        self._values[index] = value
        try:
            self.tree.point_update(index, index)
        except Exception:
            self._values[index] = previous
            raise

    def values(self) -> T.List[T_V]:
        return list(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> T_V:
        return self._values[self.tree.check_index(index)]

    def __setitem__(self, index: int, value: T_V) -> None:
        self.point_update(index, value)
