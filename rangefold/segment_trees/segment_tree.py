import numbers
import typing as T

from ..base import BaseObject, SegmentTreeParams
from ..errors import ConstructionError, RangeError

T_V = T.TypeVar("T_V")
TCombine = T.Callable[[T_V, T_V], T_V]

ROOT = 0
NO_CHILD = -1


class SegmentTree(BaseObject, T.Generic[T_V]):
    """
    Balanced binary partition of a fixed-size sequence answering associative range folds.

    Nodes are kept in flat parallel lists indexed by node id, the root being node 0. A node
    covering [low, high] with low < high has a left child covering [low, mid] and a right child
    covering [mid + 1, high], where mid = (low + high) // 2. Partial results are always combined
    left before right, so `combine` must be associative but need not be commutative.
    """

    def __init__(self, values: T.Iterable[T_V], combine: TCombine,
                 params: SegmentTreeParams = SegmentTreeParams()):
        super(SegmentTree, self).__init__()
        if not callable(combine):
            raise ConstructionError(f"combine must be callable, got {type(combine).__name__}")
        snapshot = list(values)
        if len(snapshot) == 0:
            self.log.warning("refusing to build a segment tree over an empty sequence")
            raise ConstructionError("cannot build a segment tree over an empty sequence")

        self.combine: TCombine = combine
        self.params: SegmentTreeParams = params
        self.size: int = len(snapshot)
        self.low: T.List[int] = []
        self.high: T.List[int] = []
        self.left: T.List[int] = []
        self.right: T.List[int] = []
        self.value: T.List[T_V] = []
        self.leaf: T.List[int] = [NO_CHILD] * self.size

        self._build_helper(snapshot, 0, self.size - 1)
        if params.check_associativity > 0:
            self._check_associativity(snapshot, params.check_associativity)
        self.log.info(f"built {type(self).__name__} over {self.size} values with {len(self.value)} nodes")

    @classmethod
    def build(cls, values: T.Iterable[T_V], combine: TCombine,
              params: SegmentTreeParams = SegmentTreeParams()) -> "SegmentTree[T_V]":
        return cls(values, combine, params)

    @property
    def last_index(self) -> int:
        return self.size - 1

    def _new_node(self, low: int, high: int) -> int:
        self.low.append(low)
        self.high.append(high)
        self.left.append(NO_CHILD)
        self.right.append(NO_CHILD)
        self.value.append(None)
        return len(self.value) - 1

    def _build_helper(self, values: T.List[T_V], low: int, high: int) -> int:
        node = self._new_node(low, high)
        if low == high:
            self.value[node] = values[low]
            self.leaf[low] = node
            return node

        mid = (low + high) // 2
        left = self._build_helper(values, low, mid)
        right = self._build_helper(values, mid + 1, high)
        self.left[node], self.right[node] = left, right
        self.value[node] = self.combine(self.value[left], self.value[right])
        return node

    def _check_associativity(self, values: T.List[T_V], samples: int) -> None:
        for i in range(min(samples, len(values) - 2)):
            a, b, c = values[i], values[i + 1], values[i + 2]
            if not self.params.equal(self.combine(self.combine(a, b), c), self.combine(a, self.combine(b, c))):
                self.log.warning(f"combine is not associative for values at indexes {i}, {i + 1} and {i + 2}")
                raise ConstructionError(f"combine is not associative for values at indexes {i}..{i + 2}")

    def check_index(self, index: int) -> int:
        if not isinstance(index, numbers.Integral) or isinstance(index, bool):
            raise RangeError(f"index must be an integer, got {type(index).__name__}")
        index = int(index)
        if not 0 <= index <= self.last_index:
            self.log.warning(f"index {index} out of range [0, {self.last_index}]")
            raise RangeError(f"index {index} out of range [0, {self.last_index}]")
        return index

    def check_range(self, low: int, high: int) -> T.Tuple[int, int]:
        low, high = self.check_index(low), self.check_index(high)
        if low > high:
            self.log.warning(f"empty range [{low}, {high}] requested")
            raise RangeError(f"low ({low}) must not be greater than high ({high})")
        return low, high

    def _fold_helper(self, node: int, low: int, high: int) -> T_V:
        if low == self.low[node] and high == self.high[node]:
            return self.value[node]
        mid = (self.low[node] + self.high[node]) // 2
        if high <= mid:
            return self._fold_helper(self.left[node], low, high)
        if low > mid:
            return self._fold_helper(self.right[node], low, high)
        return self.combine(
            self._fold_helper(self.left[node], low, mid),
            self._fold_helper(self.right[node], mid + 1, high)
        )

    def range_fold(self, low: int, high: int) -> T_V:
        """Returns `combine` applied left to right over the values in [low, high], both inclusive."""
        low, high = self.check_range(low, high)
        self.log.debug(f"folding range [{low}, {high}]")
        return self._fold_helper(ROOT, low, high)

    def fold(self) -> T_V:
        return self.value[ROOT]

    def point_update(self, index: int, value: T_V) -> None:
        """
        Replaces the value at `index` and recomputes every ancestor of its leaf.
        All new values are computed before any is written, so if `combine` raises the tree
        is left as it was.
        """
        index = self.check_index(index)
        self.log.debug(f"updating index {index}")

        path = [ROOT]
        node = ROOT
        while self.left[node] != NO_CHILD:
            mid = (self.low[node] + self.high[node]) // 2
            node = self.left[node] if index <= mid else self.right[node]
            path.append(node)

        updates: T.List[T.Tuple[int, T_V]] = [(node, value)]
        child, child_value = node, value
        for parent in reversed(path[:-1]):
            if child == self.left[parent]:
                child_value = self.combine(child_value, self.value[self.right[parent]])
            else:
                child_value = self.combine(self.value[self.left[parent]], child_value)
            child = parent
            updates.append((parent, child_value))

        for node, new_value in updates:
            self.value[node] = new_value

    def values(self) -> T.List[T_V]:
        return [self.value[node] for node in self.leaf]

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, index: int) -> T_V:
        return self.value[self.leaf[self.check_index(index)]]

    def __setitem__(self, index: int, value: T_V) -> None:
        self.point_update(index, value)
