import functools
import math
import operator

import numpy as np
import pytest

from ..segment_tree import SegmentTree
from ..sum_segment_tree import SumSegmentTree
from ...base import SegmentTreeParams
from ...errors import ConstructionError, RangeError


def linear_fold(values, combine, low, high):
    return functools.reduce(combine, values[low:high + 1])


def all_ranges(size):
    for low in range(size):
        for high in range(low, size):
            yield low, high


@pytest.mark.parametrize("combine", [min, max, operator.add])
@pytest.mark.parametrize("size", [1, 2, 3, 7, 16, 33])
def test_fold_matches_linear_scan(combine, size):
    values = [int(x) for x in np.random.default_rng(size).integers(-100, 100, size)]
    tree = SegmentTree(values, combine)
    for low, high in all_ranges(size):
        assert tree.range_fold(low, high) == linear_fold(values, combine, low, high)


def test_whole_fold_equals_direct_fold():
    values = np.random.default_rng(0).random(50)
    tree = SegmentTree.build(values, operator.add)
    assert tree.fold() == pytest.approx(np.add.reduce(values))
    assert tree.range_fold(0, tree.last_index) == tree.fold()


def test_leaves_and_partition_layout():
    tree = SegmentTree([5, 1, 4, 2, 3], min)
    assert len(tree) == 5
    assert tree.values() == [5, 1, 4, 2, 3]
    assert (tree.low[0], tree.high[0]) == (0, 4)
    left, right = tree.left[0], tree.right[0]
    assert (tree.low[left], tree.high[left]) == (0, 2)
    assert (tree.low[right], tree.high[right]) == (3, 4)
    # 2n - 1 nodes for n leaves
    assert len(tree.value) == 9


def test_non_commutative_combine_keeps_order():
    letters = list("segmenttree")
    tree = SegmentTree(letters, operator.add)
    for low, high in all_ranges(len(letters)):
        assert tree.range_fold(low, high) == "".join(letters[low:high + 1])
    tree.point_update(4, "X")
    assert tree.fold() == "segmXnttree"


def test_update_consistency():
    rng = np.random.default_rng(7)
    values = [int(x) for x in rng.integers(0, 1000, 20)]
    tree = SegmentTree(values, max)
    for _ in range(30):
        index, value = int(rng.integers(0, 20)), int(rng.integers(0, 1000))
        tree.point_update(index, value)
        values[index] = value
        assert tree.range_fold(index, index) == value
        assert tree.values() == values
        for low, high in all_ranges(20):
            if low <= index <= high:
                assert tree.range_fold(low, high) == max(values[low:high + 1])


def test_item_access():
    tree = SegmentTree([3, 1, 2], operator.add)
    tree[1] = 10
    assert tree[1] == 10
    assert tree.fold() == 15
    assert tree[np.int64(2)] == 2


def test_empty_sequence_is_rejected():
    with pytest.raises(ConstructionError):
        SegmentTree([], min)


def test_non_callable_combine_is_rejected():
    with pytest.raises(ConstructionError):
        SegmentTree([1, 2], "min")


def test_associativity_check():
    SegmentTree([1, 2, 3, 4], operator.add, SegmentTreeParams(check_associativity=2))
    with pytest.raises(ConstructionError):
        SegmentTree([1, 2, 3, 4], operator.sub, SegmentTreeParams(check_associativity=2))


def test_associativity_check_with_tolerance():
    values = [0.1, 0.2, 0.3]
    with pytest.raises(ConstructionError):
        SumSegmentTree(values, SegmentTreeParams(check_associativity=1))
    tree = SumSegmentTree(values, SegmentTreeParams(check_associativity=1, equal=math.isclose))
    assert tree.sum(0, 2) == pytest.approx(0.6)


@pytest.mark.parametrize("low,high", [(-1, 2), (0, 5), (3, 2), (5, 5), (0.5, 2), (True, 2)])
def test_fold_out_of_bounds(low, high):
    tree = SegmentTree([1, 2, 3, 4, 5], operator.add)
    with pytest.raises(RangeError):
        tree.range_fold(low, high)


@pytest.mark.parametrize("index", [-1, 5, 100, "1"])
def test_update_out_of_bounds_leaves_tree_unchanged(index):
    tree = SegmentTree([1, 2, 3, 4, 5], operator.add)
    before = list(tree.value)
    with pytest.raises(RangeError):
        tree.point_update(index, 9)
    with pytest.raises(IndexError):
        tree[index] = 9
    assert tree.value == before


def test_failing_combine_leaves_tree_unchanged():
    def checked_add(a, b):
        if a < 0 or b < 0:
            raise ValueError("negative value")
        return a + b

    tree = SegmentTree([1, 2, 3, 4, 5], checked_add)
    before = list(tree.value)
    with pytest.raises(ValueError):
        tree.point_update(3, -1)
    assert tree.value == before
    assert tree.fold() == 15
