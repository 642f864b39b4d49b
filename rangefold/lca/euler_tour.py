import numbers
import typing as T
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from ..errors import ConstructionError, RangeError

T_N = T.TypeVar("T_N")
TNeighbors = T.Union[T.Mapping[T_N, T.Sequence[T_N]], T.Sequence[T.Sequence[int]]]

_EXHAUSTED = object()


@dataclass(frozen=True)
class TourEntry(T.Generic[T_N]):
    depth: int
    node: T_N


@dataclass
class EulerTour(T.Generic[T_N]):
    entries: T.List[TourEntry] = field(default_factory=list)
    first_index: T.Dict[T_N, int] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)

    def node_at(self, index: int) -> T_N:
        if not isinstance(index, numbers.Integral) or isinstance(index, bool):
            raise RangeError(f"tour index must be an integer, got {type(index).__name__}")
        if not 0 <= index < len(self.entries):
            raise RangeError(f"tour index {index} out of range [0, {len(self.entries) - 1}]")
        return self.entries[index].node


def _adjacency(neighbors: TNeighbors) -> T.Tuple[T.Iterable[T_N], T.Callable[[T_N], T.Sequence[T_N]]]:
    if isinstance(neighbors, Mapping):
        return neighbors.keys(), lambda node: neighbors.get(node, ())
    if not isinstance(neighbors, Sequence) or isinstance(neighbors, str):
        raise ConstructionError(f"neighbors must be a mapping or a sequence, got {type(neighbors).__name__}")

    def children(node: int) -> T.Sequence[int]:
        if isinstance(node, numbers.Integral) and not isinstance(node, bool) and 0 <= node < len(neighbors):
            return neighbors[node]
        return ()

    return range(len(neighbors)), children


def _children_of(lookup: T.Callable[[T_N], T.Sequence[T_N]], node: T_N) -> T.Tuple[T_N, ...]:
    try:
        return tuple(lookup(node))
    except TypeError as e:
        raise ConstructionError(f"children of node {node!r} must be a sequence of node ids") from e


def build_euler_tour(root: T_N, neighbors: TNeighbors, validate: bool = True) -> EulerTour:
    """
    Walks the tree hanging from `root` depth first and records its Euler tour.

    A node is recorded when entered and again after returning from each of its children, so
    a tree with E edges yields 2E + 1 entries. `neighbors` maps each node to its ordered
    children, either as a mapping or as a sequence indexed by node id; nodes without an entry
    are leaves. The walk keeps an explicit stack of (node, depth, child cursor) frames.

    With `validate` a node entered twice (a cycle or a shared child) and a node that has
    children but cannot be reached from `root` raise ConstructionError. Without it, nodes
    already entered are skipped, which still guarantees termination.
    """
    try:
        hash(root)
    except TypeError as e:
        raise ConstructionError(f"root must be hashable, got {type(root).__name__}") from e

    nodes, children = _adjacency(neighbors)
    tour: EulerTour = EulerTour()
    tour.first_index[root] = 0
    tour.entries.append(TourEntry(0, root))
    stack = [(root, 0, iter(_children_of(children, root)))]

    while len(stack) > 0:
        node, depth, cursor = stack[-1]
        child = next(cursor, _EXHAUSTED)
        if child is _EXHAUSTED:
            stack.pop()
            if len(stack) > 0:
                parent, parent_depth, _ = stack[-1]
                tour.entries.append(TourEntry(parent_depth, parent))
            continue

        try:
            seen = child in tour.first_index
        except TypeError as e:
            raise ConstructionError(f"child {child!r} of node {node!r} is not hashable") from e
        if seen:
            if validate:
                raise ConstructionError(f"node {child!r} is entered twice, reached again from {node!r}: "
                                        f"the neighbors contain a cycle or a shared child")
            continue

        tour.first_index[child] = len(tour.entries)
        tour.entries.append(TourEntry(depth + 1, child))
        stack.append((child, depth + 1, iter(_children_of(children, child))))

    if validate:
        for node in nodes:
            if node not in tour.first_index and len(_children_of(children, node)) > 0:
                raise ConstructionError(f"node {node!r} has children but is not reachable from root {root!r}")

    return tour
