import typing as T
from operator import attrgetter

from .euler_tour import EulerTour, TNeighbors, T_N, build_euler_tour
from ..base import BaseObject, LcaParams
from ..errors import ConstructionError, UnknownNodeError
from ..segment_trees import MinSegmentTree


class Lca(BaseObject, T.Generic[T_N]):
    """
    Lowest common ancestor queries over a static rooted tree.

    The tree is flattened into its Euler tour and the LCA of two nodes is the shallowest tour
    entry between their first occurrences, found with a range minimum query over depths.
    Entries of equal depth within a range always belong to the same node when that depth is
    the minimum, so the tie-break between them does not affect the answer.
    """

    def __init__(self, root: T_N, neighbors: TNeighbors, params: LcaParams = LcaParams()):
        super(Lca, self).__init__()
        self.params: LcaParams = params
        self.root: T_N = root
        try:
            self.tour: EulerTour = build_euler_tour(root, neighbors, validate=params.validate_tree)
        except ConstructionError as e:
            self.log.warning(f"cannot build LCA rooted at {root!r}: {e}")
            raise
        self.rmq: MinSegmentTree = MinSegmentTree(self.tour.entries, key=attrgetter("depth"))
        self.log.info(f"built LCA over {len(self.tour.first_index)} nodes, tour length {len(self.tour)}")

    @classmethod
    def build(cls, root: T_N, neighbors: TNeighbors, params: LcaParams = LcaParams()) -> "Lca[T_N]":
        return cls(root, neighbors, params)

    @property
    def nodes(self) -> T.Tuple[T_N, ...]:
        return tuple(self.tour.first_index)

    def _tour_index(self, node: T_N) -> int:
        try:
            return self.tour.first_index[node]
        except (KeyError, TypeError) as e:
            self.log.warning(f"node {node!r} is not part of the tree")
            raise UnknownNodeError(f"node {node!r} is not part of the tree rooted at {self.root!r}") from e

    def query(self, node_a: T_N, node_b: T_N) -> T_N:
        i, j = self._tour_index(node_a), self._tour_index(node_b)
        if i > j:
            i, j = j, i
        self.log.debug(f"lca of {node_a!r} and {node_b!r} searched in tour range [{i}, {j}]")
        return self.rmq.min(i, j).node

    __call__ = query

    def depth(self, node: T_N) -> int:
        return self.tour.entries[self._tour_index(node)].depth

    def __contains__(self, node: T_N) -> bool:
        try:
            return node in self.tour.first_index
        except TypeError:
            return False
