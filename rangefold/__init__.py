from .errors import RangeFoldError, ConstructionError, RangeError, UnknownNodeError
from .base import SegmentTreeParams, LcaParams
from .segment_trees import SegmentTree, MinSegmentTree, MaxSegmentTree, SumSegmentTree, combiners
from .lca import Lca, EulerTour, TourEntry, build_euler_tour
