from .segment_tree import SegmentTree
from .min_segment_tree import MinSegmentTree
from .max_segment_tree import MaxSegmentTree
from .sum_segment_tree import SumSegmentTree
from . import combiners
