from .base_object import BaseObject
from .params import SegmentTreeParams, LcaParams
