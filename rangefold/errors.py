class RangeFoldError(Exception):
    """Root of every error raised by rangefold."""


class ConstructionError(RangeFoldError, ValueError):
    """The input given to build a structure cannot produce a valid one."""


class RangeError(RangeFoldError, IndexError):
    """An index or index range lies outside the bounds fixed at construction."""


class UnknownNodeError(RangeFoldError, LookupError):
    """A node id was not part of the tree the structure was built from."""
