"""
Python's slicing rules for any sequence. A `Slice` holds head and tail
relative indexes that are resolved against a length only when the slice
is applied, so one slice can be reused across sequences of any size.
Out of range indexes are clamped exactly as `sequence[start:end:step]`
clamps them, and a step of zero is rejected with `InvalidStep`.
"""
from ._src.index import Index, IndexKind
from ._src.invalid_step import InvalidStep
from ._src.slice import Slice, apply
from ._src.slice_view import SliceView

__all__ = [
    "Index",
    "IndexKind",
    "InvalidStep",
    "Slice",
    "SliceView",
    "apply",
]

__version__ = "0.1.0"
