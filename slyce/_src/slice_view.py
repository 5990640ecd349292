import operator
from collections.abc import Iterator, Sequence
from typing import Final, Generic, TypeVar, overload

from .index import Index
from .invalid_step import InvalidStep
from .slice import Slice

__all__ = ["SliceView"]

T_co = TypeVar("T_co", covariant=True)

Self = TypeVar("Self", bound="SliceView")


class SliceView(Sequence[T_co], Generic[T_co]):
    """
    A lazy `sequence[start:end:step]` that does not copy the sequence.

    The slice is resolved against the current length of the sequence on
    every access, so a view over a list that grows or shrinks follows it.
    """
    _sequence: Final[Sequence[T_co]]
    _slice: Final[Slice]

    __slots__ = {
        "_sequence":
            "The viewed sequence.",
        "_slice":
            "The slice applied to the sequence.",
    }

    def __init__(self: Self, sequence: Sequence[T_co], slice_: Slice, /) -> None:
        if not isinstance(slice_, Slice):
            raise TypeError(f"expected a Slice, got {slice_!r}")
        self._sequence = sequence
        self._slice = slice_

    @overload
    def __getitem__(self: Self, index: int, /) -> T_co: ...

    @overload
    def __getitem__(self: Self, index: slice, /) -> "SliceView[T_co]": ...

    def __getitem__(self, index, /):
        range_ = self._slice.indices(len(self._sequence))
        if isinstance(index, slice):
            if index.step is not None and operator.index(index.step) == 0:
                raise InvalidStep
            range_ = range_[index]
            if len(range_) == 0:
                return type(self)(self._sequence, Slice(Index.head(0), Index.head(0), range_.step))
            # A backward range stopping below 0 runs to the front.
            end = Index.head(range_.stop) if range_.stop >= 0 else Index.default()
            return type(self)(self._sequence, Slice(Index.head(range_.start), end, range_.step))
        else:
            return self._sequence[range_[index]]

    def __iter__(self: Self, /) -> Iterator[T_co]:
        return self._slice.apply(self._sequence)

    def __len__(self: Self, /) -> int:
        return len(self._slice.indices(len(self._sequence)))

    def __repr__(self: Self, /) -> str:
        return f"{self._sequence!r}{self._slice}"

    def __reversed__(self: Self, /) -> Iterator[T_co]:
        sequence = self._sequence
        return (sequence[i] for i in reversed(self._slice.indices(len(sequence))))

    @property
    def sequence(self: Self, /) -> Sequence[T_co]:
        return self._sequence

    @property
    def slice(self: Self, /) -> Slice:
        return self._slice
