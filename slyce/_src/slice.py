import operator
import re
from collections.abc import Iterator, Sequence
from typing import Any, Final, NoReturn, Optional, SupportsIndex, Type, TypeVar

import slyce._src as src
from .index import Index
from .invalid_step import InvalidStep

__all__ = ["Slice", "apply"]

T = TypeVar("T")

Self = TypeVar("Self", bound="Slice")

DEFAULT: Final[Index] = Index.default()

EXPRESSION = re.compile(
    r"\[\s*(?P<start>-?[0-9]+)?\s*"
    r":\s*(?P<end>-?[0-9]+)?\s*"
    r"(?::\s*(?P<step>-?[0-9]+)?\s*)?\]"
)


def clamp(index: int, lower: int, upper: int, /) -> int:
    return min(max(index, lower), upper)


def parse_index(text: Optional[str], /) -> Index:
    if text is None:
        return DEFAULT
    elif text.startswith("-"):
        # "-0" is kept as the tail index 0.
        return Index.tail(int(text[1:]))
    else:
        return Index.head(int(text))


class Slice:
    """
    A `start:end:step` triple that can be applied to any sequence.

    The same slice may be applied to sequences of different lengths. All
    length dependent work happens in `Slice.indices`, which reproduces the
    bounds Python's own slicing computes: out of range indexes are clamped,
    never rejected.

    A step of zero is rejected when the slice is built, so every `Slice`
    instance can be applied.
    """
    _end: Final[Index]
    _start: Final[Index]
    _step: Final[Optional[int]]

    __slots__ = {
        "_end":
            "The exclusive stopping index.",
        "_start":
            "The starting index.",
        "_step":
            "The step size, or None for 1.",
    }

    def __init__(
        self: Self,
        start: Index = DEFAULT,
        end: Index = DEFAULT,
        step: Optional[SupportsIndex] = None,
        /,
    ) -> None:
        if not isinstance(start, Index):
            raise TypeError(f"expected an Index for the start, got {start!r}")
        elif not isinstance(end, Index):
            raise TypeError(f"expected an Index for the end, got {end!r}")
        if step is not None:
            step = operator.index(step)
            if step == 0:
                raise InvalidStep
        object.__setattr__(self, "_start", start)
        object.__setattr__(self, "_end", end)
        object.__setattr__(self, "_step", step)

    def __delattr__(self: Self, name: str, /) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self: Self, other: Any, /) -> bool:
        if isinstance(other, Slice):
            return (self._start, self._end, self._step) == (other._start, other._end, other._step)
        else:
            return NotImplemented

    def __hash__(self: Self, /) -> int:
        return hash((self._start, self._end, self._step))

    def __reduce__(self: Self, /) -> tuple[Type[Self], tuple[Index, Index, Optional[int]]]:
        return (type(self), (self._start, self._end, self._step))

    def __repr__(self: Self, /) -> str:
        return f"{type(self).__name__}(start={self._start!r}, end={self._end!r}, step={self._step!r})"

    def __setattr__(self: Self, name: str, value: Any, /) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __str__(self: Self, /) -> str:
        step = "" if self._step is None else f":{self._step!r}"
        return f"[{self._start}:{self._end}{step}]"

    def apply(self: Self, source: Sequence[T], /) -> Iterator[T]:
        """
        Lazily iterate over `source[start:end:step]`.

        The bounds are resolved against `len(source)` immediately, but
        elements are only looked up as the iterator is consumed.
        """
        range_ = self.indices(len(source))
        return (source[i] for i in range_)

    @property
    def end(self: Self, /) -> Index:
        return self._end

    @classmethod
    def from_optional(
        cls: Type[Self],
        start: Optional[SupportsIndex] = None,
        end: Optional[SupportsIndex] = None,
        step: Optional[SupportsIndex] = None,
        /,
    ) -> Self:
        """Build a slice the way `slice(start, end, step)` would be written."""
        return cls(Index.from_optional(start), Index.from_optional(end), step)

    @classmethod
    def from_slice(cls: Type[Self], slice_: slice, /) -> Self:
        if not isinstance(slice_, slice):
            raise TypeError(f"expected a slice, got {slice_!r}")
        return cls.from_optional(slice_.start, slice_.stop, slice_.step)

    def indices(self: Self, length: SupportsIndex, /) -> range:
        """The positions selected in a sequence of the given length."""
        length = operator.index(length)
        if length < 0:
            raise ValueError(f"expected a non-negative length, got {length!r}")
        step = 1 if self._step is None else self._step
        if step > 0:
            start = clamp(self._start.resolve(length, 0), 0, length)
            end = clamp(self._end.resolve(length, length), 0, length)
        else:
            start = clamp(self._start.resolve(length, length - 1), -1, length - 1)
            end = clamp(self._end.resolve(length, -1), -1, length - 1)
        return range(start, end, step)

    @classmethod
    def parse(cls: Type[Self], text: str, /) -> Self:
        """
        Parse `[start:end]` or `[start:end:step]`.

        Any part may be left out. A leading minus sign makes a tail index,
        so `-0` is `Index.tail(0)`.
        """
        if not isinstance(text, str):
            raise TypeError(f"expected a str, got {text!r}")
        match = EXPRESSION.fullmatch(text.strip())
        if match is None:
            raise ValueError(f"expected [start:end:step], got {text!r}")
        step = match["step"]
        return cls(
            parse_index(match["start"]),
            parse_index(match["end"]),
            None if step is None else int(step),
        )

    def positions(self: Self, length: SupportsIndex, /) -> Iterator[int]:
        return iter(self.indices(length))

    @property
    def start(self: Self, /) -> Index:
        return self._start

    @property
    def step(self: Self, /) -> Optional[int]:
        return self._step

    def view(self: Self, source: Sequence[T], /) -> "src.slice_view.SliceView[T]":
        return src.slice_view.SliceView(source, self)


def apply(slice_: Slice, source: Sequence[T], /) -> Iterator[T]:
    if not isinstance(slice_, Slice):
        raise TypeError(f"expected a Slice, got {slice_!r}")
    return slice_.apply(source)
