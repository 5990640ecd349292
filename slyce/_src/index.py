import enum
import operator
from typing import Any, Final, NoReturn, Optional, SupportsIndex, Type, TypeVar

__all__ = ["Index", "IndexKind"]

Self = TypeVar("Self", bound="Index")


class IndexKind(enum.Enum):
    DEFAULT = "default"
    HEAD = "head"
    TAIL = "tail"


class Index:
    """
    A position in a sequence whose length is not known yet.

    Head indexes count from the front of the sequence, tail indexes count
    from the back, and the default index is filled in by the slice using it.
    Nothing here depends on a length: see `Index.resolve`.

    Zero has no sign, so `Index.from_int(0)` is the head index 0. Use
    `Index.tail(0)` for the position just past the last element.
    """
    _kind: Final[IndexKind]
    _value: Final[int]

    __slots__ = {
        "_kind":
            "Which end of the sequence the index counts from.",
        "_value":
            "The non-negative distance from that end.",
    }

    def __init__(self: Self, kind: IndexKind, value: int = 0, /) -> None:
        if not isinstance(kind, IndexKind):
            raise TypeError(f"expected an IndexKind, got {kind!r}")
        value = operator.index(value)
        if value < 0:
            raise ValueError(f"expected a non-negative magnitude, got {value!r}")
        elif kind is IndexKind.DEFAULT and value != 0:
            raise ValueError(f"default indexes have no magnitude, got {value!r}")
        object.__setattr__(self, "_kind", kind)
        object.__setattr__(self, "_value", value)

    def __delattr__(self: Self, name: str, /) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self: Self, other: Any, /) -> bool:
        if isinstance(other, Index):
            return self._kind is other._kind and self._value == other._value
        else:
            return NotImplemented

    def __hash__(self: Self, /) -> int:
        return hash((self._kind, self._value))

    def __reduce__(self: Self, /) -> tuple[Type[Self], tuple[IndexKind, int]]:
        return (type(self), (self._kind, self._value))

    def __repr__(self: Self, /) -> str:
        if self.is_default:
            return f"{type(self).__name__}.default()"
        else:
            return f"{type(self).__name__}.{self._kind.value}({self._value!r})"

    def __setattr__(self: Self, name: str, value: Any, /) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __str__(self: Self, /) -> str:
        if self.is_default:
            return ""
        elif self._kind is IndexKind.HEAD:
            return str(self._value)
        else:
            return f"-{self._value}"

    @classmethod
    def default(cls: Type[Self], /) -> Self:
        return cls(IndexKind.DEFAULT)

    @classmethod
    def from_int(cls: Type[Self], index: SupportsIndex, /) -> Self:
        """Python's convention: non-negative counts from the head, negative from the tail."""
        index = operator.index(index)
        if index < 0:
            return cls(IndexKind.TAIL, -index)
        else:
            return cls(IndexKind.HEAD, index)

    @classmethod
    def from_optional(cls: Type[Self], index: Optional[SupportsIndex], /) -> Self:
        if index is None:
            return cls(IndexKind.DEFAULT)
        else:
            return cls.from_int(index)

    @classmethod
    def head(cls: Type[Self], index: SupportsIndex, /) -> Self:
        return cls(IndexKind.HEAD, index)

    @property
    def is_default(self: Self, /) -> bool:
        return self._kind is IndexKind.DEFAULT

    @property
    def kind(self: Self, /) -> IndexKind:
        return self._kind

    def resolve(self: Self, length: int, default: int, /) -> int:
        """
        The signed offset of the index in a sequence of the given length.

        The result is not clamped: `Index.tail(n)` gives `length - n` even
        when that is negative, and head indexes may be past the end.
        `default` is returned for the default index.
        """
        kind = self._kind
        if kind is IndexKind.DEFAULT:
            return default
        elif kind is IndexKind.HEAD:
            return self._value
        elif kind is IndexKind.TAIL:
            return length - self._value
        else:
            raise AssertionError(f"unhandled index kind {kind!r}")

    @classmethod
    def tail(cls: Type[Self], index: SupportsIndex, /) -> Self:
        return cls(IndexKind.TAIL, index)

    @property
    def value(self: Self, /) -> int:
        return self._value
