"""Unit tests for lazy slice views."""

import itertools
from collections.abc import Sequence

import pytest
from slyce import Index, InvalidStep, Slice, SliceView

DATA = [10, 20, 30, 40, 50]


class TestSliceView:
    def test_iter_and_len(self):
        view = Slice(Index.tail(3), Index.default(), -1).view(DATA)
        assert isinstance(view, Sequence)
        assert list(view) == [30, 20, 10]
        assert len(view) == 3

    def test_reiterable(self):
        view = Slice(Index.head(1)).view(DATA)
        assert list(view) == list(view) == [20, 30, 40, 50]

    def test_getitem(self):
        view = Slice.from_optional(None, None, -2).view(DATA)
        assert view[0] == 50
        assert view[-1] == 10
        with pytest.raises(IndexError):
            view[3]

    def test_reversed(self):
        view = Slice.from_optional(1, None, 2).view(DATA)
        assert list(reversed(view)) == [40, 20]

    def test_sequence_mixins(self):
        view = Slice.from_optional(1, -1).view(DATA)
        assert 30 in view
        assert 10 not in view
        assert view.index(40) == 2
        assert view.count(20) == 1

    def test_follows_length_changes(self):
        data = [1, 2, 3]
        view = Slice(Index.tail(2)).view(data)
        assert list(view) == [2, 3]
        data.append(4)
        assert list(view) == [3, 4]
        assert len(view) == 2

    def test_repr(self):
        view = Slice.from_optional(1, -1, 2).view([1, 2, 3])
        assert repr(view) == "[1, 2, 3][1:-1:2]"

    def test_properties(self):
        slice_ = Slice(Index.head(2))
        view = SliceView(DATA, slice_)
        assert view.sequence is DATA
        assert view.slice is slice_

    def test_zero_step_slicing_rejected(self):
        view = Slice().view([1, 2, 3])
        with pytest.raises(InvalidStep):
            view[::0]
        with pytest.raises(InvalidStep):
            Slice.from_optional(None, None, -1).view([1, 2, 3])[1:2:0]

    def test_requires_slice(self):
        with pytest.raises(TypeError):
            SliceView(DATA, slice(1, 2))

    @pytest.mark.parametrize("outer_step", [None, 1, 2, -1, -2, -3])
    def test_nested_slicing_matches_builtin(self, outer_step):
        data = list(range(9))
        bounds = [None, -11, -4, -1, 0, 2, 5, 11]
        outer = (2, -1, outer_step)
        for start, end, step in itertools.product(bounds, bounds, [None, 2, -1, -2]):
            view = Slice.from_optional(*outer).view(data)[start:end:step]
            expected = data[outer[0]:outer[1]:outer[2]][start:end:step]
            assert isinstance(view, SliceView)
            assert list(view) == expected, (start, end, step)
            assert len(view) == len(expected)
