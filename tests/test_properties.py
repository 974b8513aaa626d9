from __future__ import annotations

from typing import List, Tuple

import pytest
from hypothesis import given, settings, strategies as st
from hypothesis.strategies import composite

from fenwick_tree import FenwickTree, IndexOutOfBounds, ModularInt, RangeOutOfBounds, Span
from tests.test_utils import NaiveArray, apply_ops, build_pair


Ops = List[Tuple[int, int]]


@composite
def trees_with_ops(draw, max_size: int = 40) -> Tuple[int, Ops]:
    size = draw(st.integers(min_value=0, max_value=max_size))
    if size == 0:
        return size, []
    ops = draw(
        st.lists(
            st.tuples(
                st.integers(min_value=0, max_value=size - 1),
                st.integers(min_value=-10**6, max_value=10**6),
            ),
            max_size=60,
        )
    )
    return size, ops


@composite
def bounds(draw, size: int) -> Tuple[int, int]:
    start = draw(st.integers(min_value=0, max_value=size))
    end = draw(st.integers(min_value=start, max_value=size))
    return start, end


# ---------------------------------------------------------------------------
#  Algebraic laws
# ---------------------------------------------------------------------------
@given(trees_with_ops())
def test_total_equals_sum_of_deltas(data) -> None:
    size, ops = data
    tree = apply_ops(FenwickTree.with_len(size), ops)
    assert tree.sum(Span(0, size)) == sum(delta for _, delta in ops)


@given(trees_with_ops(), st.data())
def test_matches_naive_array(data, picker) -> None:
    size, ops = data
    tree, naive = build_pair(size, ops)
    start, end = picker.draw(bounds(size))
    assert tree.sum(Span(start, end)) == naive.sum(start, end)


@given(trees_with_ops(), st.data())
def test_range_decomposition(data, picker) -> None:
    size, ops = data
    tree = apply_ops(FenwickTree.with_len(size), ops)
    cuts = sorted(picker.draw(st.lists(st.integers(0, size), min_size=3, max_size=3)))
    i, j, k = cuts
    assert tree.sum(Span(i, j)) + tree.sum(Span(j, k)) == tree.sum(Span(i, k))


@given(trees_with_ops(), st.randoms(use_true_random=False))
def test_order_of_adds_is_irrelevant(data, rnd) -> None:
    size, ops = data
    shuffled = list(ops)
    rnd.shuffle(shuffled)
    first = apply_ops(FenwickTree.with_len(size), ops)
    second = apply_ops(FenwickTree.with_len(size), shuffled)
    assert first.slots == second.slots


@given(trees_with_ops(), st.data())
def test_split_delta_is_linear(data, picker) -> None:
    size, ops = data
    if not ops:
        return
    split_ops: Ops = []
    for index, delta in ops:
        part = picker.draw(st.integers(min_value=-10**6, max_value=10**6))
        split_ops.append((index, part))
        split_ops.append((index, delta - part))
    whole = apply_ops(FenwickTree.with_len(size), ops)
    split = apply_ops(FenwickTree.with_len(size), split_ops)
    start, end = picker.draw(bounds(size))
    assert whole.sum(Span(start, end)) == split.sum(Span(start, end))


@given(trees_with_ops(), st.data())
def test_reads_are_idempotent(data, picker) -> None:
    size, ops = data
    tree = apply_ops(FenwickTree.with_len(size), ops)
    start, end = picker.draw(bounds(size))
    snapshot = tree.slots
    assert tree.sum(Span(start, end)) == tree.sum(Span(start, end))
    assert tree.slots == snapshot


@given(st.lists(st.integers(min_value=-1000, max_value=1000), max_size=64))
def test_from_iterable_matches_naive(values) -> None:
    tree = FenwickTree.from_iterable(values)
    naive = NaiveArray(len(values))
    for index, value in enumerate(values):
        naive.add(index, value)
    for k in range(len(values) + 1):
        assert tree.prefix(k) == naive.sum(0, k)


@settings(max_examples=40)
@given(
    st.integers(min_value=1, max_value=16),
    st.lists(st.tuples(st.integers(0, 15), st.integers()), max_size=30),
)
def test_wrapping_matches_reduced_integers(bits: int, raw_ops) -> None:
    size = 16
    modulus = 1 << bits
    tree = FenwickTree.with_len(size, zero=ModularInt.zero(modulus))
    plain = FenwickTree.with_len(size)
    for index, delta in raw_ops:
        tree.add(index, ModularInt(delta, modulus))
        plain.add(index, delta)
    for start in range(0, size + 1, 3):
        assert tree.sum(Span(start, size)).value == plain.sum(Span(start, size)) % modulus


# ---------------------------------------------------------------------------
#  Bounds
# ---------------------------------------------------------------------------
@given(st.integers(min_value=0, max_value=50), st.integers(min_value=0, max_value=200))
def test_add_out_of_bounds(size: int, offset: int) -> None:
    tree = FenwickTree.with_len(size)
    with pytest.raises(IndexOutOfBounds):
        tree.add(size + offset, 1)


@given(st.integers(min_value=0, max_value=50), st.integers(min_value=1, max_value=200))
def test_sum_past_end(size: int, overshoot: int) -> None:
    tree = FenwickTree.with_len(size)
    with pytest.raises(RangeOutOfBounds):
        tree.sum(Span(0, size + overshoot))


@given(st.integers(min_value=1, max_value=50), st.data())
def test_sum_decreasing(size: int, picker) -> None:
    tree = FenwickTree.with_len(size)
    end = picker.draw(st.integers(min_value=0, max_value=size - 1))
    start = picker.draw(st.integers(min_value=end + 1, max_value=size))
    with pytest.raises(RangeOutOfBounds):
        tree.sum(Span(start, end))
