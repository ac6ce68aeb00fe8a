import importlib.util

import pytest

if importlib.util.find_spec("hypothesis") is None:  # pragma: no cover
    pytest.skip("hypothesis not installed", allow_module_level=True)

import hypothesis.strategies as st
from hypothesis import given

from funclite.functional import collection_ops as ops

int_lists = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=50)


@given(int_lists)
def test_forall_holds_iff_every_element_satisfies(values):
    predicate = lambda n: n % 3 != 0
    assert ops.forall(values, predicate) == all(predicate(n) for n in values)


@given(int_lists)
def test_exists_fails_iff_no_element_satisfies(values):
    predicate = lambda n: n > 500
    assert ops.exists(values, predicate) == any(predicate(n) for n in values)


@given(int_lists)
def test_forall_and_exists_are_dual(values):
    predicate = lambda n: n >= 0
    assert ops.forall(values, predicate) == (
        not ops.exists(values, lambda n: not predicate(n))
    )


@given(int_lists)
def test_set_of_keeps_first_occurrence_order(values):
    expected = list(dict.fromkeys(values))
    assert list(ops.set_of(values)) == expected


@given(int_lists)
def test_group_by_buckets_rebuild_the_input(values):
    groups = ops.group_by(values, lambda n: n % 4)
    assert sorted(ops.flatten(groups.values())) == sorted(values)
    for key, bucket in groups.items():
        assert bucket == tuple(n for n in values if n % 4 == key)


@given(int_lists, int_lists)
def test_difference_excludes_right(left, right):
    result = ops.difference(left, right)
    assert list(result) == [n for n in dict.fromkeys(left) if n not in set(right)]
