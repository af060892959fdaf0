from hypothesis import given
from hypothesis import strategies as st

from dsakit.searching import binary_search, linear_search, ternary_search


def test_binary_search_source_example():
    assert binary_search([1, 3, 5, 7, 9], 5) == 2


def test_ternary_search_source_example():
    assert ternary_search([1, 3, 5, 7, 9], 5) == 2


def test_linear_search_source_example():
    assert linear_search([1, 4, 3, 7, 9, 2], 7) == 3


def test_empty_sequence_finds_nothing():
    assert binary_search([], 1) is None
    assert ternary_search([], 1) is None
    assert linear_search([], 1) is None


def test_missing_key_returns_none():
    assert binary_search([1, 3, 5, 7, 9], 4) is None
    assert ternary_search([1, 3, 5, 7, 9], 4) is None
    assert linear_search([1, 3, 5, 7, 9], 4) is None


@given(
    items=st.lists(st.integers(-1000, 1000), unique=True).map(sorted),
    key=st.integers(-1000, 1000),
)
def test_sorted_search_agrees_with_membership(items, key):
    expected = items.index(key) if key in items else None
    assert binary_search(items, key) == expected
    assert ternary_search(items, key) == expected


@given(items=st.lists(st.integers(-20, 20), min_size=1).map(sorted), data=st.data())
def test_sorted_search_with_duplicates_finds_a_match(items, data):
    key = data.draw(st.sampled_from(items))
    assert items[binary_search(items, key)] == key
    assert items[ternary_search(items, key)] == key


@given(items=st.lists(st.integers(-50, 50)), key=st.integers(-50, 50))
def test_linear_search_finds_first_occurrence(items, key):
    index = linear_search(items, key)
    if key in items:
        assert index == items.index(key)
    else:
        assert index is None