import pytest

from leaderboard.errors import InvalidRequest, UnexpectedStoreState
from leaderboard.services.ordering import SortingOrder


def test_codes_round_trip_through_the_enum():
    assert SortingOrder('ASC') is SortingOrder.ASCENDING
    assert SortingOrder('DSC') is SortingOrder.DESCENDING
    assert SortingOrder.ASCENDING.value == 'ASC'


def test_zadd_modes():
    assert SortingOrder.ASCENDING.zadd_mode == 'LT'
    assert SortingOrder.DESCENDING.zadd_mode == 'GT'
    assert SortingOrder.ASCENDING.zadd_flags == {'lt': True}
    assert SortingOrder.DESCENDING.zadd_flags == {'gt': True}


def test_unknown_request_code_is_a_bad_request():
    with pytest.raises(InvalidRequest):
        SortingOrder.from_code('Ascending')
    with pytest.raises(InvalidRequest):
        SortingOrder.from_code(None)


def test_unknown_stored_code_is_unexpected_state():
    with pytest.raises(UnexpectedStoreState):
        SortingOrder.from_stored('Descending')
    with pytest.raises(UnexpectedStoreState):
        SortingOrder.from_stored(None)


def test_rank_and_page_follow_direction(store):
    store.zadd('s', {'low': 1, 'mid': 5, 'high': 9})
    assert SortingOrder.ASCENDING.rank(store, 's', 'low') == 0
    assert SortingOrder.DESCENDING.rank(store, 's', 'high') == 0
    assert SortingOrder.DESCENDING.rank(store, 's', 'low') == 2
    assert [m for m, _ in SortingOrder.ASCENDING.page(store, 's', 0, 1)] == ['low', 'mid']
    assert [m for m, _ in SortingOrder.DESCENDING.page(store, 's', 0, 1)] == ['high', 'mid']
