import pytest

from records.services.pagination import MAX_LIMIT, PageParams, describe, paginate


class ListQuerySet:
    """Just enough of a QuerySet for paginate(): count() and slicing."""

    def __init__(self, items):
        self.items = list(items)
        self.sliced = False

    def count(self):
        return len(self.items)

    def __getitem__(self, key):
        self.sliced = True
        return self.items[key]


@pytest.mark.parametrize('query, expected', [
    ({}, (1, 10)),
    ({'page': '3', 'limit': '25'}, (3, 25)),
    ({'page': '0', 'limit': '0'}, (1, 10)),
    ({'page': '-2', 'limit': '-5'}, (1, 10)),
    ({'page': 'abc', 'limit': 'xyz'}, (1, 10)),
    ({'page': '', 'limit': ''}, (1, 10)),
    ({'limit': '500'}, (1, MAX_LIMIT)),
    ({'limit': '100'}, (1, 100)),
])
def test_page_params_fall_back_to_defaults(query, expected):
    params = PageParams.from_query(query)
    assert (params.page, params.limit) == expected


def test_offset_is_page_minus_one_times_limit():
    assert PageParams(page=1, limit=10).offset == 0
    assert PageParams(page=3, limit=20).offset == 40


def test_describe_rounds_total_pages_up():
    p = describe(PageParams(page=2, limit=10), 25)
    assert p.total_pages == 3
    assert p.as_dict() == {
        'page': 2,
        'limit': 10,
        'total_items': 25,
        'total_pages': 3,
        'current_page': 2,
        'items_per_page': 10,
    }
    assert p.envelope() == {'total_items': 25, 'total_pages': 3, 'current_page': 2, 'limit': 10}


@pytest.mark.parametrize('page', [1, 2, 50])
def test_no_rows_means_zero_pages(page):
    pagination, items = paginate(ListQuerySet([]), PageParams(page=page, limit=10))
    assert pagination.total_pages == 0
    assert pagination.total_items == 0
    assert items == []


def test_slice_length_matches_remaining_rows():
    for total in (1, 9, 10, 11, 57):
        for limit in (1, 7, 10, 100):
            for page in range(1, 9):
                params = PageParams(page=page, limit=limit)
                pagination, items = paginate(ListQuerySet(range(total)), params)
                assert len(items) == min(limit, max(0, total - params.offset))
                assert items == list(range(total))[params.offset:params.offset + limit]
                assert pagination.total_items == total


def test_page_past_the_end_is_empty_not_an_error():
    qs = ListQuerySet(range(5))
    pagination, items = paginate(qs, PageParams(page=999, limit=10))
    assert items == []
    assert pagination.total_pages == 1
    assert pagination.current_page == 999
    assert qs.sliced is False
