import math

import pytest

from photoshare.domain.policies.pagination import paginate


@pytest.mark.parametrize("total", [0, 1, 11, 12, 13, 100])
@pytest.mark.parametrize("limit", [1, 5, 12, 100])
def test_window_never_exceeds_limit(total, limit):
    ranked = list(range(total))
    pages = math.ceil(total / limit)
    for page in range(1, pages + 2):
        window = paginate(ranked, page, limit)
        assert len(window.items) <= limit
        assert window.pagination.pages == pages
        assert window.pagination.total == total


def test_slices_one_based_pages():
    ranked = list(range(30))
    window = paginate(ranked, 2, 12)
    assert window.items == list(range(12, 24))
    p = window.pagination
    assert (p.page, p.limit, p.total, p.pages) == (2, 12, 30, 3)


def test_past_the_end_is_empty():
    window = paginate(list(range(5)), 4, 5)
    assert window.items == []
    assert window.pagination.pages == 1


def test_count_only():
    window = paginate(250, 1, 12)
    assert window.items == []
    assert window.pagination.total == 250
    assert window.pagination.pages == 21


def test_rejects_non_positive_limit():
    with pytest.raises(ValueError):
        paginate([1, 2, 3], 1, 0)
