import pytest

from soundshelf.core.envelope import error_envelope, success_envelope
from soundshelf.core.pagination import page_info, paginate, parse_int_param, parse_int_text, total_pages


ITEMS = list(range(1, 24))


def test_defaults_slice_first_page():
    assert paginate(ITEMS, 1, 10) == tuple(range(1, 11))


@pytest.mark.parametrize("limit", [1, 2, 3, 5, 7, 10, 23, 50])
def test_pages_concatenate_to_the_whole_collection(limit):
    pages = total_pages(len(ITEMS), limit)
    rebuilt = []
    for page in range(1, pages + 1):
        rebuilt.extend(paginate(ITEMS, page, limit))
    assert rebuilt == ITEMS


@pytest.mark.parametrize("total,limit,expected", [
    (0, 10, 0),
    (1, 10, 1),
    (10, 10, 1),
    (11, 10, 2),
    (23, 5, 5),
])
def test_total_pages_is_ceiling(total, limit, expected):
    assert total_pages(total, limit) == expected


def test_non_positive_limit_has_no_pages():
    assert total_pages(5, 0) == 0
    assert total_pages(5, -3) == 0
    assert paginate(ITEMS, 1, 0) == ()


def test_page_past_the_end_is_empty():
    assert paginate(ITEMS, 4, 10) == ()


def test_page_info_uses_given_total():
    info = page_info(total=3, page=2, limit=2)
    assert (info.page, info.limit, info.total, info.total_pages) == (2, 2, 3, 2)


@pytest.mark.parametrize("raw,expected", [
    (None, 7),
    ("3", 3),
    (" 4 ", 4),
    ("-2", -2),
    ("abc", 7),
    ("", 7),
    ("2.5", 7),
    ("1_0", 7),
    ("+5", 5),
])
def test_parse_int_param(raw, expected):
    assert parse_int_param(raw, 7) == expected


def test_success_envelope_only_carries_pagination_when_given():
    body = success_envelope([1], "1.0")
    assert body == {"success": True, "data": [1], "version": "1.0"}

    body = success_envelope([1], "1.0", page_info(1, 1, 10))
    assert body["pagination"] == {"page": 1, "limit": 10, "total": 1, "totalPages": 1}


def test_error_envelope_has_message_not_data():
    body = error_envelope("Track not found", "1.0")
    assert body == {"success": False, "message": "Track not found", "version": "1.0"}


@pytest.mark.parametrize("raw,expected", [
    ("10", 10),
    ("-3", -3),
    (" 7 ", 7),
    ("1_0", None),
    ("1e3", None),
    ("0x10", None),
    ("١٢", None),
    ("+", None),
    ("", None),
    (None, None),
])
def test_parse_int_text_accepts_only_plain_digits(raw, expected):
    assert parse_int_text(raw) == expected
