"""Tests for core.pagination."""

import math

import pytest

from core.errors import ValidationError
from core.pagination import like_pattern, paginate, total_pages, validate_window


@pytest.mark.parametrize(
    ("total", "limit", "expected"),
    [
        (0, 10, 0),
        (1, 10, 1),
        (10, 10, 1),
        (11, 10, 2),
        (5, 2, 3),
        (100, 1, 100),
    ],
)
def test_total_pages_is_ceiling_of_total_over_limit(total, limit, expected):
    assert total_pages(total, limit) == expected


def test_total_pages_matches_math_ceil_over_a_range():
    for limit in range(1, 13):
        for total in range(0, 60):
            assert total_pages(total, limit) == math.ceil(total / limit)


def test_total_pages_rejects_non_positive_limit():
    with pytest.raises(ValidationError):
        total_pages(5, 0)


def test_paginate_builds_envelope():
    envelope = paginate([{"id": 1}, {"id": 2}], total_count=5, limit=2)
    assert envelope == {"items": [{"id": 1}, {"id": 2}], "totalPages": 3}


def test_paginate_empty():
    assert paginate([], total_count=0, limit=10) == {"items": [], "totalPages": 0}


@pytest.mark.parametrize(("value", "expected"), [("ann", "%ann%"), ("  Bo ", "%  Bo %"), ("", "%"), ("   ", "%"), (None, "%")])
def test_like_pattern(value, expected):
    assert like_pattern(value) == expected


@pytest.mark.parametrize(("limit", "offset"), [(0, 0), (-1, 0), (10, -1)])
def test_validate_window_rejects_bad_values(limit, offset):
    with pytest.raises(ValidationError):
        validate_window(limit, offset)


def test_validate_window_accepts_defaults():
    validate_window(10, 0)
