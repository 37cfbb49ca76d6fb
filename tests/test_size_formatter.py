"""Tests for byte count formatting."""

import pytest

from dirtree.size_formatter import format_size


@pytest.mark.parametrize(
    "num_bytes,expected",
    [
        (0, "0 B"),
        (1, "1 B"),
        (1023, "1023 B"),
        (1024, "1 KB"),
        (1126, "1.1 KB"),
        (1536, "1.5 KB"),
        (10 * 1024 + 256, "10.25 KB"),
        (1024**2, "1 MB"),
        (1234567, "1.18 MB"),
        (3 * 1024**3, "3 GB"),
        (5 * 1024**4, "5 TB"),
        (1024**8, "1 YB"),
    ],
)
def test_format_size(num_bytes, expected):
    assert format_size(num_bytes) == expected


def test_rounding_up_moves_to_next_unit():
    # 1048575 bytes is 1023.999 KB
    assert format_size(1024**2 - 1) == "1 MB"


def test_largest_unit_is_not_exceeded():
    assert format_size(1024**9) == "1024 YB"


def test_values_beyond_float_range_do_not_fail():
    result = format_size(10**400)
    assert result.endswith(" YB")
    assert result.split()[0].isdigit()


def test_negative_size_is_rejected():
    with pytest.raises(ValueError, match="Size cannot be negative"):
        format_size(-1)
