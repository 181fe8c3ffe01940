import pytest

from src.attendance_cloud.attendance_cloud.attendance.integrity import (
    format_distance,
    has_valid_signature,
    parse_distance,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (12.34561, "12.34561"),
        (12.34562, "12.34562"),
        (3, "3.00000"),
        ("0.42001", "0.42001"),
        (" 7.5 ", "7.50000"),
        (0.123456, "0.12346"),
        # exactly representable tie: rounds away from zero
        (0.015625, "0.01563"),
        (-0.015625, "-0.01563"),
        (-1.000014, "-1.00001"),
        (-0.0, "0.00000"),
        (1e22, "10000000000000000000000.00000"),
    ],
)
def test_format_distance_uses_five_fixed_decimals(value, expected):
    assert format_distance(value) == expected


@pytest.mark.parametrize(
    "value",
    [None, "", "abc", "12.3x", "1_0.00001", "１２.３４５６１", "0x1p3", "inf", [], {}, True],
)
def test_non_numeric_distance_formats_as_nan(value):
    assert format_distance(value) == "NaN"


def test_non_finite_distances():
    assert format_distance(float("inf")) == "Infinity"
    assert format_distance(float("-inf")) == "-Infinity"
    assert format_distance(float("nan")) == "NaN"
    assert format_distance(10**400) == "Infinity"
    assert format_distance(-(10**400)) == "-Infinity"
    assert format_distance("1e400") == "Infinity"


def test_signature_requires_trailing_one():
    assert has_valid_signature("12.34561")
    assert has_valid_signature("-0.00001")
    assert not has_valid_signature("12.34562")
    assert not has_valid_signature("NaN")
    assert not has_valid_signature("Infinity")


def test_parse_distance_keeps_numbers():
    assert parse_distance(2) == 2.0
    assert parse_distance("1.5") == 1.5
