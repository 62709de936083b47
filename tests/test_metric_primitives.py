import pytest

from lms_analytics.core.metrics import average, letter_grade, percent_of, round2, safe_divide


@pytest.mark.parametrize("numerator", [0, 1, 57.5, 1000])
def test_percent_of_zero_denominator_is_zero(numerator):
    assert percent_of(numerator, 0) == 0


def test_percent_of_basic():
    assert percent_of(3, 4) == 75.0
    assert percent_of(1, 3) == pytest.approx(33.3333, rel=1e-4)


def test_safe_divide():
    assert safe_divide(10, 0) == 0
    assert safe_divide(10, 4) == 2.5


def test_round2_half_up():
    assert round2(2.675) == 2.68
    assert round2(1.005) == 1.01
    assert round2(33.333333) == 33.33
    assert round2(66.666666) == 66.67
    assert round2(100) == 100.0


def test_average_empty_is_zero():
    assert average([]) == 0


def test_average_single_value_is_rounded():
    assert average([83.456]) == round2(83.456) == 83.46


def test_average_accepts_generators():
    assert average(x for x in [80, 90, 100]) == 90.0
    assert average([70, 75, 71]) == 72.0


@pytest.mark.parametrize(
    "percentage, expected",
    [
        (100, "A"),
        (90, "A"),
        (89.99, "B"),
        (80, "B"),
        (79.99, "C"),
        (70, "C"),
        (69.99, "D"),
        (60, "D"),
        (59.99, "F"),
        (0, "F"),
    ],
)
def test_letter_grade_boundaries(percentage, expected):
    assert letter_grade(percentage) == expected
