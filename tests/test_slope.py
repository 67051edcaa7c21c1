import pytest

from core.slope import (
    SlopeInputError,
    angle_to_ratio,
    convert,
    parse_ratio,
    ratio_to_angle,
    solve_triangle,
)


def test_angle_to_ratio_45_degrees():
    slope = angle_to_ratio("45")
    assert slope.horizontal == pytest.approx(1.0)
    assert slope.label == "1V:1.0H"


def test_ratio_to_angle_normalises_to_one_vertical():
    slope = ratio_to_angle("2V:3H")
    assert slope.horizontal == pytest.approx(1.5)
    assert slope.angle == pytest.approx(33.69, abs=0.01)
    assert slope.label == "1V:1.5H"
    assert slope.angle_label == "33.7°"


def test_parse_ratio_accepts_spacing_and_case():
    assert parse_ratio(" 1v : 2.5h ") == (1.0, 2.5)


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("abc", "Invalid ratio format"),
        ("1:2", "Invalid ratio format"),
        ("0V:1H", "must be positive"),
    ],
)
def test_parse_ratio_rejects(text, message):
    with pytest.raises(SlopeInputError, match=message):
        parse_ratio(text)


@pytest.mark.parametrize("angle", ["0", "90", "-5", "x"])
def test_angle_out_of_range(angle):
    with pytest.raises(SlopeInputError, match="between 0 and 90"):
        angle_to_ratio(angle)


def test_convert_needs_exactly_one_field():
    with pytest.raises(SlopeInputError, match="either an angle or a ratio"):
        convert("", "  ")
    with pytest.raises(SlopeInputError, match="only one value"):
        convert("30", "1V:1H")
    assert convert(None, "1V:1H").angle == pytest.approx(45.0)


@pytest.mark.parametrize(
    ("args", "solved", "label"),
    [
        (("", "3", "45"), "vertical", "Vertical: 3.0"),
        (("2", "", "45"), "horizontal", "Horizontal: 2.0"),
        (("4", "4", ""), "angle", "Angle: 45.0°"),
    ],
)
def test_solve_triangle(args, solved, label):
    solution = solve_triangle(*args)
    assert solution.solved == solved
    assert solution.label == label


@pytest.mark.parametrize(
    ("args", "message"),
    [
        (("", "", ""), "at least two values"),
        (("1", "", ""), "two values to calculate the third"),
        (("1", "2", "30"), "leave one field empty"),
        (("-1", "2", ""), "Vertical must be a positive number"),
        (("1", "x", ""), "Horizontal must be a positive number"),
        (("1", "", "95"), "between 0 and 90"),
        (("1", "", "0"), "greater than 0"),
        (("1", "0", ""), "greater than 0"),
    ],
)
def test_solve_triangle_errors(args, message):
    with pytest.raises(SlopeInputError, match=message):
        solve_triangle(*args)
