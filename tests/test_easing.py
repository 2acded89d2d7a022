"""Tests for easing conversion."""

from dataclasses import dataclass

import pytest

from motion_spec_extractor.core.easing import (
    InterpolationKind,
    classify_easing_preset,
    convert_easing,
    convert_easing_approx,
    dominant_dimension,
    format_number,
    linear_bezier,
    make_bezier,
)


@dataclass
class Ease:
    """Minimal ease handle."""

    speed: float
    influence: float


EASY_EASE = [Ease(0.0, 33.33)]


class TestConvertEasing:
    """Test value-aware easing conversion."""

    def test_easy_ease(self) -> None:
        """Test that Easy Ease maps to the standard curve."""
        bezier = convert_easing(EASY_EASE, EASY_EASE, 1.0, 0.0, 100.0)

        assert bezier["x1"] == pytest.approx(0.3333, abs=1e-4)
        assert bezier["y1"] == 0
        assert bezier["x2"] == pytest.approx(0.6667, abs=1e-4)
        assert bezier["y2"] == 1
        assert bezier["css"] == "cubic-bezier(0.3333, 0, 0.6667, 1)"
        assert bezier["preset"] == "easy-ease"

    def test_speed_equal_to_chord_slope_is_linear(self) -> None:
        """Test that handles matching the average speed give y = x."""
        # 100 units over 2 seconds = 50 units/s
        out_ease = [Ease(50.0, 25.0)]
        in_ease = [Ease(50.0, 40.0)]

        bezier = convert_easing(out_ease, in_ease, 2.0, 0.0, 100.0)

        assert bezier["y1"] == pytest.approx(bezier["x1"], abs=1e-4)
        assert bezier["y2"] == pytest.approx(bezier["x2"], abs=1e-4)

    def test_negative_speed_uses_magnitude(self) -> None:
        """Test that a decreasing value eases like an increasing one."""
        out_ease = [Ease(-50.0, 50.0)]
        in_ease = [Ease(-50.0, 50.0)]

        falling = convert_easing(out_ease, in_ease, 1.0, 100.0, 50.0)
        rising = convert_easing([Ease(50.0, 50.0)], [Ease(50.0, 50.0)], 1.0, 50.0, 100.0)

        assert falling == rising

    def test_overshoot_keeps_y_unclamped(self) -> None:
        """Test that fast handles produce y outside [0, 1]."""
        out_ease = [Ease(300.0, 50.0)]
        in_ease = [Ease(0.0, 50.0)]

        bezier = convert_easing(out_ease, in_ease, 1.0, 0.0, 100.0)

        assert bezier["y1"] == pytest.approx(1.5)
        assert bezier["y1"] > 1

    def test_influence_over_100_clamps_x(self) -> None:
        """Test that x coordinates always stay within [0, 1]."""
        out_ease = [Ease(0.0, 150.0)]
        in_ease = [Ease(0.0, 120.0)]

        bezier = convert_easing(out_ease, in_ease, 1.0, 0.0, 10.0)

        assert 0 <= bezier["x1"] <= 1
        assert 0 <= bezier["x2"] <= 1

    def test_negative_influence_clamps_x(self) -> None:
        """Test that negative influences cannot pull x outside [0, 1]."""
        out_ease = [Ease(0.0, -50.0)]
        in_ease = [Ease(0.0, -50.0)]

        bezier = convert_easing(out_ease, in_ease, 1.0, 0.0, 10.0)

        assert 0 <= bezier["x1"] <= 1
        assert 0 <= bezier["x2"] <= 1
        assert bezier["x1"] == 0
        assert bezier["x2"] == 1

    def test_zero_value_change_is_linear(self) -> None:
        """Test that a segment without movement returns the identity curve."""
        bezier = convert_easing(EASY_EASE, EASY_EASE, 1.0, 5.0, 5.0)

        assert bezier == linear_bezier()

    def test_zero_duration_is_linear(self) -> None:
        """Test that a zero-length segment returns the identity curve."""
        bezier = convert_easing(EASY_EASE, EASY_EASE, 0.0, 0.0, 100.0)

        assert bezier["css"] == "cubic-bezier(0, 0, 1, 1)"
        assert bezier["preset"] == "linear"

    def test_uses_dominant_dimension_handles(self) -> None:
        """Test that the axis with the largest change picks the handles."""
        # x barely moves with linear-looking handles, y moves a lot with Easy Ease
        out_ease = [Ease(1.0, 10.0), Ease(0.0, 33.33)]
        in_ease = [Ease(1.0, 10.0), Ease(0.0, 33.33)]

        bezier = convert_easing(out_ease, in_ease, 1.0, [0.0, 0.0], [1.0, 200.0])

        assert bezier["css"] == "cubic-bezier(0.3333, 0, 0.6667, 1)"

    def test_short_ease_list_falls_back_to_first_handle(self) -> None:
        """Test that spatial properties with one handle still convert."""
        bezier = convert_easing(EASY_EASE, EASY_EASE, 1.0, [0.0, 0.0], [0.0, 100.0])

        assert bezier["preset"] == "easy-ease"


class TestConvertEasingApprox:
    """Test the speed-only fallback conversion."""

    def test_zero_speed_flattens_tangent(self) -> None:
        """Test that zero speed handles give y1 = 0 and y2 = 1."""
        bezier = convert_easing_approx(EASY_EASE, EASY_EASE)

        assert bezier["css"] == "cubic-bezier(0.3333, 0, 0.6667, 1)"

    def test_nonzero_speed_is_linear(self) -> None:
        """Test that any other speed follows the diagonal."""
        bezier = convert_easing_approx([Ease(10.0, 25.0)], [Ease(10.0, 25.0)])

        assert bezier["y1"] == bezier["x1"] == 0.25
        assert bezier["y2"] == bezier["x2"] == 0.75


class TestDominantDimension:
    """Test dominant dimension selection."""

    def test_scalar(self) -> None:
        assert dominant_dimension(10.0, 4.0) == (0, 6.0)

    def test_two_dimensional(self) -> None:
        """Test that the largest absolute delta wins."""
        assert dominant_dimension([0.0, 100.0], [50.0, 20.0]) == (1, 80.0)

    def test_non_numeric_values(self) -> None:
        assert dominant_dimension("a", "b") == (0, 0.0)
        assert dominant_dimension(None, 1.0) == (0, 0.0)


class TestMakeBezier:
    """Test bezier construction and formatting."""

    def test_rounds_to_four_decimals(self) -> None:
        bezier = make_bezier(0.123456, 0.5, 0.987654, 1.0)

        assert bezier["x1"] == 0.1235
        assert bezier["x2"] == 0.9877

    def test_css_trims_trailing_zeros(self) -> None:
        bezier = make_bezier(0.5, 0.0, 0.25, 1.0)

        assert bezier["css"] == "cubic-bezier(0.5, 0, 0.25, 1)"

    def test_negative_zero_is_normalized(self) -> None:
        assert format_number(-0.0) == "0"
        assert format_number(-0.00001) == "0"
        assert make_bezier(-0.0, -0.0, 1.0, 1.0)["css"] == "cubic-bezier(0, 0, 1, 1)"

    def test_no_preset_for_custom_curve(self) -> None:
        bezier = make_bezier(0.7, 0.1, 0.2, 0.9)

        assert "preset" not in bezier


class TestClassifyEasingPreset:
    """Test preset recognition."""

    @pytest.mark.parametrize(
        "curve,expected",
        [
            ((0.0, 0.0, 1.0, 1.0), "linear"),
            ((0.25, 0.1, 0.25, 1.0), "ease"),
            ((0.42, 0.0, 1.0, 1.0), "ease-in"),
            ((0.0, 0.0, 0.58, 1.0), "ease-out"),
            ((0.42, 0.0, 0.58, 1.0), "ease-in-out"),
            ((0.33, 0.0, 0.67, 1.0), "easy-ease"),
        ],
    )
    def test_known_presets(self, curve, expected) -> None:
        assert classify_easing_preset(*curve) == expected

    def test_unknown_curve(self) -> None:
        assert classify_easing_preset(0.1, 0.9, 0.2, 0.1) is None


class TestInterpolationKind:
    """Test mapping of host interpolation codes."""

    def test_integer_codes(self) -> None:
        assert InterpolationKind.from_host(6612) is InterpolationKind.LINEAR
        assert InterpolationKind.from_host(6613) is InterpolationKind.BEZIER
        assert InterpolationKind.from_host(6614) is InterpolationKind.HOLD

    def test_names(self) -> None:
        assert InterpolationKind.from_host("HOLD") is InterpolationKind.HOLD
        assert InterpolationKind.from_host("KeyframeInterpolationType.BEZIER") is InterpolationKind.BEZIER

    def test_unknown_code(self) -> None:
        assert InterpolationKind.from_host(9999) is InterpolationKind.UNRECOGNIZED
        assert InterpolationKind.from_host("SMOOTH") is InterpolationKind.UNRECOGNIZED
