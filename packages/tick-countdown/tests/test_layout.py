"""Tests for formatting, layout geometry and unit styling."""
from datetime import datetime

import pytest

from tick_countdown import compute_layout, format_value, lerp_color, title_text, unit_style


class TestFormatValue:

    @pytest.mark.parametrize(
        "value,expected",
        [(0, "00"), (5, "05"), (42, "42"), (99, "99"), (100, "100"), (365, "365")],
    )
    def test_zero_padding(self, value, expected):
        """Width 2 is a minimum, never a truncation."""
        assert format_value(value) == expected

    def test_custom_width(self):
        """Width can be widened beyond 2."""
        assert format_value(7, width=3) == "007"


class TestComputeLayout:

    def test_landscape_positions(self):
        """1920x1080 uses the height as the base unit."""
        layout = compute_layout(1920, 1080)
        assert layout.unit == 1080
        assert layout.title_pos == pytest.approx((960, 162))
        assert layout.complete_pos == pytest.approx((960, 918))
        assert layout.title_size == pytest.approx(43.2)
        assert layout.complete_size == pytest.approx(54.0)
        assert layout.digit_size == pytest.approx(129.6)
        assert layout.label_size == pytest.approx(27.0)
        assert layout.separator_size == pytest.approx(129.6 * 0.6)
        xs = [x for x, _ in layout.unit_centers]
        assert xs == pytest.approx([717, 879, 1041, 1203])
        assert all(y == 540 for _, y in layout.unit_centers)

    def test_separators_between_groups(self):
        """Three separators, each midway between neighbouring groups."""
        layout = compute_layout(1920, 1080)
        xs = [x for x, _ in layout.separator_centers]
        assert xs == pytest.approx([798, 960, 1122])

    def test_portrait_uses_width(self):
        """Portrait surfaces scale from the width."""
        layout = compute_layout(600, 1000)
        assert layout.unit == 600
        assert layout.digit_size == pytest.approx(72.0)

    def test_sizes_scale_with_surface(self):
        """Doubling both dimensions doubles every size."""
        small = compute_layout(800, 600)
        large = compute_layout(1600, 1200)
        assert large.digit_size == pytest.approx(2 * small.digit_size)
        assert large.label_size == pytest.approx(2 * small.label_size)
        assert large.title_size == pytest.approx(2 * small.title_size)

    def test_offsets_follow_scale(self):
        """Digit and label offsets grow with the pulse scale."""
        layout = compute_layout(1000, 1000)
        assert layout.digit_offset(1.0) == pytest.approx(-50.0)
        assert layout.label_offset(1.0) == pytest.approx(48.0)
        assert layout.label_offset(1.1) == pytest.approx(52.8)


class TestStyling:

    def test_pulsing_style(self):
        """Pulsing groups are enlarged and faded."""
        style = unit_style(True)
        assert style.scale == pytest.approx(1.1)
        assert style.alpha == 180

    def test_resting_style(self):
        """Resting groups are unscaled and opaque."""
        style = unit_style(False)
        assert style.scale == 1.0
        assert style.alpha == 255

    def test_lerp_color_endpoints(self):
        """t=0 and t=1 give the end colors."""
        top, bottom = (102, 126, 234), (118, 75, 162)
        assert lerp_color(top, bottom, 0.0) == top
        assert lerp_color(top, bottom, 1.0) == bottom

    def test_lerp_color_clamps(self):
        """t outside [0, 1] is clamped."""
        assert lerp_color((0, 0, 0), (200, 100, 50), 2.0) == (200, 100, 50)
        assert lerp_color((0, 0, 0), (200, 100, 50), -1.0) == (0, 0, 0)

    def test_title_text(self):
        """Title names the month, day and year."""
        assert title_text(datetime(2026, 4, 11)) == "Countdown to April 11, 2026"
