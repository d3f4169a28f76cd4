"""
Tests for wheel rendering.

Tests cover:
- WheelRenderer wedges, mask and derived values
- Pitch constellation
- render_keymap
- SVG export
"""

import math
from fractions import Fraction

import pytest

from chuk_mcp_keymap.core import Palette, Point, Tuning, polar_to_cartesian
from chuk_mcp_keymap.errors import InvalidTuning, UnsupportedKeymap
from chuk_mcp_keymap.models import FreeformKeymap, HarmonicKeymap
from chuk_mcp_keymap.wheel import (
    WheelRenderer,
    keymap_wheel_to_svg,
    render_constellation,
    render_keymap,
    render_wheel,
    wheel_to_svg,
)


class TestWheelRenderer:
    """Tests for WheelRenderer."""

    @pytest.mark.parametrize("divisions", [1, 2, 3, 7, 12, 19, 22, 31, 53, 72])
    def test_arcs_sum_to_360(self, divisions: int) -> None:
        """Wedges tile the circle exactly."""
        wedges = WheelRenderer(100, divisions).wedges
        assert len(wedges) == divisions
        assert sum(w.arc_degrees for w in wedges) == 360

    def test_rotations(self) -> None:
        """Each rotation is computed from the wedge index."""
        renderer = WheelRenderer(100, 7)
        for i, wedge in enumerate(renderer.wedges):
            assert wedge.index == i
            assert wedge.rotation_degrees == renderer.arc_degrees * i
            assert wedge.rotation_degrees == Fraction(360, 7) * i

    def test_rotation_offset(self) -> None:
        """The rotation offset is added to every wedge."""
        renderer = WheelRenderer(100, 12, rotation_offset=15.5)
        for i, wedge in enumerate(renderer.wedges):
            assert wedge.rotation_degrees == renderer.arc_degrees * i + 15.5

    def test_rotation_offset_is_mutable(self) -> None:
        """Turning the wheel changes the next render only."""
        renderer = WheelRenderer(100, 12)
        before = renderer.render()
        renderer.rotation_offset = 30
        after = renderer.render()
        assert before.wedges[0].rotation_degrees == 0
        assert after.wedges[0].rotation_degrees == 30
        assert after.wedges[11].rotation_degrees == 360

    def test_colors(self) -> None:
        """Fill and stroke use the primary color, text the darkened complement."""
        palette = Palette(12)
        for wedge in WheelRenderer(100, 12, palette=palette).wedges:
            assert wedge.fill_color == palette.primary(wedge.index)
            assert wedge.stroke_color == wedge.fill_color
            assert wedge.text_color == palette.complementary(wedge.index, -0.8)

    def test_default_palette(self) -> None:
        """Without a palette, one is built for the division count."""
        renderer = WheelRenderer(100, 19)
        assert renderer.palette == Palette(19)

    def test_default_labels(self) -> None:
        """Labels default to the index."""
        labels = [w.label for w in WheelRenderer(100, 5).wedges]
        assert labels == ["0", "1", "2", "3", "4"]

    def test_custom_labels(self) -> None:
        """Caller-supplied labels are used in order."""
        names = ["C", "D", "E", "F", "G"]
        labels = [w.label for w in WheelRenderer(100, 5, labels=names).wedges]
        assert labels == names

    def test_label_count_mismatch(self) -> None:
        """Labels must match the division count."""
        with pytest.raises(ValueError):
            WheelRenderer(100, 5, labels=["C", "D"])

    def test_shared_outline(self) -> None:
        """Every wedge uses the same local outline."""
        paths = {w.path for w in WheelRenderer(100, 12).wedges}
        assert len(paths) == 1

    def test_transform(self) -> None:
        """Transform rotates around the wheel center."""
        wedge = WheelRenderer(100, 12).wedges[1]
        assert wedge.transform == "rotate(30, 100, 100)"

    def test_label_point(self) -> None:
        """Labels sit near the rim along the wedge's center line."""
        wedge = WheelRenderer(100, 12).wedges[0]
        assert wedge.label_point == Point(190, 100)

    def test_center_and_hole(self) -> None:
        """Center and hole radius derive from the radius."""
        renderer = WheelRenderer(100, 12)
        assert renderer.center == Point(100, 100)
        assert renderer.hole_radius == pytest.approx(80)

    def test_mask(self) -> None:
        """The mask is a ring between the hole and the rim."""
        mask = WheelRenderer(50, 12, hole_ratio=0.5).mask
        assert mask.center == Point(50, 50)
        assert mask.outer_radius == 50
        assert mask.inner_radius == 25

    def test_invalid_divisions(self) -> None:
        """Zero divisions is an invalid tuning."""
        with pytest.raises(InvalidTuning):
            WheelRenderer(100, 0)

    def test_invalid_radius(self) -> None:
        """Radius must be positive."""
        with pytest.raises(ValueError):
            WheelRenderer(0, 12)

    def test_nan_radius(self) -> None:
        """NaN is not a positive radius."""
        with pytest.raises(ValueError):
            WheelRenderer(math.nan, 12)

    def test_fractional_divisions(self) -> None:
        """Division counts must be whole numbers."""
        with pytest.raises(InvalidTuning):
            WheelRenderer(100, 2.5)

    def test_palette_size_mismatch(self) -> None:
        """A palette built for another division count is rejected."""
        with pytest.raises(ValueError):
            WheelRenderer(100, 12, palette=Palette(7))

    def test_hues_follow_divisions(self) -> None:
        """Each wedge hue is index / divisions of the circle."""
        hues = [w.fill_color.hue for w in WheelRenderer(100, 12, palette=Palette(12)).wedges]
        assert hues == [30 * i for i in range(12)]

    @pytest.mark.parametrize("hole_ratio", [0, 1, -0.5, 1.5])
    def test_invalid_hole_ratio(self, hole_ratio: float) -> None:
        """Hole ratio must be strictly between 0 and 1."""
        with pytest.raises(ValueError):
            WheelRenderer(100, 12, hole_ratio=hole_ratio)

    def test_idempotent(self) -> None:
        """Rendering twice gives identical results."""
        renderer = WheelRenderer(120, 19, rotation_offset=7)
        assert renderer.render() == renderer.render()
        assert render_wheel(120, 19, rotation_offset=7) == renderer.render()

    def test_tuning(self) -> None:
        """The renderer exposes its tuning."""
        assert WheelRenderer(100, 31).tuning == Tuning(31)

    def test_to_dict(self) -> None:
        """Wheel serializes to plain values."""
        data = render_wheel(100, 12).to_dict()
        assert data["divisions"] == 12
        assert data["mask"]["inner_radius"] == pytest.approx(80)
        assert data["wedges"][3]["rotation_degrees"] == 90.0
        assert data["wedges"][3]["arc_degrees"] == 30.0
        assert data["wedges"][0]["fill_color"] == "#ff0000"
        assert data["wedges"][0]["text_color"] == "#000000"


class TestConstellation:
    """Tests for render_constellation."""

    def test_one_line_per_scale_tone(self, c_major: HarmonicKeymap) -> None:
        """Lines are drawn only for scale tones, in order."""
        lines = render_constellation(
            Point(100, 100), 80, c_major.tuning, c_major.scale_pitches, Palette(12)
        )
        assert [line.index for line in lines] == [0, 2, 4, 5, 7, 9, 11]

    def test_line_geometry(self) -> None:
        """Lines run from the center toward the tone's angle."""
        center = Point(100, 100)
        lines = render_constellation(center, 80, Tuning(12), {0, 3}, Palette(12))
        assert lines[0].start == center
        assert lines[0].end == Point(180, 100)
        assert lines[1].end == polar_to_cartesian(center, 80, 90)

    def test_style(self) -> None:
        """Stroke width and opacity follow the radius."""
        line = render_constellation(Point(0, 0), 80, Tuning(12), {4}, Palette(12))[0]
        assert line.stroke_width == pytest.approx(20)
        assert line.opacity == 0.6
        assert line.color == Palette(12).primary(4)

    def test_rotation_offset(self) -> None:
        """Lines turn with the wheel."""
        center = Point(0, 0)
        line = render_constellation(center, 10, Tuning(4), {1}, Palette(4), rotation_offset=90)[0]
        assert line.end == polar_to_cartesian(center, 10, 180)


class TestRenderKeymap:
    """Tests for render_keymap."""

    def test_harmonic(self, c_major: HarmonicKeymap) -> None:
        """A harmonic keymap renders its tuning's wheel and its scale."""
        rendered = render_keymap(c_major, 100)
        assert rendered.keymap_id == "c-major"
        assert rendered.wheel.divisions == 12
        assert len(rendered.constellation) == 7

    def test_constellation_fills_hole(self, c_major: HarmonicKeymap) -> None:
        """Constellation lines reach the hole's edge."""
        rendered = render_keymap(c_major, 100)
        assert rendered.constellation[0].end == Point(180, 100)

    def test_other_tuning(self) -> None:
        """Wedge count follows the keymap's tuning."""
        keymap = HarmonicKeymap(id="x", name="x", tuning=Tuning(31), scale_pitches={0, 18})
        assert render_keymap(keymap, 100).wheel.divisions == 31

    def test_palette_size_mismatch(self, c_major: HarmonicKeymap) -> None:
        """The palette must match the keymap's tuning."""
        with pytest.raises(ValueError):
            render_keymap(c_major, 100, palette=Palette(19))

    def test_freeform_unsupported(self) -> None:
        """Freeform keymaps cannot be rendered yet."""
        with pytest.raises(UnsupportedKeymap):
            render_keymap(FreeformKeymap(id="f", name="F"), 100)

    def test_to_dict(self, c_major: HarmonicKeymap) -> None:
        """Rendered keymaps serialize to plain values."""
        data = render_keymap(c_major, 100).to_dict()
        assert data["keymap_id"] == "c-major"
        assert len(data["wheel"]["wedges"]) == 12
        assert len(data["constellation"]) == 7


class TestSvgExport:
    """Tests for SVG export."""

    def test_wheel_svg(self) -> None:
        """SVG has a mask, one path per wedge, and labels."""
        svg = wheel_to_svg(render_wheel(100, 12))
        assert svg.startswith("<svg")
        assert 'id="rim-clip"' in svg
        assert 'mask="url(#rim-clip)"' in svg
        assert svg.count("<path") == 12
        assert svg.count("<text") == 12
        assert "#ff0000" in svg
        assert ">11</text>" in svg

    def test_keymap_svg(self, c_major: HarmonicKeymap) -> None:
        """Keymap SVG includes the constellation lines."""
        svg = keymap_wheel_to_svg(render_keymap(c_major, 100))
        assert svg.count("<line") == 7
        assert 'stroke-linecap="round"' in svg

    def test_deterministic(self, c_major: HarmonicKeymap) -> None:
        """Same keymap, same SVG."""
        first = keymap_wheel_to_svg(render_keymap(c_major, 100))
        second = keymap_wheel_to_svg(render_keymap(c_major, 100))
        assert first == second
