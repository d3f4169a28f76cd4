#!/usr/bin/env python3
"""
Example: Render color wheels to SVG.

This demonstrates the rendering pipeline from keymap to drawing.
Run this script to create SVG files you can open in any browser.

Usage:
    python examples/render_wheels.py
    # Creates: examples/output/*.svg
"""

from pathlib import Path

from chuk_mcp_keymap.keymaps import KeymapLoader, classify_keys
from chuk_mcp_keymap.wheel import keymap_wheel_to_svg, render_keymap, render_wheel, wheel_to_svg

C_MAJOR = """
type: harmonic
id: c-major
name: C major
scalePitches: [0, 2, 4, 5, 7, 9, 11]
"""

NEUTRAL_31 = """
type: harmonic
id: 31edo-neutral
name: 31 EDO neutral triad scale
tuning: {divisions: 31}
scalePitches: [0, 5, 9, 13, 18, 22, 27]
nonScaleToneBehaviors: [midi-off, light-dim]
"""


def main() -> None:
    """Render example wheels."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)
    loader = KeymapLoader()

    # Example 1: A bare 12-division wheel
    print("Rendering wheel_12.svg...")
    wheel = render_wheel(radius=150, divisions=12)
    (output_dir / "wheel_12.svg").write_text(wheel_to_svg(wheel))
    print(f"  {wheel.divisions} wedges, hole radius {wheel.hole_radius}")

    # Example 2: Keymaps with their scale constellations
    for definition in (C_MAJOR, NEUTRAL_31):
        keymap = loader.parse_yaml(definition)
        print(f"\nRendering {keymap.id}.svg...")
        rendered = render_keymap(keymap, radius=150)
        (output_dir / f"{keymap.id}.svg").write_text(keymap_wheel_to_svg(rendered))

        active = [s.pitch_class.value for s in classify_keys(keymap) if s.active]
        print(f"  Active pitch classes: {active}")

    print("\nDone! Open the SVG files in a browser to see them.")


if __name__ == "__main__":
    main()
