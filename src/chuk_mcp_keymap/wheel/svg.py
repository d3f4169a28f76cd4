"""
SVG export for rendered wheels.

Builds a standalone SVG document with svgwrite:
- a rim mask (white outer disc, black inner disc) in <defs>
- a masked group holding one rotated <g> per wedge (path + label)
- the pitch constellation lines on top
"""

from __future__ import annotations

from collections.abc import Iterable

import svgwrite

from chuk_mcp_keymap.constants import RIM_MASK_ID
from chuk_mcp_keymap.core.geometry import format_number
from chuk_mcp_keymap.wheel.constellation import ConstellationLine
from chuk_mcp_keymap.wheel.keymap_wheel import KeymapWheel
from chuk_mcp_keymap.wheel.renderer import Wheel


def wheel_to_svg(wheel: Wheel, constellation: Iterable[ConstellationLine] = ()) -> str:
    """
    Serialize a wheel (and optional constellation) to SVG text.

    Args:
        wheel: Result of a render pass
        constellation: Lines to draw inside the hole

    Returns:
        SVG document as a string
    """
    size = wheel.radius * 2
    dwg = svgwrite.Drawing(size=(size, size), debug=False)
    dwg.viewbox(0, 0, size, size)

    center = wheel.mask.center.as_tuple()
    mask = dwg.mask(id=RIM_MASK_ID)
    mask.add(dwg.circle(center=center, r=wheel.mask.outer_radius, fill="white"))
    mask.add(dwg.circle(center=center, r=wheel.mask.inner_radius, fill="black"))
    dwg.defs.add(mask)

    ring = dwg.g(mask=f"url(#{RIM_MASK_ID})")
    for wedge in wheel.wedges:
        group = dwg.g(
            transform=wedge.transform,
            fill=wedge.fill_color.hex,
            stroke=wedge.stroke_color.hex,
        )
        group.add(dwg.path(d=wedge.path, stroke_width=0, stroke="none"))
        group.add(
            dwg.text(
                wedge.label,
                insert=(
                    format_number(wedge.label_point.x),
                    format_number(wedge.label_point.y),
                ),
                text_anchor="middle",
                fill=wedge.text_color.hex,
                stroke=wedge.text_color.hex,
            )
        )
        ring.add(group)
    dwg.add(ring)

    lines = dwg.g()
    for line in constellation:
        lines.add(
            dwg.line(
                start=line.start.as_tuple(),
                end=(format_number(line.end.x), format_number(line.end.y)),
                stroke=line.color.hex,
                stroke_width=line.stroke_width,
                stroke_linecap="round",
                opacity=line.opacity,
            )
        )
    dwg.add(lines)

    return dwg.tostring()


def keymap_wheel_to_svg(keymap_wheel: KeymapWheel) -> str:
    """Serialize a rendered keymap wheel, constellation included."""
    return wheel_to_svg(keymap_wheel.wheel, keymap_wheel.constellation)
