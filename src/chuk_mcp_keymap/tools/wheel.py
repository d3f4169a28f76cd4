"""
Wheel tools - MCP tools for rendering color wheels.

Tools for rendering an N-division wheel as wedge data or SVG.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_keymap.constants import DEFAULT_DIVISIONS, DEFAULT_HOLE_RATIO, SuccessMessages
from chuk_mcp_keymap.wheel import WheelRenderer, wheel_to_svg

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_wheel_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register wheel rendering tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def keymap_render_wheel(
        divisions: int = DEFAULT_DIVISIONS,
        radius: float = 100.0,
        hole_ratio: float = DEFAULT_HOLE_RATIO,
        rotation_offset: float = 0.0,
    ) -> str:
        """
        Render a color wheel as wedge data.

        Each wedge carries its rotation, arc, colors, label and SVG path.
        The mask describes the hole cut out of the center.

        Args:
            divisions: Number of equal divisions of the octave
            radius: Outer radius of the wheel
            hole_ratio: Hole radius as a fraction of the radius (0-1)
            rotation_offset: Degrees added to every wedge rotation

        Returns:
            JSON string with wedges and mask

        Example:
            keymap_render_wheel(divisions=19, radius=200)
        """
        try:
            renderer = WheelRenderer(
                radius,
                divisions,
                hole_ratio=hole_ratio,
                rotation_offset=rotation_offset,
            )
            wheel = renderer.render()
            return json.dumps(
                {
                    "status": "success",
                    "wheel": wheel.to_dict(),
                    "message": SuccessMessages.WHEEL_RENDERED.format(divisions=divisions),
                }
            )
        except Exception as e:
            logger.exception("Failed to render wheel")
            return json.dumps({"status": "error", "message": str(e)})

    tools["keymap_render_wheel"] = keymap_render_wheel

    @mcp.tool  # type: ignore[arg-type]
    async def keymap_wheel_svg(
        divisions: int = DEFAULT_DIVISIONS,
        radius: float = 100.0,
        hole_ratio: float = DEFAULT_HOLE_RATIO,
        rotation_offset: float = 0.0,
    ) -> str:
        """
        Render a color wheel as an SVG document.

        Args:
            divisions: Number of equal divisions of the octave
            radius: Outer radius of the wheel
            hole_ratio: Hole radius as a fraction of the radius (0-1)
            rotation_offset: Degrees added to every wedge rotation

        Returns:
            JSON string with the SVG markup

        Example:
            keymap_wheel_svg(divisions=12)
        """
        try:
            wheel = WheelRenderer(
                radius,
                divisions,
                hole_ratio=hole_ratio,
                rotation_offset=rotation_offset,
            ).render()
            return json.dumps({"status": "success", "svg": wheel_to_svg(wheel)})
        except Exception as e:
            logger.exception("Failed to render wheel SVG")
            return json.dumps({"status": "error", "message": str(e)})

    tools["keymap_wheel_svg"] = keymap_wheel_svg

    return tools
