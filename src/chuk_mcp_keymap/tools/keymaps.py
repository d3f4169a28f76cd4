"""
Keymap tools - MCP tools for validating and rendering keymaps.

Keymaps are passed as YAML definitions. Tools validate them, classify
their keys, and render them as color wheels.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

from chuk_mcp_keymap.constants import ErrorMessages, SuccessMessages
from chuk_mcp_keymap.errors import KeymapError
from chuk_mcp_keymap.keymaps import KeymapLoader, classify_keys
from chuk_mcp_keymap.wheel import keymap_wheel_to_svg, render_keymap

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_keymap_tools(
    mcp: ChukMCPServer,
    loader: KeymapLoader,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register keymap tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The keymap loader
        output_dir: Directory for SVG output files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def keymap_validate(definition: str) -> str:
        """
        Validate a keymap definition.

        Checks the tuning, that every scale pitch fits the tuning, and
        the inactive key behaviors.

        Args:
            definition: YAML keymap definition

        Returns:
            JSON string with validation result

        Example:
            keymap_validate(definition="type: harmonic\\nid: c-major\\nname: C major\\nscalePitches: [0, 2, 4, 5, 7, 9, 11]")
        """
        try:
            keymap = loader.parse_yaml(definition)
            return json.dumps(
                {
                    "status": "success",
                    "valid": True,
                    "keymap": keymap.model_dump(mode="json", by_alias=True),
                    "message": SuccessMessages.KEYMAP_VALID.format(id=keymap.id),
                }
            )
        except (KeymapError, ValidationError, ValueError, yaml.YAMLError) as e:
            return json.dumps(
                {
                    "status": "success",
                    "valid": False,
                    "error_type": type(e).__name__,
                    "message": str(e),
                }
            )
        except Exception as e:
            logger.exception("Failed to validate keymap")
            return json.dumps({"status": "error", "message": str(e)})

    tools["keymap_validate"] = keymap_validate

    @mcp.tool  # type: ignore[arg-type]
    async def keymap_classify(definition: str) -> str:
        """
        Classify every pitch class of a keymap as active or inactive.

        Inactive pitch classes carry the keymap's non-scale-tone behaviors.

        Args:
            definition: YAML keymap definition

        Returns:
            JSON string with one entry per pitch class

        Example:
            keymap_classify(definition="type: harmonic\\nid: pentatonic\\nname: Pentatonic\\nscalePitches: [0, 2, 4, 7, 9]")
        """
        try:
            keymap = loader.parse_yaml(definition)
            states = classify_keys(keymap)
            return json.dumps(
                {
                    "status": "success",
                    "keymap_id": keymap.id,
                    "keys": [s.to_dict() for s in states],
                    "active_count": sum(1 for s in states if s.active),
                }
            )
        except Exception as e:
            logger.exception("Failed to classify keymap")
            return json.dumps({"status": "error", "message": str(e)})

    tools["keymap_classify"] = keymap_classify

    @mcp.tool  # type: ignore[arg-type]
    async def keymap_render_svg(
        definition: str,
        radius: float = 100.0,
        rotation_offset: float = 0.0,
        output_name: str | None = None,
    ) -> str:
        """
        Render a keymap as a color wheel SVG.

        The wheel shows one wedge per pitch class, with the scale drawn
        as a constellation in the center.

        Args:
            definition: YAML keymap definition
            radius: Outer radius of the wheel
            rotation_offset: Degrees added to every wedge rotation
            output_name: Optional file name (without .svg) to also save the SVG

        Returns:
            JSON string with the SVG markup and optional file path

        Example:
            keymap_render_svg(definition=..., radius=150, output_name="c-major")
        """
        try:
            keymap = loader.parse_yaml(definition)
            svg = keymap_wheel_to_svg(
                render_keymap(keymap, radius, rotation_offset=rotation_offset)
            )

            result: dict[str, Any] = {"status": "success", "keymap_id": keymap.id, "svg": svg}
            if output_name:
                if Path(output_name).name != output_name or "\\" in output_name:
                    raise ValueError(ErrorMessages.INVALID_OUTPUT_NAME.format(name=output_name))
                output_dir.mkdir(parents=True, exist_ok=True)
                output_path = output_dir / f"{output_name}.svg"
                output_path.write_text(svg)
                result["path"] = str(output_path)

            return json.dumps(result)
        except Exception as e:
            logger.exception("Failed to render keymap SVG")
            return json.dumps({"status": "error", "message": str(e)})

    tools["keymap_render_svg"] = keymap_render_svg

    return tools
