"""
Keymap loader - builds keymaps from YAML definitions.

A definition looks like:

    type: harmonic
    id: c-major
    name: C major
    tuning: {divisions: 12}
    scalePitches: [0, 2, 4, 5, 7, 9, 11]
    nonScaleToneBehaviors: [light-dim]

Storing and listing keymaps is the caller's concern; this only turns a
single definition into a validated model.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_keymap.models.keymap import FreeformKeymap, HarmonicKeymap, parse_keymap

logger = logging.getLogger(__name__)


class KeymapLoader:
    """
    Parses keymap definitions.

    Validation errors (InvalidTuning, InvalidScaleDefinition, pydantic
    ValidationError) propagate to the caller so an invalid keymap never
    reaches the renderer.
    """

    def __init__(self, base_path: Path | None = None):
        """
        Initialize the loader.

        Args:
            base_path: Directory relative file paths are resolved against
        """
        self.base_path = base_path

    def parse(self, data: dict[str, Any]) -> HarmonicKeymap | FreeformKeymap:
        """Build a keymap from an already-decoded mapping."""
        if not isinstance(data, dict):
            raise ValueError(f"Keymap definition must be a mapping, got {type(data).__name__}")
        keymap = parse_keymap(data)
        logger.debug("Parsed %s keymap '%s'", keymap.type, keymap.id)
        return keymap

    def parse_yaml(self, text: str) -> HarmonicKeymap | FreeformKeymap:
        """Build a keymap from YAML text."""
        return self.parse(yaml.safe_load(text))

    def load_file(self, path: Path | str) -> HarmonicKeymap | FreeformKeymap:
        """
        Load a keymap from a YAML file.

        Args:
            path: File path, relative to base_path if one is configured

        Returns:
            The parsed keymap
        """
        path = Path(path)
        if self.base_path is not None and not path.is_absolute():
            path = self.base_path / path

        with open(path) as f:
            data = yaml.safe_load(f)

        logger.debug("Loaded keymap definition from %s", path)
        return self.parse(data)

    @staticmethod
    def dump_yaml(keymap: HarmonicKeymap | FreeformKeymap) -> str:
        """Serialize a keymap back to YAML, using the definition's field names."""
        data = keymap.model_dump(mode="json", by_alias=True, exclude_none=True)
        return yaml.safe_dump(data, default_flow_style=None, sort_keys=False)
