"""
YAML overlay source.

Reads `<directory>/<platform>.yaml` so overlays can be tuned without
touching the packaged modules. Markdown files with a fenced ```yaml block
are accepted too; only the first block is read.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from tokenkit.components.merge.models import OverlayLoadError
from tokenkit.core.entities import TokenTree, freeze, is_known_platform, platform_id

logger = logging.getLogger(__name__)


def extract_yaml(content: str) -> str:
    """Return the first fenced ```yaml block, or the whole text if none."""
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    if found_block:
        return "\n".join(yaml_lines)
    return content


class YamlOverlaySource:
    """Overlay source backed by a directory of per-platform YAML files."""

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory)

    def path_for(self, platform: str) -> Path:
        return self._directory / f"{platform}.yaml"

    def load(self, platform: str) -> TokenTree:
        platform = platform_id(platform)
        if not is_known_platform(platform):
            return {}

        path = self.path_for(platform)
        if not path.exists():
            raise OverlayLoadError(platform, f"overlay file not found at {path}")

        try:
            data = yaml.safe_load(extract_yaml(path.read_text(encoding="utf-8")))
        except yaml.YAMLError as e:
            raise OverlayLoadError(platform, f"invalid YAML in {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise OverlayLoadError(
                platform, f"{path} must contain a mapping, got {type(data).__name__}"
            )

        logger.debug(f"Loaded overlay for '{platform}' from {path}")
        return freeze(data)
