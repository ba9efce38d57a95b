"""Configuration objects and constants for the image modal transform."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping

from .errors import ConfigurationError

DISABLE_METADATA_KEY = "_disableImageModal"
DEFAULT_TEMPLATE_PATH = Path(__file__).parent / "templates" / "image_modal.html"
DEFAULT_ENCODING = "utf-8"

MODAL_SCRIPT = "styles/image-modal.js"
MODAL_STYLESHEET = "styles/image-modal.css"


@dataclass
class ImageModalConfig:
    """Settings for one run over a build's output folder."""

    output_root: Path
    disabled: bool = False
    template_path: Path = DEFAULT_TEMPLATE_PATH
    encoding: str = DEFAULT_ENCODING


def read_disable_flag(metadata: Mapping[str, Any]) -> bool:
    """Read the feature switch from build metadata; absent means enabled."""
    if DISABLE_METADATA_KEY not in metadata:
        return False
    value = metadata[DISABLE_METADATA_KEY]
    if not isinstance(value, bool):
        raise ConfigurationError(
            f"{DISABLE_METADATA_KEY} must be a boolean, got {type(value).__name__}: {value!r}"
        )
    return value


def load_build_metadata(path: Path) -> Dict[str, Any]:
    """Load global build metadata from a JSON file.

    Accepts a flat metadata mapping or a ``docfx.json`` style document, in
    which case ``build.globalMetadata`` is returned.
    """
    try:
        data = json.loads(Path(path).read_text(encoding=DEFAULT_ENCODING))
    except (OSError, ValueError) as exc:
        raise ConfigurationError(f"Cannot read build metadata {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Build metadata in {path} must be a JSON object")
    build = data.get("build")
    if isinstance(build, dict) and "globalMetadata" in build:
        data = build["globalMetadata"]
        if not isinstance(data, dict):
            raise ConfigurationError(f"build.globalMetadata in {path} must be a JSON object")
    return data
