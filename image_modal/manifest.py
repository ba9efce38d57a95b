"""Reading the build manifest written next to the generated site."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from .config import DEFAULT_ENCODING
from .errors import ConfigurationError
from .models import Manifest, ManifestEntry, OutputFile

logger = logging.getLogger("image_modal")

MANIFEST_FILENAME = "manifest.json"


def _parse_entry(raw: Dict[str, Any]) -> ManifestEntry:
    outputs: Dict[str, OutputFile] = {}
    for key, value in (raw.get("output") or {}).items():
        if not isinstance(value, dict) or not value.get("relative_path"):
            continue
        outputs[key] = OutputFile(value["relative_path"].replace("\\", "/"))
    return ManifestEntry(
        document_type=raw.get("type", ""),
        output_files=outputs,
        source_relative_path=raw.get("source_relative_path"),
    )


def parse_manifest(data: Dict[str, Any]) -> Manifest:
    """Build a :class:`Manifest` from the decoded ``manifest.json`` document."""
    files = data.get("files")
    if not isinstance(files, list):
        raise ConfigurationError("Manifest has no 'files' list")
    entries = [_parse_entry(raw) for raw in files if isinstance(raw, dict)]
    logger.debug("Loaded %d manifest entries", len(entries))
    return Manifest(files=entries)


def load_manifest(path: Path) -> Manifest:
    try:
        data = json.loads(Path(path).read_text(encoding=DEFAULT_ENCODING))
    except (OSError, ValueError) as exc:
        raise ConfigurationError(f"Cannot read manifest {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Manifest {path} must be a JSON object")
    return parse_manifest(data)
