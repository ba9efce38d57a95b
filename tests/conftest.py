from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable

import pytest
from bs4 import BeautifulSoup

from image_modal.config import ImageModalConfig
from image_modal.models import Manifest, ManifestEntry, OutputFile
from image_modal.resources import ResourceIndex

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<title>Guide</title>
<link rel="stylesheet" href="{prefix}styles/docfx.css">
<link rel="stylesheet" href="{prefix}styles/main.css">
</head>
<body>
<div class="navbar-brand"><img src="{prefix}logo.svg" class="logo"></div>
<article>
{content}
</article>
<script type="text/javascript" src="{prefix}styles/docfx.js"></script>
<script type="text/javascript" src="{prefix}styles/main.js"></script>
</body>
</html>
"""


def render_page(content: str, prefix: str = "../") -> str:
    return PAGE_TEMPLATE.format(prefix=prefix, content=content)


def parse(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def build_manifest(pages: Iterable[str], resources: Iterable[str]) -> Manifest:
    entries = [
        ManifestEntry("Conceptual", {".html": OutputFile(page)}, source_relative_path=page)
        for page in pages
    ]
    entries.extend(
        ManifestEntry("Resource", {"resource": OutputFile(res)}, source_relative_path=res)
        for res in resources
    )
    entries.append(ManifestEntry("Toc", {".json": OutputFile("toc.json")}))
    return Manifest(files=entries)


def build_index(*paths: str) -> ResourceIndex:
    return ResourceIndex(OutputFile(path) for path in paths)


@pytest.fixture
def site(tmp_path: Path):
    """Write pages into a temporary output folder."""

    def _write(pages: Dict[str, str]) -> Path:
        for relative_path, html in pages.items():
            target = tmp_path / relative_path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(html, encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture
def config(tmp_path: Path) -> ImageModalConfig:
    return ImageModalConfig(output_root=tmp_path)
