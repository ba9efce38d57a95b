"""High-level orchestration: convert images on every generated page."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from bs4 import BeautifulSoup

from .assets import FileTemplateRenderer, TemplateRenderer, inject_assets
from .config import ImageModalConfig, read_disable_flag
from .errors import ImageModalError
from .images import rewrite_images
from .models import Manifest, OutputFile, PageFailure, PageResult, ProcessReport
from .resources import ResourceIndex

logger = logging.getLogger("image_modal")


def process_page(
    page: OutputFile,
    index: ResourceIndex,
    config: ImageModalConfig,
    renderer: TemplateRenderer,
) -> Optional[PageResult]:
    """Convert the images of a single page and save it if anything changed.

    Returns None when the page had nothing to convert; such pages are not
    written back.
    """
    path = config.output_root / page.relative_path
    html = path.read_text(encoding=config.encoding)
    soup = BeautifulSoup(html, "html.parser")

    result = rewrite_images(soup, page.relative_path, index)
    if not result.any_rewritten:
        return None

    injected = inject_assets(soup, page.relative_path, renderer, config.template_path)
    data = str(soup).encode(config.encoding)
    path.write_bytes(data)
    logger.info("Converted %d images for %s.", result.count, path)
    return PageResult(path=path, converted=result.count, injected=injected)


def process_manifest(
    manifest: Manifest,
    config: ImageModalConfig,
    renderer: Optional[TemplateRenderer] = None,
) -> ProcessReport:
    """Run the transform over every conceptual page in the manifest.

    The manifest itself is never modified. A page that fails is logged and
    recorded in the report; the remaining pages are still processed.
    """
    report = ProcessReport(manifest=manifest)
    if config.disabled:
        logger.debug("Image modal disabled; leaving %s untouched", config.output_root)
        report.skipped = True
        return report

    renderer = renderer or FileTemplateRenderer(config.encoding)
    index = ResourceIndex(manifest.resources())
    logger.debug("Indexed %d resources", len(index))

    for page in manifest.pages():
        try:
            page_result = process_page(page, index, config, renderer)
        except (ImageModalError, OSError, UnicodeError) as exc:
            path = config.output_root / page.relative_path
            logger.error("Failed to process %s: %s (%s)", path, exc, type(exc).__name__)
            report.failures.append(PageFailure(path=path, error=exc))
            continue
        if page_result:
            report.pages.append(page_result)
    return report


class ImageModalPostProcessor:
    """Adapter exposing the transform in the shape build hosts call it.

    ``prepare_metadata`` reads the feature switch once; ``process`` runs the
    transform and hands the manifest back unchanged.
    """

    def __init__(self, renderer: Optional[TemplateRenderer] = None) -> None:
        self.renderer = renderer
        self.disabled = False
        self.last_report: Optional[ProcessReport] = None

    def prepare_metadata(self, metadata: Mapping[str, Any]) -> Mapping[str, Any]:
        self.disabled = read_disable_flag(metadata)
        return metadata

    def process(self, manifest: Manifest, output_folder: Path) -> Manifest:
        config = ImageModalConfig(output_root=Path(output_folder), disabled=self.disabled)
        self.last_report = process_manifest(manifest, config, self.renderer)
        return manifest
