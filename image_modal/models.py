"""Data models used throughout the image modal transform."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional

CONCEPTUAL = "Conceptual"
RESOURCE = "Resource"


@dataclass(frozen=True)
class OutputFile:
    """A generated artifact, addressed relative to the site root."""

    relative_path: str


@dataclass
class ManifestEntry:
    """One source document and the files the build produced for it."""

    document_type: str
    output_files: Dict[str, OutputFile] = field(default_factory=dict)
    source_relative_path: Optional[str] = None


@dataclass
class Manifest:
    """Ordered record of everything the build wrote to the output folder."""

    files: List[ManifestEntry] = field(default_factory=list)

    def _outputs_of(self, document_type: str) -> Iterator[OutputFile]:
        for entry in self.files:
            if entry.document_type == document_type:
                yield from entry.output_files.values()

    def pages(self) -> Iterator[OutputFile]:
        """Output files of conceptual (authored) pages, in manifest order."""
        return self._outputs_of(CONCEPTUAL)

    def resources(self) -> Iterator[OutputFile]:
        """Output files of copied resources, in manifest order."""
        return self._outputs_of(RESOURCE)


@dataclass
class ImageReference:
    """An ``<img>`` source as seen from the page that contains it."""

    src: str
    resolved_path: Optional[str]
    is_excluded: bool = False

    @property
    def is_absolute_uri(self) -> bool:
        return self.resolved_path is None


@dataclass
class ThumbnailMatch:
    """Thumbnail resource found for an image."""

    output_file: OutputFile

    @property
    def thumbnail_relative_path(self) -> str:
        return self.output_file.relative_path


@dataclass
class RewriteResult:
    count: int = 0

    @property
    def any_rewritten(self) -> bool:
        return self.count > 0


@dataclass
class PageResult:
    """Outcome for a page that had at least one image converted."""

    path: Path
    converted: int
    injected: bool


@dataclass
class PageFailure:
    """A page that could not be processed, kept alongside the error."""

    path: Path
    error: Exception

    @property
    def kind(self) -> str:
        return type(self.error).__name__


@dataclass
class ProcessReport:
    """Summary of one transform run over a manifest."""

    manifest: Manifest
    pages: List[PageResult] = field(default_factory=list)
    failures: List[PageFailure] = field(default_factory=list)
    skipped: bool = False

    @property
    def converted_images(self) -> int:
        return sum(page.converted for page in self.pages)
