"""Thumbnail previews and an image modal for generated static sites."""

from .config import ImageModalConfig
from .errors import ConfigurationError, ImageModalError, PageFormatError, TemplateError
from .manifest import load_manifest
from .models import Manifest, ManifestEntry, OutputFile
from .processor import ImageModalPostProcessor, process_manifest

__all__ = [
    "ConfigurationError",
    "ImageModalConfig",
    "ImageModalError",
    "ImageModalPostProcessor",
    "Manifest",
    "ManifestEntry",
    "OutputFile",
    "PageFormatError",
    "TemplateError",
    "load_manifest",
    "process_manifest",
]
