"""Rewriting ``<img>`` elements to point at their thumbnails."""

from __future__ import annotations

import logging
from typing import Optional

from bs4 import BeautifulSoup, Tag

from .models import ImageReference, RewriteResult, ThumbnailMatch
from .resources import ResourceIndex
from .utils import page_directory, relative_to, resolve_image_path

logger = logging.getLogger("image_modal")

NOPREVIEW_ATTRIBUTE = "data-nopreview"
BRAND_CLASS_MARKER = "brand"
LOGOMARK_CLASS_MARKER = "logomark"


def _class_string(tag: Tag) -> str:
    """Class attribute as written in the markup (bs4 splits it into a list)."""
    value = tag.get("class")
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def is_candidate(img: Tag) -> bool:
    """Selection rule for images that may receive a preview.

    The parent element must not have a class containing ``brand`` and the
    image must not have a class containing ``logomark``. Both are substring
    checks, so ``branding`` excludes too.
    """
    parent = img.parent
    if parent is None or isinstance(parent, BeautifulSoup):
        return False
    if BRAND_CLASS_MARKER in _class_string(parent):
        return False
    return LOGOMARK_CLASS_MARKER not in _class_string(img)


def is_opted_out(img: Tag) -> bool:
    if NOPREVIEW_ATTRIBUTE in img.attrs:
        return True
    parent = img.parent
    return parent is not None and NOPREVIEW_ATTRIBUTE in parent.attrs


def is_converted(img: Tag) -> bool:
    return img.get("data-toggle") == "modal" and "data-src" in img.attrs


def describe_image(img: Tag, page_path: str) -> Optional[ImageReference]:
    """Derive the reference for an image, None if it has no usable ``src``."""
    src = img.get("src")
    if not isinstance(src, str) or not src.strip():
        return None
    excluded = not is_candidate(img) or is_opted_out(img) or is_converted(img)
    return ImageReference(
        src=src,
        resolved_path=resolve_image_path(src, page_path),
        is_excluded=excluded,
    )


def find_thumbnail(reference: ImageReference, index: ResourceIndex) -> Optional[ThumbnailMatch]:
    """Look up the thumbnail for a tracked image resource."""
    resolved = reference.resolved_path
    if resolved is None or not index.exists(resolved):
        return None
    thumbnail = index.find_thumbnail_for(resolved)
    if thumbnail is None:
        return None
    return ThumbnailMatch(output_file=thumbnail)


def update_image_node(img: Tag, src: str) -> None:
    """Point the element at the thumbnail and keep the original for the modal."""
    original = img["src"]
    img["loading"] = "lazy"
    img["data-toggle"] = "modal"
    img["data-src"] = original
    img["src"] = src


def rewrite_images(soup: BeautifulSoup, page_path: str, index: ResourceIndex) -> RewriteResult:
    """Rewrite every eligible image in ``soup`` in place."""
    result = RewriteResult()
    base_dir = page_directory(page_path)
    for img in soup.find_all("img"):
        reference = describe_image(img, page_path)
        if reference is None or reference.is_excluded:
            continue
        if reference.is_absolute_uri:
            logger.debug("Skipping external image %s in %s", reference.src, page_path)
            continue
        match = find_thumbnail(reference, index)
        if match is None:
            logger.debug("No thumbnail for %s in %s", reference.src, page_path)
            continue
        src = relative_to(match.thumbnail_relative_path, base_dir)
        update_image_node(img, src)
        result.count += 1
    return result
