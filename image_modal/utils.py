"""Path helpers operating on slash-separated, site-relative strings."""

from __future__ import annotations

import posixpath
import re
from typing import List, Optional

THUMBNAIL_SUFFIX = "_thumbnail"

# RFC 3986 scheme followed by ':'; single letters are left out so that
# Windows drive paths are not mistaken for URIs.
_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]+:")


def is_absolute_uri(value: str) -> bool:
    """Return True when ``value`` carries a URI scheme or is protocol-relative."""
    value = value.strip()
    return bool(_SCHEME_PATTERN.match(value)) or value.startswith("//")


def _split(path: str) -> List[str]:
    return [part for part in path.split("/") if part and part != "."]


def page_directory(page_path: str) -> str:
    """Directory of a page, ``""`` for pages at the site root."""
    return posixpath.dirname(page_path.replace("\\", "/"))


def strip_extension(path: str) -> str:
    """Drop everything from the last dot of the file name onwards.

    Only the final suffix goes: ``archive.tar.gz`` becomes ``archive.tar``.
    """
    head, name = posixpath.split(path)
    dot = name.rfind(".")
    if dot <= 0:
        return path
    return posixpath.join(head, name[:dot]) if head else name[:dot]


def get_extension(path: str) -> str:
    """Suffix from the last dot of the file name, dot included."""
    name = posixpath.basename(path)
    dot = name.rfind(".")
    if dot <= 0:
        return ""
    return name[dot:]


def thumbnail_stem(path: str) -> str:
    """Expected thumbnail path for an image, without any extension."""
    return strip_extension(path) + THUMBNAIL_SUFFIX


def resolve_image_path(src: str, page_path: str) -> Optional[str]:
    """Resolve an ``<img src>`` against the page it appears on.

    Returns None for absolute URIs. Relative sources are joined onto the
    page directory and normalised; a path climbing above the site root is
    returned as-is and will simply not match any resource.
    """
    if is_absolute_uri(src):
        return None
    src = re.split(r"[?#]", src.strip(), maxsplit=1)[0].replace("\\", "/")
    if src.startswith("/"):
        return posixpath.normpath(src)
    joined = posixpath.join(page_directory(page_path), src)
    normalized = posixpath.normpath(joined)
    return "" if normalized == "." else normalized


def relative_to(target: str, base_dir: str) -> str:
    """Express site-relative ``target`` relative to directory ``base_dir``."""
    target_parts = _split(target)
    base_parts = _split(base_dir)
    common = 0
    for left, right in zip(target_parts, base_parts):
        if left != right:
            break
        common += 1
    climb = [".."] * (len(base_parts) - common)
    return "/".join(climb + target_parts[common:])


def path_prefix_to_root(page_path: str) -> str:
    """Prefix climbing from the page directory back to the site root."""
    return "../" * len(_split(page_directory(page_path)))
