"""Lookup of generated resources by site-relative path."""

from __future__ import annotations

from typing import Iterable, List, Optional, Set

from .models import OutputFile
from .utils import get_extension, strip_extension, thumbnail_stem


class ResourceIndex:
    """Read-only view over every resource the build produced.

    Built once per run and shared by all pages.
    """

    def __init__(self, resources: Iterable[OutputFile]) -> None:
        self._resources: List[OutputFile] = list(resources)
        self._paths: Set[str] = {res.relative_path for res in self._resources}

    def __len__(self) -> int:
        return len(self._resources)

    def exists(self, path: str) -> bool:
        return path in self._paths

    def find_thumbnail_for(self, resolved_path: str) -> Optional[OutputFile]:
        """Return the first resource named like the image's thumbnail.

        Extensions are ignored on both sides so ``foo.png`` pairs with
        ``foo_thumbnail.webp``. Manifest order decides between candidates.
        """
        stem = thumbnail_stem(resolved_path)
        for resource in self._resources:
            path = resource.relative_path
            if get_extension(path) and strip_extension(path) == stem:
                return resource
        return None
