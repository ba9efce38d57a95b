"""Injection of the modal markup, stylesheet and script into a page."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Protocol

from bs4 import BeautifulSoup, Tag

from .config import DEFAULT_ENCODING, MODAL_SCRIPT, MODAL_STYLESHEET
from .errors import PageFormatError, TemplateError
from .utils import path_prefix_to_root

logger = logging.getLogger("image_modal")


class TemplateRenderer(Protocol):
    """Anything able to turn a template path into an HTML fragment."""

    def render(self, template_path: Path) -> str:
        ...


class FileTemplateRenderer:
    """Reads the fragment verbatim; results are cached per path."""

    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        self.encoding = encoding
        self._cache: Dict[Path, str] = {}

    def render(self, template_path: Path) -> str:
        template_path = Path(template_path)
        if template_path not in self._cache:
            try:
                self._cache[template_path] = template_path.read_text(encoding=self.encoding)
            except OSError as exc:
                raise TemplateError(f"Cannot read template {template_path}: {exc}") from exc
        return self._cache[template_path]


def _children(parent: Tag, name: str) -> List[Tag]:
    return parent.find_all(name, recursive=False)


def _require(node: Optional[Tag], anchor: str, page: str) -> Tag:
    if node is None:
        raise PageFormatError(anchor, page)
    return node


def _fragment_root(html: str, template_path: Path) -> Tag:
    fragment = BeautifulSoup(html, "html.parser")
    root = fragment.find(True)
    if root is None:
        raise TemplateError(f"Template {template_path} rendered no element")
    return root.extract()


def _endswith(tag: Tag, attribute: str, suffix: str) -> bool:
    value = tag.get(attribute)
    return isinstance(value, str) and value.endswith(suffix)


def inject_assets(
    soup: BeautifulSoup,
    page_path: str,
    renderer: TemplateRenderer,
    template_path: Path,
) -> bool:
    """Add the modal fragment, stylesheet and script to a page.

    Each piece is only inserted if the page does not carry it yet. Returns
    True when anything was added.
    """
    head = _require(soup.head, "head", page_path)
    body = _require(soup.body, "body", page_path)
    links = _children(head, "link")
    scripts = _children(body, "script")
    if not links:
        raise PageFormatError("link", page_path)
    if not scripts:
        raise PageFormatError("script", page_path)

    prefix = path_prefix_to_root(page_path)
    changed = False

    root = _fragment_root(renderer.render(template_path), template_path)
    root_id = root.get("id")
    if not (root_id and soup.find(id=root_id)):
        scripts[0].insert_before(root)
        changed = True

    if not any(_endswith(script, "src", MODAL_SCRIPT) for script in scripts):
        script = soup.new_tag("script", attrs={"type": "text/javascript", "src": prefix + MODAL_SCRIPT})
        scripts[-1].insert_after(script)
        changed = True

    if not any(_endswith(link, "href", MODAL_STYLESHEET) for link in links):
        link = soup.new_tag("link", attrs={"rel": "stylesheet", "href": prefix + MODAL_STYLESHEET})
        links[-1].insert_after(link)
        changed = True

    if not changed:
        logger.debug("Modal assets already present in %s", page_path)
    return changed
