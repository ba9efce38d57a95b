"""Exceptions raised by the image modal transform."""

from __future__ import annotations


class ImageModalError(Exception):
    """Base class for all transform errors."""


class ConfigurationError(ImageModalError):
    """Build metadata or manifest input could not be interpreted."""


class TemplateError(ImageModalError):
    """The modal template is missing or renders no markup."""


class PageFormatError(ImageModalError):
    """A page lacks one of the nodes the injected assets are anchored to."""

    def __init__(self, anchor: str, page: str) -> None:
        super().__init__(f"Missing <{anchor}> in {page}")
        self.anchor = anchor
        self.page = page
