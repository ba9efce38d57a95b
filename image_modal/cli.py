"""Command-line entry point for the image modal transform."""

from __future__ import annotations

import argparse
import codecs
import logging
import sys
import time
from pathlib import Path
from typing import Sequence

from .config import (
    DEFAULT_ENCODING,
    DEFAULT_TEMPLATE_PATH,
    ImageModalConfig,
    load_build_metadata,
    read_disable_flag,
)
from .errors import ConfigurationError
from .manifest import MANIFEST_FILENAME, load_manifest
from .processor import process_manifest

logger = logging.getLogger("image_modal.cli")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Point generated pages at pre-built image thumbnails and wire up the image modal."
        ),
    )
    parser.add_argument(
        "output",
        type=Path,
        help="Output folder of the site build",
    )
    parser.add_argument(
        "--manifest",
        type=Path,
        default=None,
        help=f"Build manifest to read (default: OUTPUT/{MANIFEST_FILENAME})",
    )
    parser.add_argument(
        "--metadata",
        type=Path,
        default=None,
        help="JSON build metadata or docfx.json carrying the _disableImageModal switch",
    )
    parser.add_argument(
        "--disable",
        action="store_true",
        help="Skip the transform entirely",
    )
    parser.add_argument(
        "--template",
        type=Path,
        default=DEFAULT_TEMPLATE_PATH,
        help="HTML fragment to insert as the modal markup",
    )
    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help="Text encoding used to read and write pages",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(list(sys.argv[1:] if argv is None else argv))


def _build_config(args: argparse.Namespace) -> ImageModalConfig:
    try:
        codecs.lookup(args.encoding)
    except LookupError as exc:
        raise ConfigurationError(f"Unknown encoding: {args.encoding}") from exc
    from_metadata = False
    if args.metadata is not None:
        from_metadata = read_disable_flag(load_build_metadata(args.metadata))
    disabled = args.disable or from_metadata
    return ImageModalConfig(
        output_root=Path(args.output).resolve(),
        disabled=disabled,
        template_path=args.template,
        encoding=args.encoding,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    try:
        config = _build_config(args)
        manifest = load_manifest(args.manifest or config.output_root / MANIFEST_FILENAME)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 2

    overall_start = time.perf_counter()
    report = process_manifest(manifest, config)
    total_elapsed = time.perf_counter() - overall_start

    if report.skipped:
        logger.info("Image modal disabled; no pages were touched")
        return 0

    logger.info(
        "Finished in %.2fs (%d images on %d pages, %d failed)",
        total_elapsed,
        report.converted_images,
        len(report.pages),
        len(report.failures),
    )
    for failure in report.failures:
        logger.debug("%s: %s (%s)", failure.path, failure.error, failure.kind)
    return 1 if report.failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
