from __future__ import annotations

import argparse
import logging

from thumbsquare.config import settings
from thumbsquare.pipeline.orchestrator import resize_thumbnails

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog=settings.app_name,
        description="Pad thumbnail_* images to centered squares as resized_thumbnail_*.",
    )
    ap.add_argument(
        "directory",
        nargs="?",
        default=settings.thumbnails_dir,
        help=f"directory holding the thumbnails (default: {settings.thumbnails_dir})",
    )
    args = ap.parse_args(argv)
    configure_logging()

    try:
        result = resize_thumbnails(args.directory)
    except OSError as exc:
        logger.error(f"Cannot read thumbnails directory {args.directory}: {exc}")
        return 0

    error = result.error()
    if error is not None:
        logger.error(str(error))
    return 0
