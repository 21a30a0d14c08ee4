from __future__ import annotations

import logging

import numpy as np

from thumbsquare.canvas.codec import format_for_name, load_rgba, save_square
from thumbsquare.canvas.square import build_square_canvas
from thumbsquare.canvas.types import Placement, SquareBuildResult, SquareFormat

logger = logging.getLogger(__name__)


def build_square_image(input_path: str, square_format: SquareFormat) -> tuple[np.ndarray, Placement]:
    source_rgba = load_rgba(input_path)
    return build_square_canvas(source_rgba, square_format)


def run_square_job(input_path: str, output_path: str, square_format: SquareFormat) -> SquareBuildResult:
    image, placement = build_square_image(input_path, square_format)
    save_square(output_path, image, square_format.encoding)
    return SquareBuildResult(
        image=image,
        placement=placement,
        square_format=square_format,
        output_path=output_path,
    )


def process_image(input_path: str, output_path: str, file_name: str) -> SquareBuildResult | None:
    """Write a square, padded copy of one thumbnail.

    The target encoding is chosen from `file_name`'s suffix only. Names with
    an unsupported suffix are skipped and `None` is returned.
    """
    square_format = format_for_name(file_name)
    if square_format is None:
        logger.debug(f"Skipping {file_name}: unsupported suffix")
        return None
    return run_square_job(input_path, output_path, square_format)
