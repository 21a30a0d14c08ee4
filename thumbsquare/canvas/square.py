from __future__ import annotations

import numpy as np

from thumbsquare.canvas.types import Placement, SquareFormat


def compute_placement(width: int, height: int) -> Placement:
    if width <= 0 or height <= 0:
        raise ValueError(f"image has no pixels: {width}x{height}")
    size = max(width, height)
    # Floor division: an odd remainder lands on the bottom/right edge.
    x = (size - width) // 2
    y = (size - height) // 2
    return Placement(size=size, x=x, y=y, width=width, height=height)


def _blank_canvas(size: int, border_fill: tuple[int, int, int] | None) -> np.ndarray:
    canvas = np.zeros((size, size, 4), dtype=np.uint8)
    if border_fill is not None:
        r, g, b = border_fill
        canvas[:, :] = (r, g, b, 255)
    return canvas


def _composite_over(canvas: np.ndarray, source_rgba: np.ndarray, placement: Placement) -> np.ndarray:
    y1, y2 = placement.y, placement.y + placement.height
    x1, x2 = placement.x, placement.x + placement.width

    src = source_rgba.astype(np.float32) / 255.0
    dst = canvas[y1:y2, x1:x2].astype(np.float32) / 255.0

    src_a = src[:, :, 3:4]
    dst_a = dst[:, :, 3:4]
    out_a = src_a + dst_a * (1.0 - src_a)

    premul = src[:, :, :3] * src_a + dst[:, :, :3] * dst_a * (1.0 - src_a)
    safe_a = np.where(out_a > 0.0, out_a, 1.0)
    out_rgb = np.where(out_a > 0.0, premul / safe_a, 0.0)

    blended = np.concatenate([out_rgb, out_a], axis=2)
    result = canvas.copy()
    result[y1:y2, x1:x2] = np.clip(np.round(blended * 255.0), 0, 255).astype(np.uint8)
    return result


def build_square_canvas(source_rgba: np.ndarray, square_format: SquareFormat) -> tuple[np.ndarray, Placement]:
    """Center an RGBA raster on a square canvas without scaling it.

    The canvas side is the larger of the source dimensions. When the format
    has a border fill the whole canvas is painted with it (fully opaque)
    before the source is composited on top with the "over" operator;
    otherwise the canvas starts as transparent black.
    """
    if source_rgba.ndim != 3 or source_rgba.shape[2] != 4:
        raise ValueError(f"expected an RGBA raster, got shape {source_rgba.shape}")

    h, w = source_rgba.shape[:2]
    placement = compute_placement(w, h)
    canvas = _blank_canvas(placement.size, square_format.border_fill)
    return _composite_over(canvas, source_rgba, placement), placement
