from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from PIL import Image

from thumbsquare.canvas.types import Encoding, SquareFormat
from thumbsquare.errors import ImageDecodeError, ImageEncodeError

logger = logging.getLogger(__name__)

WHITE = (255, 255, 255)

JPEG_SQUARE = SquareFormat(encoding=Encoding.LOSSY, border_fill=WHITE)
WEBP_SQUARE = SquareFormat(encoding=Encoding.LOSSLESS_EXACT, border_fill=None)

# Matched case-sensitively against the file name's suffix.
FORMATS_BY_SUFFIX: dict[str, SquareFormat] = {
    ".jpeg": JPEG_SQUARE,
    ".jpg": JPEG_SQUARE,
    ".webp": WEBP_SQUARE,
}


def format_for_name(file_name: str) -> SquareFormat | None:
    return FORMATS_BY_SUFFIX.get(Path(file_name).suffix)


def _to_8bit(img: Image.Image) -> Image.Image:
    # Pillow's RGBA conversion clips 16-bit levels at 255; keep the high byte instead.
    if img.mode.startswith("I;16") or img.mode == "I":
        levels = np.clip(np.asarray(img, dtype=np.int64), 0, 65535) >> 8
        return Image.fromarray(levels.astype(np.uint8))
    return img


def load_rgba(path: str) -> np.ndarray:
    """Decode any image Pillow can sniff into an RGBA array."""
    try:
        with Image.open(path) as img:
            img.load()
            rgba = _to_8bit(img).convert("RGBA")
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as exc:
        raise ImageDecodeError(f"cannot decode {path}: {exc}") from exc
    return np.array(rgba, dtype=np.uint8)


def _save_kwargs(encoding: Encoding) -> dict[str, object]:
    if encoding is Encoding.LOSSLESS_EXACT:
        return {"format": "WEBP", "lossless": True, "exact": True}
    return {"format": "JPEG"}


def save_square(path: str, canvas_rgba: np.ndarray, encoding: Encoding) -> None:
    pil = Image.fromarray(canvas_rgba)
    if encoding is Encoding.LOSSY:
        # JPEG has no alpha channel.
        pil = pil.convert("RGB")

    try:
        with open(path, "wb") as fh:
            pil.save(fh, **_save_kwargs(encoding))
    except (OSError, ValueError, KeyError) as exc:
        raise ImageEncodeError(f"cannot write {path}: {exc}") from exc
    logger.debug(f"Wrote {encoding.value} square to {path}")
