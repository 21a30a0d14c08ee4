from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image


def _write_image(
    path: Path,
    size: tuple[int, int],
    color: tuple[int, ...],
    *,
    mode: str = "RGB",
    fmt: str | None = None,
) -> Path:
    img = Image.new(mode, size, color)
    if fmt == "WEBP":
        img.save(path, format=fmt, lossless=True)
    else:
        img.save(path, format=fmt)
    return path


@pytest.fixture
def thumbs_dir(tmp_path: Path) -> Path:
    d = tmp_path / "assets"
    d.mkdir()
    return d


@pytest.fixture
def write_image():
    return _write_image
