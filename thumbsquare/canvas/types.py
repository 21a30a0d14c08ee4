from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np


class Encoding(enum.Enum):
    LOSSY = "jpeg"
    LOSSLESS_EXACT = "webp"


@dataclass(frozen=True, slots=True)
class SquareFormat:
    encoding: Encoding
    border_fill: tuple[int, int, int] | None = None


@dataclass(slots=True)
class Placement:
    size: int
    x: int
    y: int
    width: int
    height: int


@dataclass(slots=True)
class SquareBuildResult:
    image: np.ndarray
    placement: Placement
    square_format: SquareFormat
    output_path: str
