from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from thumbsquare.canvas.pipeline import process_image
from thumbsquare.canvas.types import SquareBuildResult
from thumbsquare.errors import BatchResizeError, FileFailure, ThumbnailError
from thumbsquare.storage.local import list_thumbnails, output_path_for

logger = logging.getLogger(__name__)

ProcessFn = Callable[[str, str, str], SquareBuildResult | None]


@dataclass(slots=True)
class BatchResult:
    directory: str
    written: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failures: list[FileFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def error(self) -> BatchResizeError | None:
        if self.ok:
            return None
        return BatchResizeError(self.failures)


def resize_thumbnails(
    directory: str,
    *,
    prefix: str | None = None,
    output_prefix: str | None = None,
    process: ProcessFn = process_image,
) -> BatchResult:
    """Write a square copy of every thumbnail in `directory`.

    A file that fails is recorded in the returned result and the rest of the
    batch still runs. Only a directory that cannot be listed aborts, with
    the OSError raised by the listing.
    """
    names = list_thumbnails(directory, prefix)
    result = BatchResult(directory=directory)

    for name in names:
        input_path = str(Path(directory) / name)
        output_path = output_path_for(directory, name, output_prefix)
        try:
            built = process(input_path, output_path, name)
        except (ThumbnailError, OSError) as exc:
            logger.debug(f"Failed to resize {name}: {exc}")
            result.failures.append(FileFailure(file_name=name, cause=exc))
            continue

        if built is None:
            result.skipped.append(name)
        else:
            result.written.append(output_path)

    logger.debug(
        f"Batch done in {directory}: {len(result.written)} written, "
        f"{len(result.skipped)} skipped, {len(result.failures)} failed"
    )
    return result
