from __future__ import annotations

from dataclasses import dataclass


class ThumbnailError(RuntimeError):
    pass


class ImageDecodeError(ThumbnailError):
    pass


class ImageEncodeError(ThumbnailError):
    pass


@dataclass(slots=True)
class FileFailure:
    file_name: str
    cause: BaseException

    def __str__(self) -> str:
        return f"failed to resize {self.file_name}: {self.cause}"


class BatchResizeError(ThumbnailError):
    """Every per-file failure of one batch, in the order they happened."""

    def __init__(self, failures: list[FileFailure]) -> None:
        self.failures = list(failures)
        super().__init__("\n".join(str(f) for f in self.failures))

    @property
    def file_names(self) -> list[str]:
        return [f.file_name for f in self.failures]
