from __future__ import annotations

from pathlib import Path

from thumbsquare.config import settings


def list_thumbnails(directory: str, prefix: str | None = None) -> list[str]:
    """Names of the entries in `directory` that start with the thumbnail prefix.

    Raises OSError when the directory cannot be listed.
    """
    wanted = settings.thumbnail_prefix if prefix is None else prefix
    names = sorted(p.name for p in Path(directory).iterdir())
    return [name for name in names if name.startswith(wanted)]


def output_path_for(directory: str, file_name: str, output_prefix: str | None = None) -> str:
    prefix = settings.output_prefix if output_prefix is None else output_prefix
    return str(Path(directory) / f"{prefix}{file_name}")
