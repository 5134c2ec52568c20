"""Filesystem fixture generator for redundant text files."""
from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Sequence

from nested_zip.domain.models import FixtureSpec

logger = logging.getLogger(__name__)


def clean_directory(directory: Path) -> None:
    """Remove the files and subdirectories of ``directory`` but keep the directory."""
    if not directory.is_dir():
        return
    for child in directory.iterdir():
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child)
        else:
            child.unlink()


def generate(directory: Path, file_count: int, line_count: int, text: str) -> list[Path]:
    return TextFixtureRepository().generate(Path(directory), FixtureSpec(file_count, line_count, text))


class TextFixtureRepository:
    def generate(self, directory: Path, spec: FixtureSpec) -> Sequence[Path]:
        if directory.exists():
            # Leftovers from a run that was not cleaned up.
            clean_directory(directory)
        else:
            directory.mkdir(parents=True)

        written: list[Path] = []
        for name in spec.file_names():
            path = directory / name
            with path.open("w", encoding="utf-8", newline="\n") as handle:
                for _ in range(spec.lines_per_file):
                    handle.write(spec.text)
                    handle.write("\n")
            written.append(path)

        logger.debug("wrote %d fixture files to %s", len(written), directory)
        return written
