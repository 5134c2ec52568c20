"""Filesystem helpers for measuring and removing benchmark artifacts."""
from __future__ import annotations

import logging
import shutil
from pathlib import Path

from nested_zip.domain.results import ComparisonReport
from nested_zip.domain.services import SizeComparator

logger = logging.getLogger(__name__)


def directory_size(directory: Path) -> int:
    """Sum the sizes of all files below ``directory``.

    Walks with an explicit stack so deep trees do not grow the call stack.
    """
    total = 0
    pending = [Path(directory)]
    while pending:
        current = pending.pop()
        subdirectories = []
        for entry in current.iterdir():
            if entry.is_dir():
                # Linked directories are not descended into; a link cycle would never end.
                if not entry.is_symlink():
                    subdirectories.append(entry)
            elif entry.is_file():
                total += entry.stat().st_size
        pending.extend(subdirectories)
    return total


def file_size(path: Path) -> int:
    return Path(path).stat().st_size


def delete_directory_tree(path: Path) -> None:
    path = Path(path)
    if path.is_dir():
        shutil.rmtree(path)
        logger.debug("deleted directory tree %s", path)


def cleanup(fixture_directory: Path, direct_archive: Path, container: Path, compressed: Path) -> None:
    delete_directory_tree(fixture_directory)
    for artifact in (direct_archive, container, compressed):
        Path(artifact).unlink(missing_ok=True)
    logger.debug("removed fixtures and archives")


class FileSystemSizeProbe:
    def directory_size(self, directory: Path) -> int:
        return directory_size(directory)

    def file_size(self, path: Path) -> int:
        return file_size(path)


def compare_sizes(
    source_directory: Path,
    direct_archive: Path,
    container: Path,
    compressed: Path,
    comparator: SizeComparator | None = None,
) -> ComparisonReport:
    """Measure the fixtures and the three artifacts and pick a verdict.

    A missing artifact raises ``FileNotFoundError``.
    """
    comparator = comparator or SizeComparator()
    return comparator.compare(
        Path(source_directory),
        directory_size(source_directory),
        Path(direct_archive),
        file_size(direct_archive),
        Path(container),
        file_size(container),
        Path(compressed),
        file_size(compressed),
    )
