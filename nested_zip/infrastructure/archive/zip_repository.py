"""Zip and gzip backed archivers for the two compression strategies."""
from __future__ import annotations

import gzip
import logging
import shutil
import zipfile
from pathlib import Path

logger = logging.getLogger(__name__)

MAX_COMPRESS_LEVEL = 9
COPY_CHUNK_SIZE = 1024 * 1024


def _remove_stale(path: Path) -> None:
    if path.exists():
        logger.debug("removing stale artifact %s", path)
        path.unlink()


def _source_files(source_directory: Path) -> list[Path]:
    return sorted(p for p in source_directory.iterdir() if p.is_file())


def create_direct_archive(source_directory: Path, output_path: Path) -> None:
    """Deflate each file as its own entry.

    Entries are compressed independently, so redundancy shared between files is
    never seen by the compressor.
    """
    source_directory = Path(source_directory)
    output_path = Path(output_path)
    _remove_stale(output_path)

    with zipfile.ZipFile(
        output_path, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=MAX_COMPRESS_LEVEL
    ) as archive:
        for file in _source_files(source_directory):
            archive.write(file, arcname=file.name)

    logger.info("direct archive written to %s", output_path)


def create_nested_archive(source_directory: Path, container_path: Path, compressed_path: Path) -> None:
    """Store files uncompressed in a zip, then gzip the zip as a single stream.

    The stored container lays the file bodies out back to back, so the gzip
    window can match content across file boundaries. That only pays off when
    files share content; for incompressible input either strategy can come out
    smaller, decided by framing overhead rather than redundancy.
    """
    source_directory = Path(source_directory)
    container_path = Path(container_path)
    compressed_path = Path(compressed_path)
    _remove_stale(container_path)
    _remove_stale(compressed_path)

    with zipfile.ZipFile(container_path, "w", compression=zipfile.ZIP_STORED) as container:
        for file in _source_files(source_directory):
            container.write(file, arcname=file.name)

    # The container must be closed before it is read back.
    with container_path.open("rb") as original, compressed_path.open("wb") as target:
        with gzip.GzipFile(
            filename="", mode="wb", compresslevel=MAX_COMPRESS_LEVEL, fileobj=target, mtime=0
        ) as compressor:
            shutil.copyfileobj(original, compressor, COPY_CHUNK_SIZE)

    logger.info("nested archive written to %s via %s", compressed_path, container_path)


class ZipDirectArchiver:
    def create(self, source_directory: Path, output_path: Path) -> None:
        create_direct_archive(source_directory, output_path)


class ZipNestedArchiver:
    def create(self, source_directory: Path, container_path: Path, compressed_path: Path) -> None:
        create_nested_archive(source_directory, container_path, compressed_path)
