"""Domain models for the nested zip benchmark.

These dataclasses describe the fixture set and the artifacts produced from it.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

FIXTURES_DIRNAME = "TestFiles"
DIRECT_ARCHIVE_NAME = "direct_compressed.zip"
CONTAINER_NAME = "non_compressed.zip"
COMPRESSED_CONTAINER_NAME = "compressed_non_compressed.zip"


@dataclass(frozen=True)
class FixtureSpec:
    """Shape of the redundant text fixtures.

    Counts are inclusive upper bounds: ``file_count=25`` yields 26 files.
    """

    file_count: int
    line_count: int
    text: str

    def __post_init__(self) -> None:
        if self.file_count < 0:
            raise ValueError(f"file_count must be >= 0, got {self.file_count}")
        if self.line_count < 0:
            raise ValueError(f"line_count must be >= 0, got {self.line_count}")

    @property
    def files_to_write(self) -> int:
        return self.file_count + 1

    @property
    def lines_per_file(self) -> int:
        return self.line_count + 1

    def file_names(self) -> list[str]:
        return [f"file{index}.txt" for index in range(self.files_to_write)]


@dataclass(frozen=True)
class ArtifactPaths:
    """Locations of everything a benchmark run writes."""

    root: Path
    fixtures_dir: Path
    direct_archive: Path
    container: Path
    compressed: Path

    @classmethod
    def under(cls, root: Path | str) -> "ArtifactPaths":
        root = Path(root)
        return cls(
            root=root,
            fixtures_dir=root / FIXTURES_DIRNAME,
            direct_archive=root / DIRECT_ARCHIVE_NAME,
            container=root / CONTAINER_NAME,
            compressed=root / COMPRESSED_CONTAINER_NAME,
        )

    def artifact_files(self) -> tuple[Path, Path, Path]:
        return (self.direct_archive, self.container, self.compressed)


@dataclass(frozen=True)
class SizeMeasurement:
    label: str
    path: Path
    size_bytes: int
