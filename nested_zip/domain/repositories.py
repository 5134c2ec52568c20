"""Interfaces for the pipeline stages the application layer drives."""
from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from .models import FixtureSpec


class FixtureRepository(Protocol):
    """Writes the redundant text fixtures."""

    def generate(self, directory: Path, spec: FixtureSpec) -> Sequence[Path]:
        ...


class DirectArchiver(Protocol):
    """Compresses every fixture as its own archive entry."""

    def create(self, source_directory: Path, output_path: Path) -> None:
        ...


class NestedArchiver(Protocol):
    """Stores fixtures in a container, then compresses the container as one stream."""

    def create(self, source_directory: Path, container_path: Path, compressed_path: Path) -> None:
        ...


class SizeProbe(Protocol):
    def directory_size(self, directory: Path) -> int:
        ...

    def file_size(self, path: Path) -> int:
        ...
