"""Central configuration for the nested zip benchmark."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from nested_zip.domain.models import ArtifactPaths, FixtureSpec

DEFAULT_TEXT = (
    "This is some repeated text to use for compressing into files "
    "to test the size of the resulting compressed files."
)
DEFAULT_ROOT = Path("nested_zip_playground")


@dataclass(slots=True, frozen=True)
class Settings:
    root: Path
    file_count: int
    line_count: int
    text: str
    # None picks colour when stdout is a terminal.
    color: bool | None = None

    def fixture_spec(self) -> FixtureSpec:
        return FixtureSpec(file_count=self.file_count, line_count=self.line_count, text=self.text)

    def paths(self) -> ArtifactPaths:
        return ArtifactPaths.under(self.root)


DEFAULT_SETTINGS = Settings(
    root=DEFAULT_ROOT,
    file_count=25,
    line_count=25,
    text=DEFAULT_TEXT,
)
