"""Application-level DTOs for a benchmark run."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence
from pathlib import Path

from nested_zip.domain.models import ArtifactPaths, FixtureSpec
from nested_zip.domain.results import ComparisonReport


@dataclass(slots=True, frozen=True)
class BenchmarkRequest:
    spec: FixtureSpec
    paths: ArtifactPaths


@dataclass(slots=True, frozen=True)
class BenchmarkResponse:
    report: ComparisonReport
    paths: ArtifactPaths
    fixtures: Sequence[Path]
    # When the root did not exist beforehand the whole tree belongs to this run.
    root_existed: bool
