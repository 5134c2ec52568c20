"""Application services orchestrating the compression benchmark."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from nested_zip.application.dto import BenchmarkRequest, BenchmarkResponse
from nested_zip.domain.models import ArtifactPaths
from nested_zip.domain.repositories import (
    DirectArchiver,
    FixtureRepository,
    NestedArchiver,
    SizeProbe,
)
from nested_zip.domain.results import ComparisonReport
from nested_zip.domain.services import SizeComparator
from nested_zip.infrastructure.storage.filesystem import cleanup, delete_directory_tree


def _discard(message: str) -> None:
    return None


@dataclass(slots=True)
class BenchmarkContext:
    fixture_repository: FixtureRepository
    direct_archiver: DirectArchiver
    nested_archiver: NestedArchiver
    size_probe: SizeProbe
    comparator: SizeComparator


class RunBenchmarkUseCase:
    def __init__(self, context: BenchmarkContext, notify: Callable[[str], None] = _discard) -> None:
        self._context = context
        self._notify = notify

    def execute(self, request: BenchmarkRequest) -> BenchmarkResponse:
        context = self._context
        spec = request.spec
        paths = request.paths
        root_existed = paths.root.is_dir()

        self._notify(
            f'Creating {spec.files_to_write} text files with {spec.lines_per_file} lines of the text: "{spec.text}"'
        )
        fixtures = context.fixture_repository.generate(paths.fixtures_dir, spec)
        self._notify("Test files created successfully.")

        context.direct_archiver.create(paths.fixtures_dir, paths.direct_archive)
        self._notify("Direct compression completed.")

        context.nested_archiver.create(paths.fixtures_dir, paths.container, paths.compressed)
        self._notify("Non-compressed zip first, then compressed completed.")

        report = self._measure(paths)
        return BenchmarkResponse(report=report, paths=paths, fixtures=tuple(fixtures), root_existed=root_existed)

    def _measure(self, paths: ArtifactPaths) -> ComparisonReport:
        probe = self._context.size_probe
        return self._context.comparator.compare(
            paths.fixtures_dir,
            probe.directory_size(paths.fixtures_dir),
            paths.direct_archive,
            probe.file_size(paths.direct_archive),
            paths.container,
            probe.file_size(paths.container),
            paths.compressed,
            probe.file_size(paths.compressed),
        )


class CleanupUseCase:
    """Removes a run's artifacts once the operator has confirmed."""

    def execute(self, response: BenchmarkResponse, confirm: Callable[[], bool] = lambda: True) -> bool:
        if not confirm():
            return False
        paths = response.paths
        if response.root_existed:
            cleanup(paths.fixtures_dir, paths.direct_archive, paths.container, paths.compressed)
        else:
            delete_directory_tree(paths.root)
        return True
