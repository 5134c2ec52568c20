"""Benchmark comparing per-file zip compression with compressing a stored container."""
from nested_zip.application.use_cases import BenchmarkContext, CleanupUseCase, RunBenchmarkUseCase
from nested_zip.domain.services import SizeComparator
from nested_zip.infrastructure.archive.zip_repository import (
    ZipDirectArchiver,
    ZipNestedArchiver,
    create_direct_archive,
    create_nested_archive,
)
from nested_zip.infrastructure.fixtures.text_fixtures import TextFixtureRepository, generate
from nested_zip.infrastructure.storage.filesystem import FileSystemSizeProbe, compare_sizes

__all__ = [
    "BenchmarkContext",
    "CleanupUseCase",
    "RunBenchmarkUseCase",
    "SizeComparator",
    "ZipDirectArchiver",
    "ZipNestedArchiver",
    "TextFixtureRepository",
    "FileSystemSizeProbe",
    "compare_sizes",
    "create_direct_archive",
    "create_nested_archive",
    "generate",
]
