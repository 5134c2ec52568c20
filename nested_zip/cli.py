"""Command-line entrypoint for the compression benchmark."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from nested_zip.application.dto import BenchmarkRequest
from nested_zip.application.use_cases import BenchmarkContext, CleanupUseCase, RunBenchmarkUseCase
from nested_zip.config import Settings
from nested_zip.domain.services import SizeComparator
from nested_zip.infrastructure.archive.zip_repository import ZipDirectArchiver, ZipNestedArchiver
from nested_zip.infrastructure.fixtures.text_fixtures import TextFixtureRepository
from nested_zip.infrastructure.storage.filesystem import FileSystemSizeProbe
from nested_zip.infrastructure.storage.settings_store import load_settings
from nested_zip.presentation.size_report import render_csv, render_html, render_text


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compare per-file zip compression against gzipping a stored zip container"
    )
    parser.add_argument("--root", type=Path, help="Working directory for fixtures and archives")
    parser.add_argument("--files", type=int, help="Highest fixture file index (writes N+1 files)")
    parser.add_argument("--lines", type=int, help="Highest line index per file (writes N+1 lines)")
    parser.add_argument("--text", type=str, help="Line repeated in every fixture file")
    parser.add_argument("--config", type=Path, help="JSON file with settings overrides")
    parser.add_argument("--yes", action="store_true", help="Clean up without waiting for Enter")
    parser.add_argument("--keep", action="store_true", help="Leave fixtures and archives in place")
    parser.add_argument("--no-color", action="store_true", help="Disable coloured size lines")
    parser.add_argument("--csv", type=Path, help="Also write the size table as CSV (kept even when inside --root)")
    parser.add_argument("--html", type=Path, help="Also write the size table as HTML (kept even when inside --root)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log stage details")
    args = parser.parse_args(argv)
    if args.files is not None and args.files < 0:
        parser.error("--files must be >= 0")
    if args.lines is not None and args.lines < 0:
        parser.error("--lines must be >= 0")
    return args


def build_settings(args: argparse.Namespace) -> Settings:
    settings = load_settings(args.config)
    overrides = {
        "root": args.root,
        "file_count": args.files,
        "line_count": args.lines,
        "text": args.text,
    }
    settings = replace(settings, **{key: value for key, value in overrides.items() if value is not None})
    if args.no_color:
        settings = replace(settings, color=False)
    return settings


def build_context() -> BenchmarkContext:
    return BenchmarkContext(
        fixture_repository=TextFixtureRepository(),
        direct_archiver=ZipDirectArchiver(),
        nested_archiver=ZipNestedArchiver(),
        size_probe=FileSystemSizeProbe(),
        comparator=SizeComparator(),
    )


def _is_inside(path: Path, root: Path) -> bool:
    return path.resolve().is_relative_to(root.resolve())


def wait_for_operator() -> bool:
    print("Press Enter to clean up...")
    try:
        input()
    except EOFError:
        pass
    return True


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    settings = build_settings(args)
    color = settings.color if settings.color is not None else sys.stdout.isatty()

    request = BenchmarkRequest(spec=settings.fixture_spec(), paths=settings.paths())
    response = RunBenchmarkUseCase(build_context(), notify=print).execute(request)

    print()
    print(render_text(response.report, color=color))
    print()

    if args.csv:
        args.csv.write_bytes(render_csv(response.report))
    if args.html:
        args.html.write_text(render_html(response.report), encoding="utf-8")

    if args.keep:
        print(f"Artifacts kept under {response.paths.root}")
        return 0

    exports = [path for path in (args.csv, args.html) if path is not None]
    if not response.root_existed and any(_is_inside(path, response.paths.root) for path in exports):
        # Removing the whole root would take the exports with it; remove only the run's artifacts.
        response = replace(response, root_existed=True)

    confirm = (lambda: True) if args.yes else wait_for_operator
    if CleanupUseCase().execute(response, confirm=confirm):
        print("Cleanup completed.")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
