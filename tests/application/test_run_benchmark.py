from pathlib import Path

from nested_zip.application.dto import BenchmarkRequest
from nested_zip.application.use_cases import BenchmarkContext, CleanupUseCase, RunBenchmarkUseCase
from nested_zip.cli import build_context
from nested_zip.config import DEFAULT_TEXT
from nested_zip.domain.models import ArtifactPaths, FixtureSpec
from nested_zip.domain.results import Verdict
from nested_zip.domain.services import SizeComparator


def make_request(root: Path, files: int = 25, lines: int = 25, text: str = DEFAULT_TEXT) -> BenchmarkRequest:
    return BenchmarkRequest(spec=FixtureSpec(files, lines, text), paths=ArtifactPaths.under(root))


def artifact_sizes(paths: ArtifactPaths) -> tuple[int, ...]:
    return tuple(path.stat().st_size for path in paths.artifact_files())


def test_default_scenario_favours_nested(tmp_path: Path):
    messages: list[str] = []
    use_case = RunBenchmarkUseCase(build_context(), notify=messages.append)

    response = use_case.execute(make_request(tmp_path / "work"))

    report = response.report
    line_bytes = len(DEFAULT_TEXT.encode("utf-8")) + 1
    assert len(response.fixtures) == 26
    assert report.uncompressed.size_bytes == 26 * 26 * line_bytes
    assert report.compressed.size_bytes < report.direct.size_bytes
    assert report.container.size_bytes > report.uncompressed.size_bytes
    assert report.verdict is Verdict.NESTED_SMALLER
    assert report.verdict.message == "Compressing the non-compressed zip file resulted in a smaller file."
    assert messages == [
        f'Creating 26 text files with 26 lines of the text: "{DEFAULT_TEXT}"',
        "Test files created successfully.",
        "Direct compression completed.",
        "Non-compressed zip first, then compressed completed.",
    ]


def test_rerun_without_cleanup_is_idempotent(tmp_path: Path):
    root = tmp_path / "work"
    use_case = RunBenchmarkUseCase(build_context())

    first = use_case.execute(make_request(root, files=5, lines=5))
    second = use_case.execute(make_request(root, files=5, lines=5))

    assert first.root_existed is False
    assert second.root_existed is True
    assert [m.size_bytes for m in first.report.iter_measurements()] == [
        m.size_bytes for m in second.report.iter_measurements()
    ]
    assert artifact_sizes(second.paths) == tuple(
        m.size_bytes for m in (second.report.direct, second.report.container, second.report.compressed)
    )


def test_cleanup_of_fresh_root_removes_root(tmp_path: Path):
    root = tmp_path / "work"
    response = RunBenchmarkUseCase(build_context()).execute(make_request(root, files=1, lines=1))

    assert CleanupUseCase().execute(response) is True

    assert not root.exists()


def test_cleanup_of_existing_root_keeps_root(tmp_path: Path):
    root = tmp_path / "work"
    root.mkdir()
    (root / "unrelated.txt").write_text("keep me")
    response = RunBenchmarkUseCase(build_context()).execute(make_request(root, files=1, lines=1))

    CleanupUseCase().execute(response)

    paths = response.paths
    assert not paths.fixtures_dir.exists()
    assert not any(path.exists() for path in paths.artifact_files())
    assert (root / "unrelated.txt").read_text() == "keep me"


def test_declined_confirmation_keeps_artifacts(tmp_path: Path):
    response = RunBenchmarkUseCase(build_context()).execute(make_request(tmp_path / "work", files=1, lines=1))

    assert CleanupUseCase().execute(response, confirm=lambda: False) is False

    assert response.paths.fixtures_dir.is_dir()
    assert all(path.is_file() for path in response.paths.artifact_files())


class RecordingStages:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def generate(self, directory: Path, spec: FixtureSpec):
        self.calls.append("generate")
        return [directory / name for name in spec.file_names()]

    def directory_size(self, directory: Path) -> int:
        return 1000

    def file_size(self, path: Path) -> int:
        return {"direct_compressed.zip": 400, "non_compressed.zip": 1100}.get(path.name, 150)


class RecordingDirect:
    def __init__(self, stages: RecordingStages) -> None:
        self._stages = stages

    def create(self, source_directory: Path, output_path: Path) -> None:
        self._stages.calls.append("direct")


class RecordingNested:
    def __init__(self, stages: RecordingStages) -> None:
        self._stages = stages

    def create(self, source_directory: Path, container_path: Path, compressed_path: Path) -> None:
        self._stages.calls.append("nested")


def test_use_case_drives_injected_stages_in_order(tmp_path: Path):
    stages = RecordingStages()
    context = BenchmarkContext(
        fixture_repository=stages,
        direct_archiver=RecordingDirect(stages),
        nested_archiver=RecordingNested(stages),
        size_probe=stages,
        comparator=SizeComparator(),
    )

    response = RunBenchmarkUseCase(context).execute(make_request(tmp_path / "work", files=2, lines=1))

    assert stages.calls == ["generate", "direct", "nested"]
    assert len(response.fixtures) == 3
    assert response.report.direct.size_bytes == 400
    assert response.report.compressed.size_bytes == 150
    assert response.report.verdict is Verdict.NESTED_SMALLER
    assert not (tmp_path / "work").exists()
