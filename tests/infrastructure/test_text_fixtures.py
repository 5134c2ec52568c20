from pathlib import Path

from nested_zip.infrastructure.fixtures.text_fixtures import clean_directory, generate


def test_generate_writes_inclusive_counts(tmp_path: Path):
    directory = tmp_path / "fixtures"

    written = generate(directory, file_count=3, line_count=2, text="hello")

    files = sorted(p.name for p in directory.iterdir())
    assert files == ["file0.txt", "file1.txt", "file2.txt", "file3.txt"]
    assert len(written) == 4
    for path in directory.iterdir():
        assert path.read_bytes() == b"hello\n" * 3


def test_generate_clears_previous_contents(tmp_path: Path):
    directory = tmp_path / "fixtures"
    (directory / "nested").mkdir(parents=True)
    (directory / "nested" / "old.txt").write_text("old")
    (directory / "stray.bin").write_bytes(b"\x00")

    generate(directory, file_count=0, line_count=0, text="x")

    assert sorted(p.name for p in directory.iterdir()) == ["file0.txt"]


def test_zero_counts_still_write_one_line(tmp_path: Path):
    directory = tmp_path / "fixtures"

    generate(directory, file_count=0, line_count=0, text="only")

    assert (directory / "file0.txt").read_text(encoding="utf-8") == "only\n"


def test_clean_directory_keeps_directory(tmp_path: Path):
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "sub").mkdir()

    clean_directory(tmp_path)

    assert tmp_path.is_dir()
    assert list(tmp_path.iterdir()) == []


def test_clean_directory_ignores_missing(tmp_path: Path):
    clean_directory(tmp_path / "missing")
