import os
from pathlib import Path
from typing import Callable

import pytest

from jestingjaguar.service import Service, Stats


class FakeProcessor:
    def __init__(self, func: Callable[[str], int]) -> None:
        self.func = func
        self.calls: list[str] = []

    def process_file(self, file_path: str) -> int:
        self.calls.append(file_path)
        return self.func(file_path)


def test_process_file(tmp_path: Path) -> None:
    path = tmp_path / "test_file.txt"
    path.write_text("")
    service = Service(FakeProcessor(lambda _: 5))

    stats = service.process(str(path))

    assert stats.files_processed == 1
    assert stats.escapes_performed == 5


def test_process_directory(tmp_path: Path) -> None:
    sub_dir = tmp_path / "subdir"
    sub_dir.mkdir()
    files = [
        os.path.join(str(tmp_path), "file1.txt"),
        os.path.join(str(tmp_path), "file2.txt"),
        os.path.join(str(sub_dir), "file3.txt"),
    ]
    for file in files:
        Path(file).write_text("test content")

    counts = {files[0]: 3, files[1]: 0, files[2]: 2}
    processor = FakeProcessor(lambda p: counts.get(p, 0))
    stats = Service(processor).process(str(tmp_path))

    assert stats.files_processed == 3
    assert stats.escapes_performed == 5
    assert sorted(processor.calls) == sorted(files)


def test_directory_walk_is_lexical(tmp_path: Path) -> None:
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "inner.txt").write_text("x")
    (tmp_path / "c.txt").write_text("x")
    (tmp_path / "a.txt").write_text("x")
    processor = FakeProcessor(lambda _: 0)

    Service(processor).process(tmp_path)

    names = [os.path.relpath(p, tmp_path) for p in processor.calls]
    assert names == ["a.txt", os.path.join("b", "inner.txt"), "c.txt"]


def test_empty_directory(tmp_path: Path) -> None:
    stats = Service(FakeProcessor(lambda _: 1)).process(tmp_path)
    assert stats == Stats(0, 0)


def test_missing_path_raises(tmp_path: Path) -> None:
    service = Service(FakeProcessor(lambda _: 1))
    with pytest.raises(FileNotFoundError):
        service.process(tmp_path / "missing")


def test_error_in_directory_propagates(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("x")

    def fail(_: str) -> int:
        raise PermissionError("denied")

    with pytest.raises(PermissionError):
        Service(FakeProcessor(fail)).process(tmp_path)


def test_default_service_escapes_tree(tmp_path: Path) -> None:
    (tmp_path / "sub").mkdir()
    (tmp_path / "one.txt").write_text("{{ first }} and {{ second }}")
    (tmp_path / "sub" / "two.txt").write_text("No templates here")

    stats = Service().process(tmp_path)

    assert stats == Stats(files_processed=2, escapes_performed=2)
    assert (tmp_path / "one.txt").read_text() == (
        '{{"{{"}} first {{"}}"}} and {{"{{"}} second {{"}}"}}'
    )
    assert (tmp_path / "sub" / "two.txt").read_text() == "No templates here"