"""Shared fixtures for corpus tests."""

from pathlib import Path
from typing import Callable

import pytest


def write_lines(path: Path, lines: list[str]) -> Path:
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return path


@pytest.fixture
def make_corpus(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing a classification corpus into ``tmp_path``."""

    def _make(
        train: list[str],
        dev: list[str] | None = None,
        test: list[str] | None = None,
        classes: list[str] | None = None,
    ) -> Path:
        dataset_dir = tmp_path / "corpus"
        dataset_dir.mkdir(exist_ok=True)
        write_lines(dataset_dir / "train.txt", train)
        write_lines(dataset_dir / "dev.txt", dev or [])
        write_lines(dataset_dir / "test.txt", test or [])
        write_lines(dataset_dir / "class.txt", classes or [])
        return dataset_dir

    return _make


@pytest.fixture
def news_corpus(make_corpus: Callable[..., Path]) -> Path:
    """Small corpus mixing numeric and named labels."""
    return make_corpus(
        train=["ab\tc", "ba\td", "abc\t1"],
        dev=["ax\tc"],
        test=["zzzz\t0", "cab\td"],
        classes=["zero", "one", "c", "d"],
    )
