"""Tab-separated text classification corpus."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from textrecords.data.base import CorpusAdapter
from textrecords.data.reader import read_lines
from textrecords.errors import MalformedRecordError


@dataclass(frozen=True)
class ClassificationSample:
    text: str
    label: str


def parse_classification_line(
    line: str,
    path: str | Path | None = None,
    line_number: int | None = None,
) -> ClassificationSample:
    """Split ``line`` on its first tab into text and raw label."""
    text, sep, label = line.partition("\t")
    if not sep:
        raise MalformedRecordError(
            f"invalid classifier line {line!r}: expected '<text>\\t<label>'",
            path=path,
            line_number=line_number,
        )
    return ClassificationSample(text=text, label=label)


class ClassificationCorpus(CorpusAdapter):
    """Adapter for ``<text>\\t<label>`` corpora with a ``class.txt`` label list."""

    @property
    def name(self) -> str:
        return "classification"

    @property
    def class_path(self) -> Path:
        return self.dataset_dir / self.config.class_file

    @property
    def vocab_path(self) -> Path | None:
        return self.config.vocab_source.resolve(self.dataset_dir)

    def iter_samples(self, split: str) -> Iterator[ClassificationSample]:
        path = self.split_path(split)
        for line_number, line in enumerate(read_lines(path), start=1):
            yield parse_classification_line(line, path, line_number)

    def read_split(self, split: str) -> list[ClassificationSample]:
        return list(self.iter_samples(split))

    def read_classes(self) -> list[str]:
        """Return class names in file order."""
        return list(read_lines(self.class_path, strip_whitespace=False))
