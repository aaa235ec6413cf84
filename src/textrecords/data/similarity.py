"""Sentence-pair similarity corpus: ``<text_a>\\t<text_b>\\t<0|1>``."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from textrecords.data.base import CorpusAdapter
from textrecords.data.reader import read_lines
from textrecords.errors import MalformedRecordError


@dataclass(frozen=True)
class SimilaritySample:
    text_a: str
    text_b: str
    similar: bool


def parse_similarity_line(
    line: str,
    path: str | Path | None = None,
    line_number: int | None = None,
) -> SimilaritySample:
    """Parse one pair line. Any non-zero flag counts as similar."""
    parts = line.split("\t", 2)
    if len(parts) < 3:
        raise MalformedRecordError(
            f"invalid similarity sample {line!r}: expected 3 tab-separated fields",
            path=path,
            line_number=line_number,
        )
    text_a, text_b, flag = parts
    if not flag.isascii() or not flag.isdigit():
        raise MalformedRecordError(
            f"invalid similarity tag {flag!r}",
            path=path,
            line_number=line_number,
        )
    return SimilaritySample(text_a=text_a, text_b=text_b, similar=int(flag) != 0)


class SimilarityCorpus(CorpusAdapter):
    """Adapter for sentence-pair corpora with a binary similarity flag."""

    @property
    def name(self) -> str:
        return "similarity"

    def read_split(self, split: str) -> list[SimilaritySample]:
        path = self.split_path(split)
        return [
            parse_similarity_line(line, path, line_number)
            for line_number, line in enumerate(read_lines(path), start=1)
        ]
