"""Sequence tagging corpus: ``<token>\\t<tag>`` blocks separated by blank lines."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from textrecords.data.base import CorpusAdapter
from textrecords.data.reader import read_lines
from textrecords.errors import MalformedRecordError


@dataclass
class TaggingSample:
    items: list[tuple[str, str]] = field(default_factory=list)

    @property
    def tokens(self) -> list[str]:
        return [token for token, _ in self.items]

    @property
    def tags(self) -> list[str]:
        return [tag for _, tag in self.items]

    def __len__(self) -> int:
        return len(self.items)


def parse_tagging_line(
    line: str,
    path: str | Path | None = None,
    line_number: int | None = None,
) -> tuple[str, str]:
    token, sep, tag = line.partition("\t")
    if not sep:
        raise MalformedRecordError(
            f"invalid tagging line {line!r}: expected '<token>\\t<tag>'",
            path=path,
            line_number=line_number,
        )
    return token, tag


def iter_tagging_blocks(
    lines: Iterable[str],
    path: str | Path | None = None,
) -> Iterator[TaggingSample]:
    """Group lines into samples; blank lines close the current block."""
    items: list[tuple[str, str]] = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            if items:
                yield TaggingSample(items)
                items = []
            continue
        items.append(parse_tagging_line(line, path, line_number))

    if items:
        yield TaggingSample(items)


class TaggingCorpus(CorpusAdapter):
    """Adapter for token/tag corpora."""

    @property
    def name(self) -> str:
        return "tagging"

    def read_split(self, split: str) -> list[TaggingSample]:
        path = self.split_path(split)
        return list(iter_tagging_blocks(read_lines(path), path))

    @staticmethod
    def tag_list(samples: Iterable[TaggingSample]) -> list[str]:
        """Return distinct tags in first-seen order."""
        seen: dict[str, None] = {}
        for sample in samples:
            for tag in sample.tags:
                seen.setdefault(tag, None)
        return list(seen)
