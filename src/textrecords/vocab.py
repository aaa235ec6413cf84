"""Character vocabulary and class index."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from pathlib import Path
from types import MappingProxyType

from textrecords.data.reader import read_lines

UNKNOWN_ID = 0


class Vocabulary(Mapping[str, int]):
    """Read-only mapping from a single character to its id.

    Ids are dense, start at 1 and follow the order in which characters were
    first seen. Id 0 is reserved for unknown characters and padding and is
    never assigned.
    """

    def __init__(self, char_to_id: Mapping[str, int] | None = None) -> None:
        self._char_to_id = MappingProxyType(dict(char_to_id or {}))
        self._id_to_char = {idx: char for char, idx in self._char_to_id.items()}

    def __getitem__(self, char: str) -> int:
        return self._char_to_id[char]

    def __iter__(self) -> Iterator[str]:
        return iter(self._char_to_id)

    def __len__(self) -> int:
        return len(self._char_to_id)

    def __repr__(self) -> str:
        return f"Vocabulary(size={len(self)})"

    def encode(self, text: str) -> list[int]:
        """Map each character to its id, ``0`` when unseen."""
        return [self._char_to_id.get(char, UNKNOWN_ID) for char in text]

    def decode(
        self,
        word_ids: Sequence[int],
        unk_token: str = "<UNK>",
        pad_token: str = "<PAD>",
    ) -> str:
        """Render ids back to text for inspection.

        Trailing zeros are shown as ``pad_token`` and other zeros as
        ``unk_token``. An unknown character at the very end of a text cannot be
        told apart from padding and is shown as padding too.
        """
        ids = list(word_ids)
        end = len(ids)
        while end > 0 and ids[end - 1] == UNKNOWN_ID:
            end -= 1
        pieces = [self._id_to_char.get(idx, unk_token) for idx in ids[:end]]
        pieces.extend(pad_token for _ in range(len(ids) - end))
        return "".join(pieces)

    def to_dict(self) -> dict[str, int]:
        return dict(self._char_to_id)


def build_vocabulary(texts: Iterable[str]) -> Vocabulary:
    """Assign ids 1, 2, ... to characters in first-seen order.

    Only training texts should be passed here. Characters are not
    frequency-sorted and the vocabulary has no size cap.
    """
    char_to_id: dict[str, int] = {}
    for text in texts:
        for char in text:
            if char not in char_to_id:
                char_to_id[char] = len(char_to_id) + 1
    return Vocabulary(char_to_id)


class ClassIndex(Mapping[str, int]):
    """Read-only mapping from class name to its 0-based position."""

    def __init__(self, label_list: Sequence[str] | None = None) -> None:
        self._label_list = list(label_list) if label_list is not None else []
        # Later duplicates overwrite earlier ones.
        self._label_to_id = MappingProxyType(
            {label: idx for idx, label in enumerate(self._label_list)}
        )

    @classmethod
    def from_labels(cls, labels: Iterable[str]) -> "ClassIndex":
        return cls(list(labels))

    @property
    def label_list(self) -> list[str]:
        return list(self._label_list)

    @property
    def num_labels(self) -> int:
        return len(self._label_list)

    def __getitem__(self, label: str) -> int:
        return self._label_to_id[label]

    def __iter__(self) -> Iterator[str]:
        return iter(self._label_to_id)

    def __len__(self) -> int:
        return len(self._label_to_id)

    def __repr__(self) -> str:
        return f"ClassIndex(labels={self._label_list!r})"


def load_class_index(path: str | Path) -> ClassIndex:
    """Load one class name per line.

    Raises:
        OSError: If the file cannot be opened
    """
    return ClassIndex.from_labels(read_lines(path, strip_whitespace=False))
