"""Fixed-width classification records and the encoder that produces them."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

import numpy as np
from datasets import Dataset

from textrecords.data.classification import ClassificationSample
from textrecords.errors import InvalidLabelError
from textrecords.vocab import UNKNOWN_ID, Vocabulary

logger = logging.getLogger(__name__)

_UNSIGNED_INT = re.compile(r"\+?[0-9]+")
_MAX_LABEL_ID = 2**64 - 1


@dataclass(frozen=True)
class ClassifierRecord:
    """``max_length`` word ids plus one label id."""

    word_ids: tuple[int, ...]
    label_id: int

    def __len__(self) -> int:
        return len(self.word_ids)


def fit_to_length(word_ids: Sequence[int], max_length: int) -> list[int]:
    """Right-pad with ``0`` or keep the first ``max_length`` ids."""
    if max_length <= 0:
        raise ValueError(f"max_length must be positive, got {max_length}")
    fitted = list(word_ids[:max_length])
    fitted.extend([UNKNOWN_ID] * (max_length - len(fitted)))
    return fitted


def encode_text(text: str, vocabulary: Vocabulary) -> list[int]:
    return vocabulary.encode(text)


def parse_label_id(label: str) -> int:
    """Parse a non-negative decimal integer.

    Accepts ASCII digits with an optional leading ``+`` and nothing else, so
    whitespace, signs other than ``+`` and underscores all fail. Values must
    fit in an unsigned 64-bit integer.

    Raises:
        ValueError: With a short diagnostic when ``label`` is not a number
    """
    if not label:
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED_INT.fullmatch(label):
        raise ValueError("invalid digit found in string")
    value = int(label)
    if value > _MAX_LABEL_ID:
        raise ValueError("number too large to fit in target type")
    return value


def resolve_label(label: str, class_index: Mapping[str, int]) -> int:
    """Resolve a raw label to its id.

    A numeric label always wins, even if a class of the same name exists.
    Otherwise the label is looked up by name in ``class_index``.

    Raises:
        InvalidLabelError: If the label is neither numeric nor a known class
    """
    try:
        return parse_label_id(label)
    except ValueError as e:
        logger.debug(f"num {label!r} parse error {e}")
        if label in class_index:
            return class_index[label]
        raise InvalidLabelError(label, str(e)) from e


def encode_sample(
    sample: ClassificationSample,
    vocabulary: Vocabulary,
    class_index: Mapping[str, int],
    max_length: int,
) -> ClassifierRecord:
    word_ids = fit_to_length(encode_text(sample.text, vocabulary), max_length)
    label_id = resolve_label(sample.label, class_index)
    return ClassifierRecord(word_ids=tuple(word_ids), label_id=label_id)


def encode_samples(
    samples: Iterable[ClassificationSample],
    vocabulary: Vocabulary,
    class_index: Mapping[str, int],
    max_length: int,
) -> list[ClassifierRecord]:
    """Encode samples in order with a shared, read-only vocabulary."""
    return [
        encode_sample(sample, vocabulary, class_index, max_length)
        for sample in samples
    ]


def records_to_arrays(
    records: Sequence[ClassifierRecord],
    max_length: int | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Stack records into ``(word_ids, labels)`` int64 arrays.

    ``max_length`` is only needed to shape the array of an empty split.
    """
    if not records:
        width = max_length if max_length is not None else 0
        return np.zeros((0, width), dtype=np.int64), np.zeros((0,), dtype=np.int64)

    word_ids = np.array([record.word_ids for record in records], dtype=np.int64)
    labels = np.array([record.label_id for record in records], dtype=np.int64)
    return word_ids, labels


def records_to_dataset(records: Sequence[ClassifierRecord]) -> Dataset:
    """Wrap records in an in-memory Hugging Face dataset."""
    dataset = Dataset.from_dict(
        {
            "word_ids": [list(record.word_ids) for record in records],
            "labels": [record.label_id for record in records],
        }
    )
    dataset.set_format(type="python")
    return dataset
