"""Corpus adapters and line parsers."""

from textrecords.data.base import SPLITS, CorpusAdapter
from textrecords.data.classification import (
    ClassificationCorpus,
    ClassificationSample,
    parse_classification_line,
)
from textrecords.data.reader import read_lines
from textrecords.data.similarity import (
    SimilarityCorpus,
    SimilaritySample,
    parse_similarity_line,
)
from textrecords.data.tagging import (
    TaggingCorpus,
    TaggingSample,
    iter_tagging_blocks,
    parse_tagging_line,
)

__all__ = [
    "SPLITS",
    "CorpusAdapter",
    "ClassificationCorpus",
    "ClassificationSample",
    "SimilarityCorpus",
    "SimilaritySample",
    "TaggingCorpus",
    "TaggingSample",
    "iter_tagging_blocks",
    "parse_classification_line",
    "parse_similarity_line",
    "parse_tagging_line",
    "read_lines",
]
