"""textrecords: encode labeled text corpora into fixed-width integer records."""

from textrecords.config import BuildConfig, DataConfig, VocabSource
from textrecords.data.base import CorpusAdapter
from textrecords.errors import InvalidLabelError, MalformedRecordError
from textrecords.pipeline import BuildResult, ClassificationPipeline, build
from textrecords.records import ClassifierRecord
from textrecords.registry import available_formats, get_format, register_format
from textrecords.vocab import ClassIndex, Vocabulary

# Import and register components
from textrecords import data  # noqa: F401

# Register all components
register_format("classification", data.ClassificationCorpus)
register_format("tagging", data.TaggingCorpus)
register_format("similarity", data.SimilarityCorpus)

__all__ = [
    "BuildConfig",
    "BuildResult",
    "ClassIndex",
    "ClassificationPipeline",
    "ClassifierRecord",
    "CorpusAdapter",
    "DataConfig",
    "InvalidLabelError",
    "MalformedRecordError",
    "VocabSource",
    "Vocabulary",
    "available_formats",
    "build",
    "get_format",
    "register_format",
]
