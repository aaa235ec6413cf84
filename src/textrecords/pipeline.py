"""Pipeline that turns a classification corpus into fixed-width records."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, NamedTuple

from textrecords.config import DataConfig
from textrecords.data.classification import ClassificationCorpus
from textrecords.records import ClassifierRecord, encode_samples
from textrecords.vocab import ClassIndex, Vocabulary, build_vocabulary, load_class_index

logger = logging.getLogger(__name__)


class BuildResult(NamedTuple):
    train: list[ClassifierRecord]
    dev: list[ClassifierRecord]
    test: list[ClassifierRecord]
    vocabulary: Vocabulary

    def splits(self) -> dict[str, list[ClassifierRecord]]:
        return {"train": self.train, "dev": self.dev, "test": self.test}

    def summary(self) -> dict[str, int]:
        return {
            "train": len(self.train),
            "dev": len(self.dev),
            "test": len(self.test),
            "vocab_size": len(self.vocabulary),
        }


class ClassificationPipeline:
    """Build train/dev/test records for one dataset directory.

    Stages run strictly in order: class index, training samples, vocabulary,
    then encoding of each split. The vocabulary is final before any record is
    encoded and only the training split contributes to it.
    """

    def __init__(self, dataset_dir: str | Path, config: DataConfig | None = None):
        """Initialize pipeline.

        Args:
            dataset_dir: Directory holding the split and class files
            config: Encoding configuration, defaults to ``DataConfig()``
        """
        self.config = config if config is not None else DataConfig()
        self.corpus = ClassificationCorpus(dataset_dir, self.config)

    def run(self) -> BuildResult:
        """Run the build.

        Returns:
            Records for each split and the vocabulary built from train

        Raises:
            OSError: If a split or the class file cannot be opened
            MalformedRecordError: If a line has no tab
            InvalidLabelError: If a label cannot be resolved
            NotImplementedError: If the vocabulary source is an external file
        """
        self._check_vocab_source()
        max_length = self.config.max_length

        class_index = load_class_index(self.corpus.class_path)
        logger.info(f"Loaded {class_index.num_labels} classes from {self.corpus.class_path}")

        train_samples = self.corpus.read_split("train")
        vocabulary = build_vocabulary(sample.text for sample in train_samples)
        logger.info(f"Built vocabulary of {len(vocabulary)} characters from {len(train_samples)} training samples")

        train_records = encode_samples(train_samples, vocabulary, class_index, max_length)
        del train_samples

        dev_records = self._encode_split("dev", vocabulary, class_index)
        test_records = self._encode_split("test", vocabulary, class_index)

        result = BuildResult(train_records, dev_records, test_records, vocabulary)
        logger.info(f"Build complete: {result.summary()}")
        return result

    def _encode_split(
        self,
        split: str,
        vocabulary: Vocabulary,
        class_index: ClassIndex,
    ) -> list[ClassifierRecord]:
        samples = self.corpus.read_split(split)
        return encode_samples(samples, vocabulary, class_index, self.config.max_length)

    def _check_vocab_source(self) -> None:
        source = self.config.vocab_source
        if source.kind == "none":
            return
        raise NotImplementedError(
            f"Vocabulary source '{source.kind}' ({self.corpus.vocab_path}) is not supported yet; "
            "use kind 'none' to derive the vocabulary from the training split"
        )


def build(
    dataset_dir: str | Path,
    max_length: int | None = None,
    config: DataConfig | None = None,
) -> BuildResult:
    """Build records for ``dataset_dir``.

    ``max_length`` overrides ``config.max_length`` when both are given; the
    passed config is not modified.
    """
    config = config if config is not None else DataConfig()
    if max_length is not None:
        config = _with_overrides(config, max_length=max_length)
    return ClassificationPipeline(dataset_dir, config).run()


def _with_overrides(config: DataConfig, **overrides: Any) -> DataConfig:
    # model_copy skips validation, so rebuild through the constructor.
    return DataConfig(**{**config.model_dump(), **overrides})
