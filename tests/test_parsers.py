"""Tests for classification, tagging and similarity parsers."""

from pathlib import Path

import pytest

from textrecords.config import DataConfig
from textrecords.data import (
    ClassificationCorpus,
    ClassificationSample,
    SimilarityCorpus,
    SimilaritySample,
    TaggingCorpus,
    iter_tagging_blocks,
    parse_classification_line,
    parse_similarity_line,
    parse_tagging_line,
)
from textrecords.errors import MalformedRecordError

from conftest import write_lines


class TestClassificationLine:
    """Test parse_classification_line."""

    def test_splits_on_first_tab(self):
        """Test only the first tab separates text from label."""
        sample = parse_classification_line("hello\tworld\textra")

        assert sample == ClassificationSample(text="hello", label="world\textra")

    def test_fields_are_not_trimmed(self):
        """Test spaces around the fields survive."""
        sample = parse_classification_line(" a b \t x")

        assert sample.text == " a b "
        assert sample.label == " x"

    def test_empty_text_allowed(self):
        """Test a line starting with a tab yields an empty text."""
        assert parse_classification_line("\t3") == ClassificationSample("", "3")

    def test_missing_tab_raises(self):
        """Test a line without a tab is rejected."""
        with pytest.raises(MalformedRecordError, match="invalid classifier line"):
            parse_classification_line("no delimiter here")

    def test_error_names_location(self):
        """Test the error message carries path and line number."""
        with pytest.raises(MalformedRecordError) as excinfo:
            parse_classification_line("oops", path="train.txt", line_number=7)

        assert excinfo.value.line_number == 7
        assert "train.txt:7" in str(excinfo.value)


class TestClassificationCorpus:
    """Test ClassificationCorpus path resolution and split reading."""

    def test_default_paths(self, tmp_path: Path):
        """Test each split resolves to its own file."""
        corpus = ClassificationCorpus(tmp_path)
        paths = corpus.split_paths()

        assert paths["train"] == tmp_path / "train.txt"
        assert paths["dev"] == tmp_path / "dev.txt"
        assert paths["test"] == tmp_path / "test.txt"
        assert corpus.class_path == tmp_path / "class.txt"
        assert corpus.vocab_path is None

    def test_test_file_can_point_at_dev(self, tmp_path: Path):
        """Test the test split can be configured to reuse dev.txt."""
        corpus = ClassificationCorpus(tmp_path, DataConfig(test_file="dev.txt"))

        assert corpus.split_path("test") == tmp_path / "dev.txt"

    def test_unknown_split(self, tmp_path: Path):
        """Test asking for an unknown split fails."""
        with pytest.raises(ValueError, match="Unknown split"):
            ClassificationCorpus(tmp_path).split_path("validation")

    def test_read_split(self, make_corpus):
        """Test samples are read in file order."""
        dataset_dir = make_corpus(train=["ab\tc", "ba\td"])

        samples = ClassificationCorpus(dataset_dir).read_split("train")

        assert samples == [ClassificationSample("ab", "c"), ClassificationSample("ba", "d")]

    def test_read_split_reports_bad_line(self, make_corpus):
        """Test a malformed line aborts with its line number."""
        dataset_dir = make_corpus(train=["ab\tc", "broken"])

        with pytest.raises(MalformedRecordError) as excinfo:
            ClassificationCorpus(dataset_dir).read_split("train")

        assert excinfo.value.line_number == 2

    def test_read_classes(self, make_corpus):
        """Test class names come back in file order."""
        dataset_dir = make_corpus(train=[], classes=["sport", "tech"])

        assert ClassificationCorpus(dataset_dir).read_classes() == ["sport", "tech"]


class TestTagging:
    """Test tagging block parsing."""

    def test_parse_line(self):
        """Test a token line splits on its first tab."""
        assert parse_tagging_line("Paris\tB-LOC") == ("Paris", "B-LOC")

    def test_parse_line_without_tab(self):
        """Test a token line without a tab is rejected."""
        with pytest.raises(MalformedRecordError, match="invalid tagging line"):
            parse_tagging_line("Paris")

    def test_blocks_split_on_blank_lines(self):
        """Test blank lines separate samples and EOF closes the last one."""
        lines = ["I\tO", "like\tO", "", "", "Paris\tB-LOC"]

        samples = list(iter_tagging_blocks(lines))

        assert len(samples) == 2, "Consecutive blank lines should not create empty samples"
        assert samples[0].tokens == ["I", "like"]
        assert samples[1].items == [("Paris", "B-LOC")]

    def test_corpus_reads_splits(self, tmp_path: Path):
        """Test TaggingCorpus loads all three splits."""
        write_lines(tmp_path / "train.txt", ["a\tB-X", "b\tI-X", "", "c\tO"])
        write_lines(tmp_path / "dev.txt", ["d\tO"])
        write_lines(tmp_path / "test.txt", [])

        splits = TaggingCorpus(tmp_path).load_splits()

        assert [len(splits[name]) for name in ("train", "dev", "test")] == [2, 1, 0]
        assert TaggingCorpus.tag_list(splits["train"]) == ["B-X", "I-X", "O"]


class TestSimilarity:
    """Test similarity line parsing."""

    def test_parse_similar(self):
        """Test a non-zero flag marks the pair as similar."""
        sample = parse_similarity_line("a cat\ta feline\t1")

        assert sample == SimilaritySample("a cat", "a feline", True)

    def test_parse_dissimilar(self):
        """Test a zero flag marks the pair as not similar."""
        assert parse_similarity_line("x\ty\t0").similar is False

    def test_missing_field(self):
        """Test two fields are not enough."""
        with pytest.raises(MalformedRecordError, match="invalid similarity sample"):
            parse_similarity_line("x\ty")

    def test_bad_flag(self):
        """Test a non-numeric flag is rejected."""
        with pytest.raises(MalformedRecordError, match="invalid similarity tag"):
            parse_similarity_line("x\ty\tyes")

    def test_corpus_reads_split(self, tmp_path: Path):
        """Test SimilarityCorpus parses one split with line numbers."""
        write_lines(tmp_path / "train.txt", ["a\tb\t1", "c\td\t0"])

        samples = SimilarityCorpus(tmp_path).read_split("train")

        assert [sample.similar for sample in samples] == [True, False]
