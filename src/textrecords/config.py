"""Configuration classes for dataset builds."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator


class VocabSource(BaseModel):
    """Where the character vocabulary comes from.

    ``none`` derives the vocabulary from the training split. ``vocab`` and
    ``embedding`` point at an external file relative to the dataset directory.
    """

    model_config = {"frozen": True}

    kind: Literal["none", "vocab", "embedding"] = Field(default="none", description="Vocabulary source type")
    path: str | None = Field(default=None, description="Vocabulary or embedding file, relative to the dataset directory")

    @model_validator(mode="after")
    def _check_path(self) -> "VocabSource":
        if self.kind == "none" and self.path is not None:
            raise ValueError("vocab source 'none' does not take a path")
        if self.kind != "none" and not self.path:
            raise ValueError(f"vocab source '{self.kind}' requires a path")
        return self

    def resolve(self, dataset_dir: Path) -> Path | None:
        if self.path is None:
            return None
        return Path(dataset_dir) / self.path


class DataConfig(BaseModel):
    """Per-build encoding configuration."""

    model_config = {"frozen": True}

    unk_token: str = Field(default="<UNK>", description="Label for unknown characters (id 0)")
    pad_token: str = Field(default="<PAD>", description="Label for padding positions (id 0)")
    vocab_source: VocabSource = Field(default_factory=VocabSource, description="Vocabulary source")
    max_length: int = Field(default=32, gt=0, description="Fixed length of every encoded sequence")

    train_file: str = Field(default="train.txt", description="Training split file name")
    dev_file: str = Field(default="dev.txt", description="Dev split file name")
    test_file: str = Field(default="test.txt", description="Test split file name")
    class_file: str = Field(default="class.txt", description="Class list file name")


class BuildConfig(BaseModel):
    """Top-level configuration, usually loaded from YAML by the CLI."""

    dataset_dir: str = Field(..., description="Directory holding the split files")
    format: str = Field(default="classification", description="Corpus format name")
    data: DataConfig = Field(default_factory=DataConfig, description="Encoding configuration")
