"""Base corpus adapter abstraction.

A CorpusAdapter resolves the split files of a dataset directory and parses
them into samples of one line format.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from textrecords.config import DataConfig


SPLITS: tuple[str, ...] = ("train", "dev", "test")


class CorpusAdapter(ABC):
    """Base class for all corpus adapters.

    A corpus adapter:
    - Resolves train/dev/test file paths inside a dataset directory
    - Parses each split into format-specific samples
    """

    def __init__(self, dataset_dir: str | Path, config: DataConfig | None = None) -> None:
        self.dataset_dir = Path(dataset_dir)
        self.config = config if config is not None else DataConfig()

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the corpus format name."""
        pass

    @abstractmethod
    def read_split(self, split: str) -> list[Any]:
        """Parse one split into samples.

        Args:
            split: One of ``train``, ``dev`` or ``test``

        Returns:
            Samples in file order
        """
        pass

    def split_path(self, split: str) -> Path:
        """Return the file backing ``split``.

        Raises:
            ValueError: If the split name is unknown
        """
        file_names = {
            "train": self.config.train_file,
            "dev": self.config.dev_file,
            "test": self.config.test_file,
        }
        if split not in file_names:
            raise ValueError(f"Unknown split '{split}'. Available: {list(SPLITS)}")
        return self.dataset_dir / file_names[split]

    def split_paths(self) -> dict[str, Path]:
        return {split: self.split_path(split) for split in SPLITS}

    def load_splits(self) -> dict[str, list[Any]]:
        """Parse every split, in train/dev/test order."""
        return {split: self.read_split(split) for split in SPLITS}
