"""Registry for corpus formats."""

from typing import Type

from textrecords.data.base import CorpusAdapter


_formats: dict[str, Type[CorpusAdapter]] = {}


def register_format(name: str, adapter_class: Type[CorpusAdapter]) -> None:
    """Register a corpus adapter class.

    Args:
        name: Format name
        adapter_class: CorpusAdapter class
    """
    _formats[name] = adapter_class


def get_format(name: str) -> Type[CorpusAdapter]:
    """Get a corpus adapter class by format name.

    Args:
        name: Format name

    Returns:
        CorpusAdapter class

    Raises:
        KeyError: If format not found
    """
    if name not in _formats:
        raise KeyError(f"Format '{name}' not found. Available: {list(_formats.keys())}")
    return _formats[name]


def available_formats() -> list[str]:
    return list(_formats.keys())
