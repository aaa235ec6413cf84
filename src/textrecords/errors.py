"""Errors raised while parsing and encoding corpora."""

from __future__ import annotations

from pathlib import Path


class MalformedRecordError(ValueError):
    """A corpus line is missing a required field or delimiter."""

    def __init__(
        self,
        message: str,
        *,
        path: str | Path | None = None,
        line_number: int | None = None,
    ) -> None:
        self.path = Path(path) if path is not None else None
        self.line_number = line_number
        if self.path is not None:
            location = f"{self.path}:{line_number}" if line_number is not None else str(self.path)
            message = f"{location}: {message}"
        super().__init__(message)


class InvalidLabelError(ValueError):
    """A label is neither a non-negative integer nor a known class name."""

    def __init__(self, label: str, reason: str) -> None:
        self.label = label
        self.reason = reason
        super().__init__(f"invalid label {label!r}, error {reason}")
