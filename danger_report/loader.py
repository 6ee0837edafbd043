"""Load review results documents from disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from danger_report.schema import DangerResults

logger = logging.getLogger(__name__)


class ResultsLoadError(RuntimeError):
    """Raised when a results file cannot be read."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


class ResultsFormatError(ValueError):
    """Raised when a results document is not valid JSON or fails validation."""


def parse_results(text: str) -> DangerResults:
    """Validate a results JSON document into `DangerResults`."""
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as error:
        raise ResultsFormatError(f"Results document is not valid JSON: {error}") from error

    if not isinstance(payload, dict):
        raise ResultsFormatError(
            f"Results document must be a JSON object, got {type(payload).__name__}."
        )

    try:
        return DangerResults.model_validate(payload)
    except ValidationError as error:
        raise ResultsFormatError(f"Results document failed validation: {error}") from error


def load_results(path: Path) -> DangerResults:
    """Read and validate a UTF-8 results JSON file."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as error:
        raise ResultsLoadError(
            f"Unable to read results file '{path}': {error}", path=path
        ) from error

    results = parse_results(text)
    logger.debug(
        "Loaded results path=%s fails=%d warnings=%d messages=%d markdowns=%d",
        path,
        len(results.fails),
        len(results.warnings),
        len(results.messages),
        len(results.markdowns),
    )
    return results
