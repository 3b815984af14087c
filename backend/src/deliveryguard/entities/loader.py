"""Load entity submissions from YAML or JSON files."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from deliveryguard.entities.types import SubmissionFormatError

logger = logging.getLogger(__name__)

SUBMISSION_SUFFIXES = (".yaml", ".yml", ".json")


@dataclass
class Submission:
    """One entity payload read from a submission document.

    Attributes:
        kind: Entity kind key from the document ("restaurant", "rider", ...)
        source: File the payload was read from
        index: Position within the kind's list (0 for a single object)
        payload: Raw camelCase payload, or None for an explicit null
    """

    kind: str
    source: Path
    index: int
    payload: dict[str, Any] | None

    @property
    def label(self) -> str:
        return f"{self.kind}[{self.index}] ({self.source.name})"


class SubmissionLoader:
    """Loads submissions from a single file or every submission file in a directory.

    Each document maps an entity kind to one payload, null, or a list of payloads:

        restaurant:
          name: Spice Route
          deliveryRadiusKm: 8
        rider:
          - name: Asha
          - name: Ravi
    """

    def __init__(self, path: Path):
        self.path = path
        self.submissions: list[Submission] = []

    def load_all(self) -> list[Submission]:
        """Load every submission under the configured path."""
        self.submissions = []
        for file_path in self._submission_files():
            self.submissions.extend(self._load_file(file_path))
        logger.debug("Loaded %d submission(s) from %s", len(self.submissions), self.path)
        return self.submissions

    def _submission_files(self) -> list[Path]:
        if self.path.is_dir():
            return sorted(
                p for p in self.path.iterdir()
                if p.is_file() and p.suffix.lower() in SUBMISSION_SUFFIXES
            )
        if not self.path.exists():
            raise SubmissionFormatError(f"Submission path does not exist: {self.path}")
        return [self.path]

    def _load_file(self, file_path: Path) -> list[Submission]:
        # JSON is a subset of YAML, so safe_load reads both
        try:
            with open(file_path, "rb") as f:
                document = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise SubmissionFormatError(f"YAML parse error: {exc}", str(file_path)) from exc

        if document is None:
            logger.warning("Skipping empty submission file %s", file_path)
            return []
        if not isinstance(document, dict):
            raise SubmissionFormatError(
                "expected a mapping of entity kind to payload", str(file_path)
            )

        submissions = []
        for kind, value in document.items():
            kind = str(kind).lower()
            payloads = value if isinstance(value, list) else [value]
            for index, payload in enumerate(payloads):
                if payload is not None and not isinstance(payload, dict):
                    raise SubmissionFormatError(
                        "expected an object or null", f"{file_path}: {kind}[{index}]"
                    )
                submissions.append(
                    Submission(kind=kind, source=file_path, index=index, payload=payload)
                )
        return submissions
