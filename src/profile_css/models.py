from enum import Enum
from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, model_validator


class Severity(str, Enum):
    WARNING = "warning"
    ERROR = "error"


class Feature(str, Enum):
    VENDOR_PREFIXES = "vendor-prefixes"
    COMMENTS = "comments"


class BuildOutcome(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class _SizedText(_Frozen):
    text: str
    size_chars: int

    @model_validator(mode="after")
    def _check_size(self) -> Self:
        if self.size_chars != len(self.text):
            raise ValueError(f"size_chars={self.size_chars} does not match text length {len(self.text)}")
        return self

    @classmethod
    def from_text(cls, text: str) -> Self:
        return cls(text=text, size_chars=len(text))


class SourceDocument(_Frozen):
    identity: str
    text: str
    order: int


class AggregatedStylesheet(_SizedText):
    pass


class TransformResult(_SizedText):
    pass


class MinifierConfig(_Frozen):
    minify: bool = True
    preserve_features: frozenset[Feature] = frozenset({Feature.VENDOR_PREFIXES})


class ValidationIssue(_Frozen):
    severity: Severity
    message: str

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR


class BuildReport(_Frozen):
    source_count: int
    original_size_chars: int
    final_size_chars: int
    compression_ratio_percent: float
    issues: tuple[ValidationIssue, ...] = ()
    output_path: Path
    max_output_size: int

    @property
    def size_ceiling_exceeded(self) -> bool:
        return self.final_size_chars > self.max_output_size

    @property
    def has_errors(self) -> bool:
        return any(issue.is_error for issue in self.issues)

    @property
    def outcome(self) -> BuildOutcome:
        return BuildOutcome.FAILURE if self.has_errors else BuildOutcome.SUCCESS
