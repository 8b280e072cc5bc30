from typing import Protocol

from profile_css.models import MinifierConfig


class MinifierEngine(Protocol):
    def transform(self, code: str, *, filename: str, options: MinifierConfig) -> str: ...
