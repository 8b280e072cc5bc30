from collections.abc import Sequence
from typing import Protocol

from profile_css.models import SourceDocument


class SourceReader(Protocol):
    def read_sources(self, identities: Sequence[str]) -> list[SourceDocument]: ...


class OutputStore(Protocol):
    def ensure_directory(self, directory: str) -> None: ...

    def write_output(self, identity: str, text: str) -> None: ...


class BuildStorage(SourceReader, OutputStore, Protocol): ...
