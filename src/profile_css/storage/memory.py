from collections.abc import Sequence
from pathlib import PurePosixPath

from profile_css.errors import SourceReadError
from profile_css.models import SourceDocument


class InMemoryStorage:
    """Dictionary-backed ``BuildStorage`` for tests."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files: dict[str, str] = dict(files or {})
        self.directories: set[str] = set()
        self.writes: list[str] = []

    def read_sources(self, identities: Sequence[str]) -> list[SourceDocument]:
        documents = []
        for order, identity in enumerate(identities):
            if identity not in self.files:
                raise SourceReadError(identity, "no such file")
            documents.append(SourceDocument(identity=identity, text=self.files[identity], order=order))
        return documents

    def ensure_directory(self, directory: str) -> None:
        self.directories.add(directory)

    def write_output(self, identity: str, text: str) -> None:
        parent = str(PurePosixPath(identity).parent)
        if parent != "." and parent not in self.directories:
            raise FileNotFoundError(f"Directory does not exist: {parent}")
        self.files[identity] = text
        self.writes.append(identity)
