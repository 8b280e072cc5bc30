import logging
from collections.abc import Sequence
from pathlib import Path

from profile_css.errors import SourceReadError
from profile_css.models import SourceDocument

logger = logging.getLogger(__name__)


class FileSystemStorage:
    """Read sources from and publish output to paths under ``root``.

    Implements the ``BuildStorage`` protocol.
    """

    def __init__(self, root: str | Path = ".") -> None:
        self._root = Path(root)

    def _resolve(self, identity: str) -> Path:
        return self._root / identity

    def read_sources(self, identities: Sequence[str]) -> list[SourceDocument]:
        documents = []
        for order, identity in enumerate(identities):
            try:
                text = self._resolve(identity).read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise SourceReadError(identity, str(exc)) from exc
            logger.debug("Read %s (%d chars)", identity, len(text))
            documents.append(SourceDocument(identity=identity, text=text, order=order))
        return documents

    def ensure_directory(self, directory: str) -> None:
        self._resolve(directory).mkdir(parents=True, exist_ok=True)

    def write_output(self, identity: str, text: str) -> None:
        self._resolve(identity).write_text(text, encoding="utf-8")
