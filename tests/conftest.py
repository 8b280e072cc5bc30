"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from profile_css.config import BuildConfig
from profile_css.errors import MinificationError
from profile_css.models import MinifierConfig
from profile_css.storage import InMemoryStorage

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Fake minifier engines
# ---------------------------------------------------------------------------


class CollapsingEngine:
    """Stand-in minifier: drops newlines and records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, MinifierConfig]] = []

    def transform(self, code: str, *, filename: str, options: MinifierConfig) -> str:
        self.calls.append((code, filename, options))
        return code.replace("\n", "")


class FailingEngine:
    def __init__(self, message: str = "Unexpected token '}'") -> None:
        self.message = message

    def transform(self, code: str, *, filename: str, options: MinifierConfig) -> str:
        raise MinificationError(self.message)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def build_config() -> BuildConfig:
    """Default configuration anchored at a fake project root."""
    return BuildConfig(root=Path("/project"))


@pytest.fixture
def memory_storage() -> InMemoryStorage:
    return InMemoryStorage(
        {
            "css/base.css": ".a{color:red}",
            "css/profile.css": ".b{margin:0}",
        }
    )


@pytest.fixture
def collapsing_engine() -> CollapsingEngine:
    return CollapsingEngine()


@pytest.fixture
def failing_engine() -> FailingEngine:
    return FailingEngine()
