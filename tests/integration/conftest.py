"""Fixtures for tests that run the real engine against the filesystem."""

from pathlib import Path

import pytest

from profile_css.config import BuildConfig
from profile_css.engine import CssutilsMinifier


@pytest.fixture
def engine() -> CssutilsMinifier:
    return CssutilsMinifier()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    (tmp_path / "css").mkdir()
    return tmp_path


@pytest.fixture
def project_config(project: Path) -> BuildConfig:
    return BuildConfig.for_root(project)
