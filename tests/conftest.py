"""Pytest fixtures for cwdline tests."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from hypothesis import Phase, Verbosity, settings

from cwdline.config import CwdConfig, ThemeConfig
from cwdline.cwd import SegmentCollector
from cwdline.environment import PathEnvironment

_TEST_BASE_DIR = Path(tempfile.mkdtemp(prefix="cwdline-tests-"))
os.environ["CWDLINE_CONFIG_DIR"] = str(_TEST_BASE_DIR / "config")

if TYPE_CHECKING:
    from collections.abc import Callable


settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=20,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def never_exists(*parts: str) -> bool:
    """Probe for tests that must not detect any project root."""
    del parts
    return False


@pytest.fixture
def no_probe() -> Callable[..., bool]:
    return never_exists


@pytest.fixture
def home_env() -> PathEnvironment:
    """Environment with ``/home/u`` as home and no workspace root."""
    return PathEnvironment(home="/home/u", gopath="", pwd="/home/u")


@pytest.fixture
def theme() -> ThemeConfig:
    return ThemeConfig()


@pytest.fixture
def default_cwd_config() -> CwdConfig:
    return CwdConfig(mode="default", max_depth=10)


@pytest.fixture
def collector() -> SegmentCollector:
    return SegmentCollector()


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Create ``<tmp>/<name>`` with a ``.git`` directory plus the given marker entries.

    Markers ending in ``/`` are created as directories, others as empty files.
    """

    def _make(name: str = "proj", *markers: str) -> Path:
        root = tmp_path / name
        (root / ".git").mkdir(parents=True)
        for marker in markers:
            if marker.endswith("/"):
                (root / marker.rstrip("/")).mkdir()
            else:
                (root / marker).write_text("", encoding="utf-8")
        return root

    return _make
