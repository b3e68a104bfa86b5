"""Pytest configuration and shared fixtures for shelf layout tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from shelfie.domain import LayoutConfig, PhysicalItem

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding the JSON configuration fixtures."""
    return FIXTURES_PATH


@pytest.fixture
def still_config() -> LayoutConfig:
    """Layout config without jitter, so x positions are exact."""
    return LayoutConfig(jitter_x=0.0)


@pytest.fixture
def bookshelf() -> list[PhysicalItem]:
    """A dozen books of mixed formats, in millimetres."""
    return [
        PhysicalItem("dune", 108, 175, 38),
        PhysicalItem("sapiens", 153, 234, 33),
        PhysicalItem("atlas", 250, 320, 25),
        PhysicalItem("haiku", 105, 148, 8),
        PhysicalItem("sicp", 178, 229, 35),
        PhysicalItem("comic", 170, 260, 6),
        PhysicalItem("essays", 129, 198, 21),
        PhysicalItem("cookbook", 195, 255, 28),
        PhysicalItem("poems", 111, 178, 12),
        PhysicalItem("novel", 135, 216, 30),
        PhysicalItem("guide", 120, 190, 15),
        PhysicalItem("annual", 230, 300, 40),
    ]
