"""
Pytest configuration and fixtures for booking-enrichment tests

This module provides shared fixtures for unit, integration, and E2E tests.
"""
import os
from pathlib import Path

import pytest

from src.core.config import ENV_OVERRIDES, PipelineConfig
from src.core.models import Hotel, Room
from src.observability import logger as logger_module
from src.reference import ReferenceStore


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't touch the file system beyond tmp_path"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests that run the pipeline on fixture files"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests that drive the command-line interface"
    )


# =======================
# ENVIRONMENT FIXTURES
# =======================

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """
    Isolate tests from pipeline settings in the caller's environment and
    from logging settings chosen by earlier tests

    setenv first so monkeypatch restores the original state afterwards.
    """
    for name in ENV_OVERRIDES:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setattr(logger_module, "_settings", {})


# =======================
# FILE FIXTURES
# =======================

@pytest.fixture(scope="session")
def test_data_dir() -> Path:
    """
    Get path to test data fixtures directory

    Returns:
        Path to tests/fixtures directory
    """
    return Path(os.path.dirname(__file__)) / "fixtures"


@pytest.fixture
def write_file(tmp_path):
    """
    Write a text file under tmp_path

    Returns:
        Function (name, content) -> Path
    """
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def fixture_config(test_data_dir, tmp_path) -> PipelineConfig:
    """
    Pipeline configuration reading the fixture files and writing under tmp_path

    Returns:
        PipelineConfig
    """
    return PipelineConfig(
        input_path=str(test_data_dir / "input.csv"),
        output_path=str(tmp_path / "output.csv"),
        rooms_path=str(test_data_dir / "room_names.csv"),
        hotels_path=str(test_data_dir / "hotels.json"),
    )


# =======================
# REFERENCE DATA FIXTURES
# =======================

@pytest.fixture
def berlin_hotel() -> Hotel:
    return Hotel(
        id="BER00002",
        city_code="BER",
        name="Crowne Plaza Berlin City Centre",
        category=4.0,
        country_code="DE",
        city="Berlin",
    )


@pytest.fixture
def berlin_room() -> Room:
    return Room(
        hotel_code="BER00002",
        source="IHG",
        room_name="Einzelzimmer Superior",
        room_code="BER898",
    )


@pytest.fixture
def rooms_store(berlin_room) -> ReferenceStore[str, Room]:
    """Rooms store holding berlin_room"""
    store: ReferenceStore[str, Room] = ReferenceStore("rooms")
    store.import_from("memory", lambda path: [(berlin_room.key(), berlin_room)])
    return store


@pytest.fixture
def hotels_store(berlin_hotel) -> ReferenceStore[str, Hotel]:
    """Hotels store holding berlin_hotel"""
    store: ReferenceStore[str, Hotel] = ReferenceStore("hotels")
    store.import_from("memory", lambda path: [(berlin_hotel.id, berlin_hotel)])
    return store


@pytest.fixture
def input_row() -> dict[str, str]:
    """Raw input row matching berlin_room and berlin_hotel"""
    return {
        "city_code": "BER",
        "hotel_code": "BER00002",
        "room_type": "EZ",
        "room_code": "BER898",
        "meal": "F",
        "checkin": "20190730",
        "adults": "2",
        "children": "1",
        "price": "90.00",
        "source": "IHG",
    }
