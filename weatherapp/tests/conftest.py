"""Shared test fixtures."""

import json
import sqlite3
from pathlib import Path

import pytest
import yaml

from weatherapp.storage.database import connect, run_migrations
from weatherapp.storage.preference_store import PreferenceStore


@pytest.fixture
def db(tmp_path: Path) -> sqlite3.Connection:
    """Create a migrated temporary SQLite database."""
    conn = connect(tmp_path / "test.db")
    run_migrations(conn)
    yield conn
    conn.close()


@pytest.fixture
def store(db: sqlite3.Connection) -> PreferenceStore:
    return PreferenceStore(db)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def owm_payload(fixtures_dir: Path) -> dict:
    """Ten 3-hourly Narva entries: four on 2026-02-11 UTC, six on 2026-02-12 UTC."""
    with open(fixtures_dir / "owm_forecast_narva.json") as f:
        return json.load(f)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"base_url": "https://test-owm.example.com", "api_key": "test-key"},
        "storage": {"db_path": str(tmp_path / "prefs.db")},
        "display": {"hourly_window": 4},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
