"""
Shared test fixtures for sqlstruct.

Provides the sample SQL dump, parsed tables and configuration helpers
reused across test modules.
"""

import sys
from pathlib import Path

import pytest

# Ensure the project root is importable
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from sqlstruct.parser import parse_sql
from sqlstruct.settings import get_settings

# Path to sample SQL dump
SCHEMA_SQL = PROJECT_ROOT / "samples" / "schema.sql"

USERS_DDL = (
    "CREATE TABLE IF NOT EXISTS `users` (`id` bigint unsigned, `user_id` int, "
    "`name` varchar(255)) ENGINE=InnoDB;"
)


@pytest.fixture(scope="session")
def schema_sql_path() -> Path:
    """Path to the sample SQL dump."""
    assert SCHEMA_SQL.exists(), f"Sample SQL not found at {SCHEMA_SQL}"
    return SCHEMA_SQL


@pytest.fixture(scope="session")
def sample_tables(schema_sql_path):
    """Parse the sample dump once (session-scoped for speed)."""
    return parse_sql(schema_sql_path.read_bytes())


@pytest.fixture
def users_ddl() -> str:
    return USERS_DDL


@pytest.fixture
def write_config(tmp_path):
    """Write a sqlstruct.yaml into a temp dir and return the dir."""
    def _write(text: str) -> Path:
        config_dir = tmp_path / "config"
        config_dir.mkdir(exist_ok=True)
        (config_dir / "sqlstruct.yaml").write_text(text)
        return config_dir
    return _write


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Keep SQLSTRUCT_* settings from leaking between tests."""
    monkeypatch.delenv("SQLSTRUCT_CONFIG_DIR", raising=False)
    monkeypatch.delenv("SQLSTRUCT_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
