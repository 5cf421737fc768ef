"""
Pytest configuration and shared fixtures for the ProxySQL admin client tests

The store is an in-memory SQLite fake of the admin tables; each test gets
a fresh one. Tests against a live ProxySQL live in test_integration.py.
"""

import logging
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from proxysql_admin import ProxySQL
from proxysql_admin.database import SQLExecutor
from tests.fake_executor import SQLiteAdminExecutor


def pytest_configure(config):
    """
    Pytest hook called before test collection.
    """
    import os
    os.environ.setdefault('APP_ENV', 'test')
    logging.getLogger("proxysql_admin").setLevel(logging.DEBUG)


@pytest.fixture(scope="function")
def executor():
    """Fresh SQLite-backed admin tables."""
    fake = SQLiteAdminExecutor()
    yield fake
    fake.close()


@pytest.fixture(scope="function")
def conn(executor):
    """ProxySQL client over the fake admin tables, writer hostgroup 0, readers 1."""
    return ProxySQL(executor, writer_hostgroup=0, reader_hostgroup=1)


@pytest.fixture(scope="function")
def mock_executor():
    """Executor stub for counting calls and injecting failures."""
    return MagicMock(spec=SQLExecutor)


@pytest.fixture(scope="function")
def mock_conn(mock_executor):
    return ProxySQL(mock_executor)
