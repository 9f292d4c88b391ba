"""Shared test fixtures for the pattern catalog test suite."""

import logging
import os
import sys

import pytest
import yaml

# Add parent directory to path so we can import lifetime modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lifetime import config as app_config
from lifetime.core.pattern_system import DemoRegistry, registry
from lifetime.db import close_db, init_db

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEMOS_CONFIG = os.path.join(PROJECT_ROOT, "demos_config.yaml")


@pytest.fixture
def demo_registry():
    """A fresh registry, independent of the global one."""
    return DemoRegistry()


@pytest.fixture
def global_registry():
    """The global registry, emptied before and after the test."""
    registry.clear()
    yield registry
    registry.clear()


@pytest.fixture
def config_file(tmp_path):
    """Write a config.yaml that keeps logs and data inside tmp_path."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    path = config_dir / "config.yaml"
    path.write_text(yaml.safe_dump({
        "logging": {"level": "WARNING", "file": "logs/test.log"},
        "database": {"path": "data/test.db"},
        "catalog": {"demos_config": DEMOS_CONFIG},
    }))

    yield path

    app_config.reset_config()


@pytest.fixture
def restore_logging():
    """Undo the root logger changes made by the client's setup_logging()."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level

    yield

    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def test_db(tmp_path):
    """Create a temporary test database."""
    db_path = str(tmp_path / "catalog.db")

    init_db(db_path)

    yield db_path

    close_db()


@pytest.fixture
def reset_singleton():
    """Forget the LoadBalancer instance before and after the test."""
    from lifetime.patterns.singleton.load_balancer import LoadBalancer

    LoadBalancer._instance = None
    yield LoadBalancer
    LoadBalancer._instance = None


@pytest.fixture
def demos_config():
    """Path of the shipped demos_config.yaml."""
    return DEMOS_CONFIG
