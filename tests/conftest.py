"""Shared pytest fixtures."""

from pathlib import Path

import pytest

from puzzle_solver.config.config_manager import CONFIG_DIR_ENV, reset_config

PROJECT_CONF_DIR = Path(__file__).parent.parent / "conf"


@pytest.fixture(autouse=True)
def clean_global_config():
    """Keep a configuration loaded by one test from leaking into the next."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def project_conf(monkeypatch):
    """Point the default configuration directory at the project's conf/."""
    monkeypatch.setenv(CONFIG_DIR_ENV, str(PROJECT_CONF_DIR))
    return PROJECT_CONF_DIR
