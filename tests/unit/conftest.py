"""
Pytest configuration for unit tests.

Provides fixtures that apply to all unit tests.
"""

import logging
import os

import pytest


@pytest.fixture(autouse=True, scope="function")
def isolate_settings(monkeypatch, tmp_path):
    """
    Run every test with default settings.

    - No XMLTRACT_* variables from the developer's environment
    - Working directory without .env or config/xmltract.yaml
    - Settings singleton dropped before and after the test
    """
    from xmltract.config import reset_settings

    for key in list(os.environ):
        if key.upper().startswith('XMLTRACT_'):
            monkeypatch.delenv(key, raising=False)

    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True, scope="function")
def reset_package_logger():
    """Undo handlers installed by setup_logging() (CLI tests)."""
    _reset_package_logger()
    yield
    _reset_package_logger()


@pytest.fixture
def write_xml(tmp_path):
    """Write an XML document to a file under tmp_path and return its path."""

    def _write(name: str, content: str, encoding: str = 'utf-8'):
        path = tmp_path / name
        path.write_bytes(content.encode(encoding))
        return path

    return _write


def _reset_package_logger():
    package_logger = logging.getLogger('xmltract')
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
