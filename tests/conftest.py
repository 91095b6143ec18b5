"""Root test configuration: environment and logger isolation"""

import logging
import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop MDXNAME_* env vars so host settings never leak into tests."""
    for name in list(os.environ):
        if name.startswith("MDXNAME_"):
            monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def reset_logger():
    """Remove handlers bound to CliRunner's temporary streams after each test."""
    yield
    logging.getLogger("mdxname").handlers.clear()
