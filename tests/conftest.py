"""Root test configuration: isolate each test from ambient config and env vars"""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run every test from an empty directory with no LEYPUB_* variables set."""
    for name in list(os.environ):
        if name.startswith("LEYPUB_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
