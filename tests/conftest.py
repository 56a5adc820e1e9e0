"""Pytest configuration and shared fixtures for scalr-client tests."""

import os

import pytest


def _drop_scalr_variables():
    for key in list(os.environ.keys()):
        if key.startswith("SCALR_"):
            del os.environ[key]


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Clear ``SCALR_*`` variables so the developer's environment cannot leak into tests.

    Variables a ``.env`` file loads during a test are dropped afterwards;
    monkeypatch then puts the original environment back.
    """
    for key in list(os.environ.keys()):
        if key.startswith("SCALR_"):
            monkeypatch.delenv(key, raising=False)

    yield

    _drop_scalr_variables()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run each test from an empty directory so no ``.env`` file is picked up."""
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture
def api():
    from scalr_client.testing import MockAPI

    return MockAPI()


@pytest.fixture
def no_sleep(monkeypatch):
    """Record retry delays instead of sleeping."""
    delays = []
    monkeypatch.setattr("scalr_client.transport.retry.time.sleep", delays.append)
    return delays
