"""Tests for version and User-Agent helpers."""

import pytest

from scalr_client.version import PRODUCT, __version__, user_agent, user_agent_with_app


@pytest.mark.unit
def test_version_is_exported_from_package():
    import scalr_client

    assert scalr_client.__version__ == __version__


@pytest.mark.unit
def test_user_agent_names_product_and_python():
    agent = user_agent()

    assert agent.startswith(f"{PRODUCT}/{__version__} (Python ")


@pytest.mark.unit
def test_user_agent_with_app_prefixes_application():
    agent = user_agent_with_app("terraform-provider-scalr", "v3.9.0")

    assert agent == f"terraform-provider-scalr/v3.9.0 {user_agent()}"


@pytest.mark.unit
def test_user_agent_with_app_without_version():
    assert user_agent_with_app("my-tool").startswith(f"my-tool {PRODUCT}/")


@pytest.mark.unit
def test_user_agent_with_empty_app_is_default():
    assert user_agent_with_app("") == user_agent()
