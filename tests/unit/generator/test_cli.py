"""Tests for the ``scalr-gen`` command."""

import json
import logging

import pytest
from typer.testing import CliRunner

from scalr_client.generator.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_logging():
    """The command installs a stderr handler on the package logger; drop it afterwards."""
    package_logger = logging.getLogger("scalr_client")
    level = package_logger.level
    yield
    for handler in list(package_logger.handlers):
        if getattr(handler, "_scalr_client_handler", False):
            package_logger.removeHandler(handler)
    package_logger.setLevel(level)


@pytest.fixture
def spec_file(isolated_cwd, openapi_spec):
    path = isolated_cwd / "openapi.json"
    path.write_text(json.dumps(openapi_spec))
    return path


@pytest.mark.unit
class TestCli:
    def test_generates_into_cwd(self, spec_file, isolated_cwd):
        result = runner.invoke(app, ["--spec", str(spec_file), "--package", "scalr"])

        assert result.exit_code == 0, result.output
        assert (isolated_cwd / "scalr" / "client.py").is_file()
        assert (isolated_cwd / "scalr" / "ops" / "workspace.py").is_file()

    def test_default_package_name(self, spec_file, isolated_cwd):
        result = runner.invoke(app, ["--spec", str(spec_file)])

        assert result.exit_code == 0, result.output
        assert (isolated_cwd / "scalr" / "__init__.py").is_file()

    def test_package_name_sanitized(self, spec_file, isolated_cwd):
        result = runner.invoke(app, ["--spec", str(spec_file), "--package", "My API-Client", "-v"])

        assert result.exit_code == 0, result.output
        assert (isolated_cwd / "my_api_client" / "client.py").is_file()

    def test_invalid_package_name(self, spec_file):
        result = runner.invoke(app, ["--spec", str(spec_file), "--package", "!!!"])

        assert result.exit_code == 1
        assert "Error: invalid package name" in result.output

    def test_missing_spec(self, isolated_cwd):
        result = runner.invoke(app, ["--spec", str(isolated_cwd / "missing.yml")])

        assert result.exit_code == 1
        assert "Error: generation failed: Spec file not found" in result.output
        assert not (isolated_cwd / "scalr").exists()

    def test_spec_option_required(self):
        result = runner.invoke(app, [])

        assert result.exit_code != 0
