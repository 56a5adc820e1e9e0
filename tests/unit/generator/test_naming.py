"""Tests for identifier helpers used by the generator."""

import pytest

from scalr_client.generator.naming import (
    clean_description,
    enum_member,
    is_valid_package_name,
    python_identifier,
    sanitize_package_name,
    to_camel,
    to_snake,
)


@pytest.mark.unit
class TestCaseConversion:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("WorkspaceVcsRepo", "workspace_vcs_repo"),
            ("vcs-repo", "vcs_repo"),
            ("HTTPServer", "http_server"),
            ("filter[some-thing]", "filter_some_thing"),
            ("already_snake", "already_snake"),
        ],
    )
    def test_to_snake(self, name, expected):
        assert to_snake(name) == expected

    @pytest.mark.parametrize(
        "name,expected",
        [("vcs-repo", "VcsRepo"), ("execution-mode", "ExecutionMode"), ("name", "Name")],
    )
    def test_to_camel(self, name, expected):
        assert to_camel(name) == expected


@pytest.mark.unit
class TestPythonIdentifier:
    def test_dashed_and_bracketed(self):
        assert python_identifier("page[number]") == "page_number"

    def test_keyword(self):
        assert python_identifier("global") == "global_"

    def test_reserved(self):
        assert python_identifier("id", frozenset({"id"})) == "id_"

    def test_leading_digit(self):
        assert python_identifier("2fa") == "_2fa"

    def test_nothing_usable(self):
        assert python_identifier("---") == "value"


@pytest.mark.unit
class TestEnumMember:
    @pytest.mark.parametrize(
        "value,expected",
        [("refresh-only", "REFRESH_ONLY"), ("", "EMPTY"), ("1.5", "V_1_5"), (3, "V_3"), ("plan", "PLAN")],
    )
    def test_member_names(self, value, expected):
        assert enum_member(value) == expected


@pytest.mark.unit
def test_clean_description():
    assert clean_description("  Name of\n  the workspace.  ") == "Name of the workspace."
    assert clean_description(None) == ""


@pytest.mark.unit
class TestSanitizePackageName:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("scalr", "scalr"),
            ("My API-Client", "my_api_client"),
            ("123abc", "pkg_23abc"),
            ("class", "class_pkg"),
            ("_x", "pkg__x"),
            ("scalr2", "scalr2"),
        ],
    )
    def test_sanitized(self, name, expected):
        assert sanitize_package_name(name) == expected

    @pytest.mark.parametrize("name", ["", "!!!"])
    def test_unusable(self, name):
        with pytest.raises(ValueError):
            sanitize_package_name(name)

    def test_is_valid_package_name(self):
        assert is_valid_package_name("scalr_client")
        assert not is_valid_package_name("1scalr")
        assert not is_valid_package_name("scalr-client")
