"""Tests for the pom-actions command line interface."""

import json

import pytest
from click.testing import CliRunner

from pom_actions.cli.app import main


@pytest.fixture
def runner():
    # Wide enough that rich tables never truncate cells
    return CliRunner(env={"COLUMNS": "200"})


class TestCatalogCommand:
    def test_lists_actions(self, runner):
        result = runner.invoke(main, ["catalog"])

        assert result.exit_code == 0
        assert "click" in result.output
        assert "wait_until_clickable" in result.output
        assert "locate" in result.output


class TestDescribeCommand:
    def test_stub_output(self, runner):
        result = runner.invoke(main, ["describe", "sample_pages:LoginPage"])

        assert result.exit_code == 0
        assert "class LoginPage:" in result.output
        assert "async def click_loginButton(" in result.output
        assert "async def enter_keys_email(self, session: AutomationSession, text: str)" in result.output

    def test_json_output(self, runner):
        result = runner.invoke(
            main, ["describe", "sample_pages:LoginPage", "--format", "json"]
        )

        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["type_name"] == "LoginPage"
        assert [m["name"] for m in payload["methods"]] == [
            "locate_loginButton",
            "click_loginButton",
            "locate_email",
            "click_email",
            "enter_keys_email",
        ]

    def test_table_output(self, runner):
        result = runner.invoke(
            main, ["describe", "sample_pages:LoginPage", "--format", "table"]
        )

        assert result.exit_code == 0
        assert "locate_email" in result.output

    def test_decorated_class_uses_attached_set(self, runner):
        result = runner.invoke(main, ["describe", "sample_pages:DecoratedPage"])

        assert result.exit_code == 0
        assert "async def exists_banner(" in result.output

    def test_output_is_reproducible(self, runner):
        first = runner.invoke(main, ["describe", "sample_pages:LoginPage"])
        second = runner.invoke(main, ["describe", "sample_pages:LoginPage"])

        assert first.output == second.output


class TestCheckCommand:
    def test_valid_page(self, runner):
        result = runner.invoke(main, ["check", "sample_pages:LoginPage"])

        assert result.exit_code == 0
        assert "OK: LoginPage generates 5 methods" in result.output

    def test_unknown_action(self, runner):
        result = runner.invoke(main, ["check", "sample_pages:BrokenPage"])

        assert result.exit_code == 1
        assert "Unsupported action 'bogus_action' for field search of BrokenPage" in result.output

    def test_not_a_record(self, runner):
        result = runner.invoke(main, ["check", "sample_pages:not_a_page"])

        assert result.exit_code == 1
        assert "not_a_page is not a record type" in result.output


class TestTargetLoading:
    def test_malformed_target(self, runner):
        result = runner.invoke(main, ["check", "sample_pages.LoginPage"])

        assert result.exit_code == 2
        assert "module:Class" in result.output

    def test_missing_module(self, runner):
        result = runner.invoke(main, ["check", "no_such_module_xyz:Page"])

        assert result.exit_code == 2
        assert "cannot import" in result.output

    def test_missing_attribute(self, runner):
        result = runner.invoke(main, ["check", "sample_pages:MissingPage"])

        assert result.exit_code == 2
        assert "has no attribute" in result.output
