"""Tests for the propconf CLI."""

from __future__ import annotations

from typer.testing import CliRunner

from propconf.cli.app import app
from propconf.defaults import ConfigDefaults, setting

runner = CliRunner()


class CliDefaults(ConfigDefaults):
    TAG_PORT = setting("port", 8080)
    TAG_SECRET = setting("secret", "hunter2", sensitive=True)


OWNER = f"{__name__}:CliDefaults"


def _last_line(output: str) -> str:
    # Resolution log records are printed before the value.
    return output.strip().splitlines()[-1]


def test_get_string_from_set():
    result = runner.invoke(app, ["get", "string", "host", "--set", "host=example.org", "--no-env"])
    assert result.exit_code == 0
    assert _last_line(result.output) == "example.org"


def test_get_int_with_prefix_and_default():
    result = runner.invoke(app, ["get", "int", "port", "-p", "svc.", "-d", "99", "--no-env"])
    assert result.exit_code == 0
    assert _last_line(result.output) == "99"


def test_get_int_environment_wins(monkeypatch):
    monkeypatch.setenv("SVC_PORT", "9090")
    result = runner.invoke(app, ["get", "int", "port", "-p", "svc.", "-s", "svc.port=1"])
    assert result.exit_code == 0
    assert _last_line(result.output) == "9090"


def test_get_int_owner_default():
    result = runner.invoke(app, ["get", "int", "port", "--owner", OWNER, "--no-env"])
    assert result.exit_code == 0
    assert _last_line(result.output) == "8080"


def test_get_boolean():
    result = runner.invoke(app, ["get", "boolean", "flag", "-s", "flag=TRUE", "--no-env"])
    assert result.exit_code == 0
    assert _last_line(result.output) == "true"


def test_get_missing_fails():
    result = runner.invoke(app, ["get", "string", "absent", "--no-env"])
    assert result.exit_code == 1
    assert "Property not set: absent" in result.output


def test_get_bad_assignment():
    result = runner.invoke(app, ["get", "string", "x", "-s", "novalue", "--no-env"])
    assert result.exit_code == 1
    assert "KEY=VALUE" in result.output


def test_defaults_list_masks_sensitive():
    result = runner.invoke(app, ["defaults", "list", OWNER])
    assert result.exit_code == 0
    assert "port" in result.output
    assert "8080" in result.output
    assert "hunter2" not in result.output


def test_defaults_list_show_sensitive():
    result = runner.invoke(app, ["defaults", "list", OWNER, "--show-sensitive"])
    assert result.exit_code == 0
    assert "hunter2" in result.output


def test_defaults_show():
    result = runner.invoke(app, ["defaults", "show", OWNER, "port"])
    assert result.exit_code == 0
    assert _last_line(result.output) == "8080"


def test_defaults_bad_owner():
    result = runner.invoke(app, ["defaults", "list", "no_such_module_xyz:Thing"])
    assert result.exit_code != 0
