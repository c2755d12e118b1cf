"""Tests for prefgroups CLI commands."""

import pytest
from click.testing import CliRunner

from prefgroups.cli.main import cli
from prefgroups.jsonc import serialize
from prefgroups.schema.loader import SchemaLoader

SCHEMA = """\
description: Service settings
items:
  Server:
    kind: group
    preferences:
      Port:
        type: integer
        default: 8080
        validity: isGreaterThanZero
      Host:
        type: string
        description: Host name
  Debug:
    type: boolean
    default: false
"""


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "service.yaml"
    path.write_text(SCHEMA, encoding="utf-8")
    return path


@pytest.fixture
def bad_schema_file(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("items:\n  Port:\n    type: color\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PREFGROUPS_INDENT", "PREFGROUPS_INDENT_CHAR", "PREFGROUPS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestSchemaValidate:
    def test_valid_schema(self, runner, schema_file):
        result = runner.invoke(cli, ["schema", "validate", str(schema_file)])
        assert result.exit_code == 0
        assert "Schema is valid" in result.output
        assert "Server (group)" in result.output
        assert "Debug (preference)" in result.output

    def test_invalid_schema(self, runner, bad_schema_file):
        result = runner.invoke(cli, ["schema", "validate", str(bad_schema_file)])
        assert result.exit_code == 1
        assert "schema error(s) found" in result.output

    def test_unknown_preset(self, runner, tmp_path):
        path = tmp_path / "preset.yaml"
        path.write_text("items:\n  Port:\n    type: integer\n    validity: isPrime\n")
        result = runner.invoke(cli, ["schema", "validate", str(path)])
        assert result.exit_code == 1
        assert "Invalid schema" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["schema", "validate", str(tmp_path / "missing.yaml")])
        assert result.exit_code != 0

    def test_verbose(self, runner, schema_file):
        result = runner.invoke(cli, ["--verbose", "schema", "validate", str(schema_file)])
        assert result.exit_code == 0


class TestSchemaTypes:
    def test_lists_types_and_presets(self, runner):
        result = runner.invoke(cli, ["schema", "types"])
        assert result.exit_code == 0
        assert "ipAddress" in result.output
        assert "isGreaterThanZero" in result.output
        assert "timespan.isZero" in result.output


class TestRender:
    def test_render_to_stdout(self, runner, schema_file):
        result = runner.invoke(cli, ["render", str(schema_file)])
        assert result.exit_code == 0
        expected = serialize(SchemaLoader().load_file(schema_file))
        assert result.output == expected + "\n"
        assert "// Default value: 8080." in result.output

    def test_render_to_file(self, runner, schema_file, tmp_path):
        output = tmp_path / "service.jsonc"
        result = runner.invoke(cli, ["render", str(schema_file), "--output", str(output)])
        assert result.exit_code == 0
        text = output.read_text(encoding="utf-8")
        assert text.endswith("}\n")
        assert '"Port": null' in text

    def test_render_with_tab_indent(self, runner, schema_file, monkeypatch):
        monkeypatch.setenv("PREFGROUPS_INDENT", "1")
        monkeypatch.setenv("PREFGROUPS_INDENT_CHAR", "tab")
        result = runner.invoke(cli, ["render", str(schema_file)])
        assert result.exit_code == 0
        assert '\t"Server": {' in result.output

    def test_invalid_configuration(self, runner, schema_file, monkeypatch):
        monkeypatch.setenv("PREFGROUPS_INDENT_CHAR", "dash")
        result = runner.invoke(cli, ["render", str(schema_file)])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_render_invalid_schema(self, runner, bad_schema_file):
        result = runner.invoke(cli, ["render", str(bad_schema_file)])
        assert result.exit_code == 1


class TestCheck:
    def test_valid_settings(self, runner, schema_file, tmp_path):
        settings = tmp_path / "service.jsonc"
        settings.write_text(
            '{\n  // overrides\n  "Server": {"Port": 9000, "Host": "example.org"},\n  "Debug": true,\n}'
        )
        result = runner.invoke(cli, ["check", str(schema_file), str(settings)])
        assert result.exit_code == 0
        assert "Updated 2 item(s)" in result.output
        assert "Server" in result.output
        assert "Settings are valid" in result.output

    def test_nothing_changed(self, runner, schema_file, tmp_path):
        settings = tmp_path / "empty.jsonc"
        settings.write_text("{}")
        result = runner.invoke(cli, ["check", str(schema_file), str(settings)])
        assert result.exit_code == 0
        assert "No settings changed" in result.output

    def test_rejected_value(self, runner, schema_file, tmp_path):
        settings = tmp_path / "bad.jsonc"
        settings.write_text('{"Server": {"Port": -1}}')
        result = runner.invoke(cli, ["check", str(schema_file), str(settings)])
        assert result.exit_code == 1
        assert "[VALIDITY_CHECK] Is less than or equal to zero." in result.output

    def test_unparseable_value(self, runner, schema_file, tmp_path):
        settings = tmp_path / "bad.jsonc"
        settings.write_text('{"Debug": "maybe"}')
        result = runner.invoke(cli, ["check", str(schema_file), str(settings)])
        assert result.exit_code == 1
        assert "[PARSING]" in result.output

    def test_malformed_json(self, runner, schema_file, tmp_path):
        settings = tmp_path / "bad.jsonc"
        settings.write_text('{"Debug": }')
        result = runner.invoke(cli, ["check", str(schema_file), str(settings)])
        assert result.exit_code == 1
        assert "Cannot read" in result.output
