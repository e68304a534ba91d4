"""
Tests for the Retrolambda CLI entry point.

These invoke the Typer app end to end: property collection, the help
fallback for incomplete configurations, and resolved-setting reporting.
"""

import json

from retrolambda import api
from retrolambda.cli.exit_codes import EXIT_CONFIG_ERROR, EXIT_SUCCESS
from retrolambda.cli.main import app, collect_properties


def _define(key, value):
    return f"-D{key}={value}"


class TestMainCLI:
    def test_no_properties_prints_help(self, typer_test_client):
        result = typer_test_client.invoke(app, [])
        assert result.exit_code == EXIT_CONFIG_ERROR
        assert f"-D{api.INPUT_DIR}=? -D{api.CLASSPATH}=?" in result.stdout
        assert "Configurable system properties:" in result.stdout

    def test_show_properties(self, typer_test_client):
        result = typer_test_client.invoke(app, ["--show-properties"])
        assert result.exit_code == EXIT_SUCCESS
        assert result.stdout.startswith("Usage: retrolambda")
        assert f"  {api.CLASSPATH_FILE} (alternative)" in result.stdout

    def test_missing_property_is_reported(self, typer_test_client):
        result = typer_test_client.invoke(app, [_define(api.INPUT_DIR, "in")])
        assert result.exit_code == EXIT_CONFIG_ERROR
        assert f"{api.CLASSPATH}: Required property is not set" in result.stdout

    def test_resolved_configuration_logged(self, typer_test_client):
        result = typer_test_client.invoke(
            app,
            [_define(api.INPUT_DIR, "in"), "-D", f"{api.CLASSPATH}=lib.jar"],
        )
        assert result.exit_code == EXIT_SUCCESS, result.stdout
        assert "Bytecode version: 51" in result.stdout
        assert "Output directory: in" in result.stdout
        assert "Included files:   all" in result.stdout

    def test_json_output(self, typer_test_client):
        result = typer_test_client.invoke(
            app,
            [
                _define(api.INPUT_DIR, "in"),
                _define(api.CLASSPATH, "lib.jar"),
                _define(api.QUIET, "true"),
                "--json",
            ],
        )
        assert result.exit_code == EXIT_SUCCESS, result.stdout
        data = json.loads(result.stdout)
        assert data["input_dir"] == "in"
        assert data["classpath"] == ["lib.jar"]
        assert data["quiet"] is True

    def test_json_output_is_the_only_stdout(self, typer_test_client):
        result = typer_test_client.invoke(
            app,
            [_define(api.INPUT_DIR, "in"), _define(api.CLASSPATH, "lib.jar"), "--json"],
        )
        assert result.exit_code == EXIT_SUCCESS, result.output
        data = json.loads(result.stdout)
        assert data["output_dir"] == "in"
        assert data["included_files"] is None
        assert "Bytecode version" not in result.stdout

    def test_quiet_suppresses_summary(self, typer_test_client):
        result = typer_test_client.invoke(
            app,
            [
                _define(api.INPUT_DIR, "in"),
                _define(api.CLASSPATH, "lib.jar"),
                _define(api.QUIET, "TRUE"),
            ],
        )
        assert result.exit_code == EXIT_SUCCESS
        assert "Bytecode version" not in result.stdout

    def test_invalid_bytecode_version(self, typer_test_client):
        result = typer_test_client.invoke(
            app,
            [
                _define(api.INPUT_DIR, "in"),
                _define(api.CLASSPATH, "lib.jar"),
                _define(api.BYTECODE_VERSION, "abc"),
            ],
        )
        assert result.exit_code == EXIT_CONFIG_ERROR
        assert f"Invalid value for property {api.BYTECODE_VERSION}" in result.stdout

    def test_unreadable_classpath_file(self, typer_test_client, tmp_path):
        missing = tmp_path / "classpath.txt"
        result = typer_test_client.invoke(
            app,
            [_define(api.INPUT_DIR, "in"), _define(api.CLASSPATH_FILE, missing)],
        )
        assert result.exit_code == EXIT_CONFIG_ERROR
        assert f"Failed to read {missing}" in result.stdout

    def test_properties_file(self, typer_test_client, tmp_path):
        props = tmp_path / "retrolambda.properties"
        props.write_text(
            f"{api.INPUT_DIR}=from-file\n{api.CLASSPATH}=lib.jar\n", encoding="utf-8"
        )
        result = typer_test_client.invoke(
            app,
            ["--properties-file", str(props), _define(api.INPUT_DIR, "override"), "--json"],
        )
        assert result.exit_code == EXIT_SUCCESS, result.stdout
        assert '"input_dir": "override"' in result.stdout

    def test_missing_properties_file(self, typer_test_client, tmp_path):
        result = typer_test_client.invoke(
            app, ["--properties-file", str(tmp_path / "nope.properties")]
        )
        assert result.exit_code == EXIT_CONFIG_ERROR


def test_collect_properties_definitions_override_file(tmp_path):
    props = tmp_path / "p.properties"
    props.write_text("a=file\nb=file\n", encoding="utf-8")
    assert collect_properties(["a=cli"], props) == {"a": "cli", "b": "file"}


class TestLogLevel:
    def test_unknown_level_is_a_usage_error(self, typer_test_client):
        result = typer_test_client.invoke(app, ["--log-level", "LOUD", "--show-properties"])
        assert result.exit_code == 2
        assert not isinstance(result.exception, AttributeError)
        assert "Unknown log level" in result.output

    def test_level_is_case_insensitive(self, typer_test_client):
        result = typer_test_client.invoke(app, ["--log-level", "debug", "--show-properties"])
        assert result.exit_code == EXIT_SUCCESS
        assert result.stdout.startswith("Usage: retrolambda")

