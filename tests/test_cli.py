# tests/test_cli.py
"""
Testes da CLI `flowbridge convert` via click.testing.CliRunner.
"""

import json

from click.testing import CliRunner

from flowbridge.cli import cli


def _write_flow(tmp_path, content, name="nightly.flow"):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_convert_to_stdout(tmp_path, sample_flow_yaml):
    flow = _write_flow(tmp_path, sample_flow_yaml)

    result = CliRunner().invoke(cli, ["convert", str(flow), "--project", "analytics"])

    assert result.exit_code == 0, result.output
    documents = json.loads(result.stdout)
    assert len(documents) == 2
    assert json.loads(documents[-1])["processDefinitionName"] == "nightly"


def test_convert_to_output_file(tmp_path, sample_flow_yaml):
    flow = _write_flow(tmp_path, sample_flow_yaml)
    out = tmp_path / "out.json"

    result = CliRunner().invoke(cli, ["convert", str(flow), "--project", "analytics", "--output", str(out)])

    assert result.exit_code == 0, result.output
    assert len(json.loads(out.read_text(encoding="utf-8"))) == 2
    assert "Wrote 2 definition(s)" in result.stderr


def test_settings_override_is_applied(tmp_path):
    flow = _write_flow(tmp_path, "nodes:\n  - name: a\n    config: {command: echo a}\n", "one.flow")
    settings = tmp_path / "local.yaml"
    settings.write_text("task:\n  worker_group_id: 5\n", encoding="utf-8")

    result = CliRunner().invoke(
        cli, ["convert", str(flow), "--project", "p", "--settings", str(settings)]
    )

    assert result.exit_code == 0, result.output
    (encoded,) = json.loads(result.stdout)
    definition = json.loads(json.loads(encoded)["processDefinitionJson"])
    assert definition["tasks"][0]["workerGroupId"] == 5


def test_conversion_error_prints_payload(tmp_path):
    flow = _write_flow(tmp_path, "nodes:\n  - name: a\n    dependsOn: [ghost]\n", "bad.flow")

    result = CliRunner().invoke(cli, ["convert", str(flow), "--project", "p"])

    assert result.exit_code == 1
    assert result.stdout == ""
    payload = json.loads(result.stderr.strip().splitlines()[-1])
    assert payload["type"] == "UndefinedDependencyError"
    assert payload["details"] == {"node": "a", "dependency": "ghost"}


def test_missing_flow_file(tmp_path):
    result = CliRunner().invoke(cli, ["convert", str(tmp_path / "nope.flow"), "--project", "p"])

    assert result.exit_code == 1
    assert json.loads(result.stderr.strip())["type"] == "LoadError"


def test_strict_placeholders_flag(tmp_path):
    flow = _write_flow(tmp_path, "nodes:\n  - name: a\n    config: {command: 'hive -f ${x}/a.hql'}\n", "s.flow")

    lenient = CliRunner().invoke(cli, ["convert", str(flow), "--project", "p"])
    strict = CliRunner().invoke(cli, ["convert", str(flow), "--project", "p", "--strict-placeholders"])

    assert lenient.exit_code == 0
    assert strict.exit_code == 1
    assert json.loads(strict.stderr.strip())["type"] == "UnresolvedPlaceholderError"


def test_invalid_settings_file(tmp_path, sample_flow_yaml):
    flow = _write_flow(tmp_path, sample_flow_yaml)

    result = CliRunner().invoke(
        cli, ["convert", str(flow), "--project", "p", "--settings", str(tmp_path / "missing.yaml")]
    )

    assert result.exit_code == 1
    assert "Invalid settings" in result.stderr


def test_verbose_prints_event_log(tmp_path, sample_flow_yaml):
    flow = _write_flow(tmp_path, sample_flow_yaml)

    result = CliRunner().invoke(cli, ["convert", str(flow), "--project", "p", "--verbose"])

    assert result.exit_code == 0
    assert "[INFO] load:" in result.stderr
    assert "[INFO] assemble:" in result.stderr


def test_project_is_required(tmp_path, sample_flow_yaml):
    flow = _write_flow(tmp_path, sample_flow_yaml)

    result = CliRunner().invoke(cli, ["convert", str(flow)])

    assert result.exit_code == 2


def test_malformed_settings_file(tmp_path, sample_flow_yaml):
    flow = _write_flow(tmp_path, sample_flow_yaml)
    settings = tmp_path / "local.json"
    settings.write_text("{not json", encoding="utf-8")

    result = CliRunner().invoke(
        cli, ["convert", str(flow), "--project", "p", "--settings", str(settings)]
    )

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "Invalid settings" in result.stderr
