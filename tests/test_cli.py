"""Tests for the jsoncmp CLI."""

import json

import pytest

from jsoncmp.cli import main


def test_complete_prints_candidates(tmp_path, capsys, users_schema):
    schema = tmp_path / "users.json"
    schema.write_text(json.dumps(users_schema), encoding="utf-8")

    main(["complete", "--path", str(schema)])

    output = json.loads(capsys.readouterr().out)
    assert output["isComplete"] is True
    assert [item["label"] for item in output["items"]] == ["email", "id"]
    assert output["items"][1] == {
        "label": "id",
        "kind": "Field",
        "documentation": "`integer`",
        "detail": "Users",
    }


def test_complete_applies_flag_overrides_on_top_of_config(tmp_path, capsys):
    schema = tmp_path / "accounts.json"
    schema.write_text(json.dumps({
        "table": "Accounts",
        "columns": [{"name": "balance", "kind": "money"}],
    }), encoding="utf-8")
    config = tmp_path / "options.json"
    config.write_text(json.dumps({
        "paths": [str(schema)],
        "mapping": {"labelField": "name", "fieldsContainer": "columns"},
    }), encoding="utf-8")

    main([
        "complete",
        "--config", str(config),
        "--type-field", "kind",
        "--detail-field", "table",
        "--type-format", "[%s]",
    ])

    [item] = json.loads(capsys.readouterr().out)["items"]
    assert item["label"] == "balance"
    assert item["documentation"] == "[money]"
    assert item["detail"] == "Accounts"


def test_invalid_options_exit_with_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["complete", "--path", str(tmp_path), "--doc-format", "no slot"])
    assert exc_info.value.code == 1
    assert "Error:" in capsys.readouterr().err


def test_missing_config_exits_with_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["complete", "--config", str(tmp_path / "nope.json")])
    assert exc_info.value.code == 1
    assert "Cannot read options file" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 1
    assert "usage: jsoncmp" in capsys.readouterr().out


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("jsoncmp ")
