import json

import pytest
import yaml

from envfile.cli import main


@pytest.fixture
def env_path(tmp_path, monkeypatch):
    monkeypatch.delenv("ENVFILE_PATH", raising=False)
    monkeypatch.delenv("ENVFILE_CONFIG", raising=False)
    path = tmp_path / "test.env"
    path.write_text("HOSTNAME=pop-testing\n# comment\nEFI_UUID=DFFD-D047\nKBD_MODEL=\n", encoding="utf-8")
    return path


def test_show_prints_sorted_entries(env_path, capsys):
    assert main(["--file", str(env_path), "show"]) == 0

    out = capsys.readouterr().out
    assert out.splitlines() == ["EFI_UUID: DFFD-D047", "HOSTNAME: pop-testing", "KBD_MODEL: "]


def test_show_yaml_and_json(env_path, capsys):
    assert main(["--file", str(env_path), "show", "--format", "yaml"]) == 0
    assert yaml.safe_load(capsys.readouterr().out) == {
        "EFI_UUID": "DFFD-D047",
        "HOSTNAME": "pop-testing",
        "KBD_MODEL": "",
    }

    assert main(["--file", str(env_path), "show", "--format", "json"]) == 0
    assert json.loads(capsys.readouterr().out)["HOSTNAME"] == "pop-testing"


def test_get_existing_and_missing(env_path, capsys):
    assert main(["--file", str(env_path), "get", "HOSTNAME"]) == 0
    assert capsys.readouterr().out == "pop-testing\n"

    assert main(["--file", str(env_path), "get", "ID"]) == 1
    assert "ID is not set" in capsys.readouterr().err


def test_set_writes_canonical_file(env_path):
    assert main(["--file", str(env_path), "set", "ID", "example value"]) == 0

    assert env_path.read_text(encoding="utf-8") == (
        "EFI_UUID=DFFD-D047\nHOSTNAME=pop-testing\nID='example value'\nKBD_MODEL=\n"
    )


def test_set_dry_run_leaves_file_alone(env_path, capsys):
    before = env_path.read_bytes()
    assert main(["--file", str(env_path), "set", "ID", "example", "--dry-run"]) == 0

    assert env_path.read_bytes() == before
    assert "ID=example\n" in capsys.readouterr().out


def test_unset_removes_key(env_path, capsys):
    assert main(["--file", str(env_path), "unset", "HOSTNAME"]) == 0
    assert env_path.read_text(encoding="utf-8") == "EFI_UUID=DFFD-D047\nKBD_MODEL=\n"

    assert main(["--file", str(env_path), "unset", "HOSTNAME"]) == 1
    assert "HOSTNAME is not set" in capsys.readouterr().err


def test_fmt_check_then_rewrite(env_path):
    assert main(["--file", str(env_path), "fmt", "--check"]) == 1
    assert main(["--file", str(env_path), "fmt"]) == 0
    assert main(["--file", str(env_path), "fmt", "--check"]) == 0
    assert env_path.read_text(encoding="utf-8") == "EFI_UUID=DFFD-D047\nHOSTNAME=pop-testing\nKBD_MODEL=\n"


def test_path_from_environment_variable(env_path, monkeypatch, capsys):
    monkeypatch.setenv("ENVFILE_PATH", str(env_path))

    assert main(["get", "EFI_UUID"]) == 0
    assert capsys.readouterr().out == "DFFD-D047\n"


def test_settings_file_supplies_path_and_format(env_path, tmp_path, capsys):
    settings = tmp_path / "envfile.yaml"
    settings.write_text(f"path: {env_path}\nformat: json\n", encoding="utf-8")

    assert main(["--config", str(settings), "show"]) == 0
    assert json.loads(capsys.readouterr().out) == {
        "EFI_UUID": "DFFD-D047",
        "HOSTNAME": "pop-testing",
        "KBD_MODEL": "",
    }


def test_missing_file_reports_error(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv("ENVFILE_PATH", raising=False)
    missing = tmp_path / "missing.env"

    assert main(["--file", str(missing), "show"]) == 2
    err = capsys.readouterr().err
    assert err.startswith("error: unable to open file at")


def test_invalid_settings_reports_error(env_path, tmp_path, capsys):
    settings = tmp_path / "envfile.yaml"
    settings.write_text("format: xml\n", encoding="utf-8")

    assert main(["--config", str(settings), "--file", str(env_path), "show"]) == 2
    assert "Unsupported output format" in capsys.readouterr().err


def test_verbose_reports_entry_count(env_path, capsys):
    assert main(["--verbose", "--file", str(env_path), "get", "HOSTNAME"]) == 0
    assert "3 entries" in capsys.readouterr().err
