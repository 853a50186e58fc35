import os

import pytest

from envfile.env import load_env_file


@pytest.fixture
def clean_environ(monkeypatch):
    def _clean(*names):
        for name in names:
            # setenv first so teardown restores the absence
            monkeypatch.setenv(name, "")
            monkeypatch.delenv(name)

    return _clean


def test_load_env_file_populates_environ(tmp_path, clean_environ):
    path = tmp_path / ".env"
    path.write_text("ENVFILE_TEST_A=alpha\nENVFILE_TEST_B='two words'\n", encoding="utf-8")
    clean_environ("ENVFILE_TEST_A", "ENVFILE_TEST_B")

    applied = load_env_file(path)

    assert applied == {"ENVFILE_TEST_A": "alpha", "ENVFILE_TEST_B": "two words"}
    assert os.environ["ENVFILE_TEST_B"] == "two words"


def test_existing_variables_win_unless_override(tmp_path, monkeypatch):
    path = tmp_path / ".env"
    path.write_text("ENVFILE_TEST_C=from-file\n", encoding="utf-8")
    monkeypatch.setenv("ENVFILE_TEST_C", "from-shell")

    assert load_env_file(path) == {}
    assert os.environ["ENVFILE_TEST_C"] == "from-shell"

    assert load_env_file(path, override=True) == {"ENVFILE_TEST_C": "from-file"}
    assert os.environ["ENVFILE_TEST_C"] == "from-file"


def test_keys_the_environment_cannot_hold_are_skipped(tmp_path, clean_environ):
    path = tmp_path / ".env"
    path.write_bytes(b"ENVFILE_TEST\x00NUL=1\nENVFILE_TEST_GOOD=2\n")
    clean_environ("ENVFILE_TEST_GOOD")

    applied = load_env_file(path)

    assert applied == {"ENVFILE_TEST_GOOD": "2"}
    assert os.environ["ENVFILE_TEST_GOOD"] == "2"


def test_missing_file_is_a_no_op(tmp_path):
    assert load_env_file(tmp_path / "absent.env") == {}
