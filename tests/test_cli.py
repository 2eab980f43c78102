import os
from unittest import mock

import pytest

from idmstore.cli import main


@pytest.fixture(autouse=True)
def clean_env():
    with mock.patch.dict(os.environ):
        os.environ.pop("DB_DRIVER_NAME", None)
        os.environ.pop("DB_DSN", None)
        yield


def test_connection_established(tmp_path, capsys):
    env = tmp_path / ".env"
    env.write_text(f"DB_DRIVER_NAME=sqlite3\nDB_DSN={tmp_path / 'x.db'}\n", encoding="utf-8")
    assert main([str(env)]) == 0
    assert capsys.readouterr().out == "Database connection established\n"


def test_missing_config_fails(tmp_path, capsys):
    missing = tmp_path / "absent.env"
    assert main([str(missing)]) == 1
    captured = capsys.readouterr()
    assert "failed to load config from" in captured.err
    assert captured.out == ""


def test_empty_config_fails(tmp_path, capsys):
    env = tmp_path / ".empty"
    env.write_text("", encoding="utf-8")
    assert main([str(env)]) == 1
    assert "failed to connect to" in capsys.readouterr().err