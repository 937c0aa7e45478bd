import os

import pytest

from tabjson import TabularTextParser


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    # No inherited TABJSON_* vars, no stray .env, no real ~/.cache
    for key in list(os.environ):
        if key.startswith("TABJSON_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("XDG_CACHE_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("USERPROFILE", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def parser():
    return TabularTextParser()


@pytest.fixture()
def markdown_table():
    return (
        "| name | age |\n"
        "|------|-----|\n"
        "| Alice | 30 |\n"
        "| Bob  |    |\n"
    )


@pytest.fixture()
def mysql_table():
    return (
        "+----+-------+-------+\n"
        "| id | name  | score |\n"
        "+----+-------+-------+\n"
        "|  1 | Alice |   9.5 |\n"
        "|  2 | NULL  |    -3 |\n"
        "+----+-------+-------+\n"
        "2 rows in set (0.00 sec)\n"
    )


@pytest.fixture()
def tab_table():
    return "id\tval\n1\t10\n2\t20\n"
