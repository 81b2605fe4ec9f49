import os

import pytest

from n8lang import env

NAME = "N8LANG_TEST_VARIABLE"


def test_get_reads_variable(monkeypatch):
    monkeypatch.setenv(NAME, "present")
    assert env.get(NAME) == "present"


def test_get_missing_raises(monkeypatch):
    monkeypatch.delenv(NAME, raising=False)
    with pytest.raises(KeyError):
        env.get(NAME)


def test_set_value_then_get_round_trips(monkeypatch):
    monkeypatch.setenv(NAME, "initial")
    assert env.set_value(NAME, "changed") is False
    assert env.get(NAME) == "changed"
    assert os.environ[NAME] == "changed"


def test_set_value_converts_values_to_text(monkeypatch):
    monkeypatch.setenv(NAME, "initial")
    assert env.set_value(NAME, 3.0) is False
    assert env.get(NAME) == "3"
    assert env.set_value(NAME, True) is False
    assert env.get(NAME) == "true"


def test_set_value_reports_failure_for_bad_name():
    assert env.set_value("BAD=NAME", "value") is True