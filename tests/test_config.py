from __future__ import annotations

import json

import pytest

from quizapp.config import (
    CONFIG_PATH_ENV,
    OVERRIDES_ENV,
    Settings,
    load_settings,
    merge_dicts,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    monkeypatch.delenv(OVERRIDES_ENV, raising=False)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "quiz.yaml"
    path.write_text(
        "title: Geography Night\n"
        "seed: 3\n"
        "logging:\n"
        "  level: DEBUG\n",
        encoding="utf-8",
    )
    return path


def test_bundled_defaults():
    settings = load_settings()
    assert settings == Settings()
    assert settings.title == "Quiz App"
    assert settings.welcome_text == "Hello and welcome to the Quiz App!"
    assert settings.seed is None
    assert settings.logging.level == "INFO"
    assert settings.logging.json_output is False


def test_explicit_path(config_file):
    settings = load_settings(config_file)
    assert settings.title == "Geography Night"
    assert settings.seed == 3
    assert settings.logging.level == "DEBUG"
    assert settings.welcome_text == "Hello and welcome to the Quiz App!"


def test_path_from_env(monkeypatch, config_file):
    monkeypatch.setenv(CONFIG_PATH_ENV, str(config_file))
    assert load_settings().title == "Geography Night"


def test_env_overrides_merge(monkeypatch, config_file):
    monkeypatch.setenv(OVERRIDES_ENV, json.dumps({"seed": 9, "logging": {"json_output": True}}))
    settings = load_settings(config_file)
    assert settings.seed == 9
    assert settings.logging.json_output is True
    assert settings.logging.level == "DEBUG"


def test_blank_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_settings(path) == Settings()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "nope.yaml")


def test_non_mapping_file(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(path)


def test_bad_override_json(monkeypatch):
    monkeypatch.setenv(OVERRIDES_ENV, "{not json")
    with pytest.raises(ValueError, match=OVERRIDES_ENV):
        load_settings()


def test_override_must_be_object(monkeypatch):
    monkeypatch.setenv(OVERRIDES_ENV, "[1, 2]")
    with pytest.raises(ValueError):
        load_settings()


def test_invalid_value(monkeypatch):
    monkeypatch.setenv(OVERRIDES_ENV, json.dumps({"seed": "not-a-number"}))
    with pytest.raises(ValueError, match="Invalid configuration"):
        load_settings()


def test_merge_dicts_is_recursive():
    base = {"a": 1, "nested": {"x": 1, "y": 2}}
    merged = merge_dicts(base, {"nested": {"y": 3}, "b": 2})
    assert merged == {"a": 1, "b": 2, "nested": {"x": 1, "y": 3}}
    assert base["nested"] == {"x": 1, "y": 2}
