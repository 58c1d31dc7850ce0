import json
from pathlib import Path

import pytest

import mixedprod
from mixedprod.config import DEFAULTS, ENV_KEY, Config, update_nested


def write_config(path: Path, content) -> str:
    path.write_text(json.dumps(content))
    return str(path)


@pytest.fixture(name="isolated")
def _isolate_config(tmp_path, monkeypatch):
    monkeypatch.setattr(Config, "home_file_name", str(tmp_path / "home" / "mixedprodrc.json"))
    monkeypatch.setattr(Config, "cwd_file_name", str(tmp_path / "cwd" / "mixedprodrc.json"))
    monkeypatch.delenv(ENV_KEY, raising=False)
    return tmp_path


def test_defaults(isolated):
    config = Config()
    assert config["logger"]["console_level"] == "WARNING"
    assert config["logger"]["start_logging_on_import"] is False
    assert config.current_config_files == []


def test_files_are_layered(isolated, monkeypatch):
    (isolated / "home").mkdir()
    home = write_config(
        isolated / "home" / "mixedprodrc.json",
        {"logger": {"console_level": "INFO", "format": "%(message)s"}},
    )
    env = write_config(isolated / "env.json", {"logger": {"console_level": "DEBUG"}})
    monkeypatch.setenv(ENV_KEY, env)

    config = Config()
    assert config["logger"]["console_level"] == "DEBUG"
    assert config["logger"]["format"] == "%(message)s"
    assert config["logger"]["start_logging_on_import"] is False
    assert config.current_config_files == [home, env]


def test_explicit_path_wins(isolated, monkeypatch):
    env = write_config(isolated / "env.json", {"logger": {"console_level": "DEBUG"}})
    monkeypatch.setenv(ENV_KEY, env)
    explicit = write_config(isolated / "explicit.json", {"logger": {"console_level": "ERROR"}})

    config = Config(explicit)
    assert config["logger"]["console_level"] == "ERROR"
    assert config.current_config_files == [env, explicit]


def test_update_config_rereads_files(isolated):
    path = isolated / "explicit.json"
    config = Config(str(path))
    assert config["logger"]["console_level"] == "WARNING"
    write_config(path, {"logger": {"console_level": "INFO"}})
    config.update_config()
    assert config["logger"]["console_level"] == "INFO"


def test_invalid_json_is_reported(isolated):
    path = isolated / "broken.json"
    path.write_text("{not json")
    with pytest.raises(ValueError, match="broken.json"):
        Config(str(path))


def test_config_must_be_an_object(isolated):
    path = write_config(isolated / "list.json", [1, 2])
    with pytest.raises(ValueError, match="JSON object"):
        Config(path)


def test_defaults_are_not_modified(isolated):
    path = write_config(isolated / "explicit.json", {"logger": {"console_level": "INFO"}})
    Config(path)
    assert DEFAULTS["logger"]["console_level"] == "WARNING"


def test_update_nested():
    target = {"a": {"b": 1, "c": 2}, "d": 3}
    update_nested(target, {"a": {"b": 10}, "e": 5})
    assert target == {"a": {"b": 10, "c": 2}, "d": 3, "e": 5}


def test_package_config():
    assert isinstance(mixedprod.config, Config)
    assert "logger" in mixedprod.config.current_config


def test_version():
    assert isinstance(mixedprod.__version__, str)
