import pytest

from roundkit.config import ConfigError, load_config, normalize_config


def test_unknown_key_raises():
    with pytest.raises(ConfigError):
        normalize_config({"default": {"digits": 2}})


def test_type_mismatch_raises():
    with pytest.raises(ConfigError):
        normalize_config({"defaults": {"digits": "3"}})
    with pytest.raises(ConfigError):
        normalize_config({"defaults": {"step": True}})
    with pytest.raises(ConfigError):
        normalize_config({"defaults": {"unsigned": "yes"}})
    with pytest.raises(ConfigError):
        normalize_config({"output": {"format": "xml"}})
    with pytest.raises(ConfigError):
        normalize_config({"logging": {"level": "LOUD"}})
    with pytest.raises(ConfigError):
        normalize_config(["defaults"])


def test_unsigned_rejects_negative_step():
    with pytest.raises(ConfigError):
        normalize_config({"defaults": {"unsigned": True, "step": -5}})


def test_invalid_yaml_fails(tmp_path):
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text("defaults: [unclosed", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(bad_file)


def test_missing_and_empty_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.yaml")
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(empty)
