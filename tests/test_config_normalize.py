import yaml

from roundkit.config import RoundingConfig, load_config, normalize_config


def test_defaults_are_reproducible():
    cfg1 = normalize_config({})
    cfg2 = normalize_config({})

    assert cfg1.to_dict() == cfg2.to_dict()
    assert cfg1 == RoundingConfig()
    assert cfg1.defaults.digits == 3
    assert cfg1.defaults.step == 1
    assert cfg1.defaults.unsigned is False
    assert cfg1.output.format == "plain"
    assert cfg1.logging.level == "WARNING"


def test_to_dict_roundtrip():
    raw = {
        "defaults": {"digits": 2, "step": 25, "unsigned": True},
        "output": {"format": "json"},
        "logging": {"level": "debug"},
    }
    cfg = normalize_config(raw)
    assert cfg.logging.level == "DEBUG"
    assert normalize_config(cfg.to_dict()) == cfg


def test_load_from_yaml(tmp_path):
    path = tmp_path / "roundkit.yaml"
    path.write_text(
        yaml.safe_dump({"defaults": {"digits": 4}, "output": {"format": "json"}}),
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.defaults.digits == 4
    assert cfg.defaults.step == 1
    assert cfg.output.format == "json"
