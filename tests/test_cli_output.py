import json

import pytest
import yaml

from roundkit.cli import main


@pytest.mark.parametrize(
    "argv,expected",
    [
        (["step", "7", "2"], "8"),
        (["step", "420", "25", "--unsigned"], "425"),
        (["sig", "12895", "2"], "13000"),
        (["sig", "-567", "2"], "-570"),
        (["sig", "4213", "1", "--unsigned"], "4000"),
        (["duration", "-90000000000", "60000000000"], "-120000000000"),
        (["duration-sig", "5742567000000", "2"], "6000000000000"),
        (["duration-sig", "-41500000", "2"], "-42000000"),
    ],
)
def test_plain_output(argv, expected, capsys):
    assert main(argv) == 0
    assert capsys.readouterr().out.strip() == expected


def test_json_output(capsys):
    assert main(["sig", "12895", "2", "--format", "json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"op": "sig", "value": 12895, "arg": 2, "result": 13000}


def test_defaults_from_config(tmp_path, capsys):
    cfg_path = tmp_path / "roundkit.yaml"
    cfg_path.write_text(
        yaml.safe_dump({"defaults": {"digits": 1, "step": 100}, "output": {"format": "json"}}),
        encoding="utf-8",
    )
    assert main(["-c", str(cfg_path), "sig", "4213"]) == 0
    assert json.loads(capsys.readouterr().out)["result"] == 4000
    assert main(["-c", str(cfg_path), "step", "149", "--format", "plain"]) == 0
    assert capsys.readouterr().out.strip() == "100"


def test_print_config(tmp_path, capsys):
    cfg_path = tmp_path / "roundkit.yaml"
    cfg_path.write_text("defaults:\n  digits: 5\n", encoding="utf-8")
    assert main(["-c", str(cfg_path), "--print-config"]) == 0
    printed = yaml.safe_load(capsys.readouterr().out)
    assert printed["defaults"]["digits"] == 5
    assert printed["output"]["format"] == "plain"


def test_rounding_error_exits_two(capsys):
    assert main(["step", "-1", "10", "--unsigned"]) == 2
    assert "error" in capsys.readouterr().err


def test_bad_config_exits_two(tmp_path, capsys):
    cfg_path = tmp_path / "bad.yaml"
    cfg_path.write_text("output: {format: xml}\n", encoding="utf-8")
    assert main(["-c", str(cfg_path), "step", "1", "2"]) == 2
    assert "config error" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out.lower()
