import subprocess
import sys


def test_help_exits_zero():
    result = subprocess.run(
        [sys.executable, "-m", "roundkit", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )
    assert result.returncode == 0
    assert "usage" in result.stdout.lower()


def test_subcommand_help_exits_zero():
    result = subprocess.run(
        [sys.executable, "-m", "roundkit", "duration-sig", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )
    assert result.returncode == 0
    assert "duration-sig" in result.stdout


def test_module_runs_rounding():
    result = subprocess.run(
        [sys.executable, "-m", "roundkit", "step", "-420", "25"],
        capture_output=True,
        text=True,
        check=False,
    )
    assert result.returncode == 0
    assert result.stdout.strip() == "-425"
