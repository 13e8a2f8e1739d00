"""Command line interface for roundkit."""

from __future__ import annotations

import argparse
import json
import logging
from importlib import metadata
import sys
from typing import Callable, Iterable, Optional

import yaml

from roundkit.config import ConfigError, RoundingConfig, load_config
from roundkit.core import (
    RoundingError,
    round_duration,
    round_duration_to_significant_digits,
    round_to_significant_digits,
    round_to_significant_digits_unsigned,
    round_to_step,
    round_to_step_unsigned,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _get_version() -> str:
    """Return the installed package version, or a placeholder when unavailable."""
    try:
        return metadata.version("roundkit")
    except metadata.PackageNotFoundError:
        return "0.0.0"


def setup_logging(level: int | str = logging.WARNING) -> None:
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)


def _add_format_option(sub: argparse.ArgumentParser) -> None:
    sub.add_argument(
        "--format",
        choices=["plain", "json"],
        default=None,
        help="出力形式（未指定なら設定ファイルの output.format）",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roundkit",
        description="Round integers and nanosecond durations (round half up).",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Optional path to a configuration file.",
        default=None,
    )
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Load YAML config,正規化した内容を標準出力へ出力。",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="DEBUG ログを stderr に出力",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )
    subparsers = parser.add_subparsers(dest="command")

    step_parser = subparsers.add_parser("step", help="整数を STEP の倍数へ丸める")
    step_parser.add_argument("value", type=int, help="丸める整数")
    step_parser.add_argument("step", type=int, nargs="?", default=None, help="丸め単位（未指定なら defaults.step）")
    step_parser.add_argument("--unsigned", action="store_true", default=None, help="uint64 として丸める")
    _add_format_option(step_parser)

    sig_parser = subparsers.add_parser("sig", help="整数を有効数字 N 桁へ丸める")
    sig_parser.add_argument("value", type=int, help="丸める整数")
    sig_parser.add_argument("digits", type=int, nargs="?", default=None, help="有効桁数（未指定なら defaults.digits）")
    sig_parser.add_argument("--unsigned", action="store_true", default=None, help="uint64 として丸める")
    _add_format_option(sig_parser)

    duration_parser = subparsers.add_parser("duration", help="ナノ秒の duration を STEP_NANOS の倍数へ丸める")
    duration_parser.add_argument("nanos", type=int, help="duration（ナノ秒）")
    duration_parser.add_argument("step", type=int, nargs="?", default=None, help="丸め単位（ナノ秒）")
    _add_format_option(duration_parser)

    duration_sig_parser = subparsers.add_parser(
        "duration-sig", help="ナノ秒の duration を時・分・秒表記での有効数字 N 桁へ丸める"
    )
    duration_sig_parser.add_argument("nanos", type=int, help="duration（ナノ秒）")
    duration_sig_parser.add_argument("digits", type=int, nargs="?", default=None, help="有効桁数")
    _add_format_option(duration_sig_parser)
    return parser


def _select_op(args: argparse.Namespace, cfg: RoundingConfig) -> tuple[str, Callable[[int, int], int], int]:
    unsigned = cfg.defaults.unsigned if getattr(args, "unsigned", None) is None else args.unsigned
    if args.command == "step":
        arg = cfg.defaults.step if args.step is None else args.step
        if unsigned:
            return "step_unsigned", round_to_step_unsigned, arg
        return "step", round_to_step, arg
    if args.command == "sig":
        arg = cfg.defaults.digits if args.digits is None else args.digits
        if unsigned:
            return "sig_unsigned", round_to_significant_digits_unsigned, arg
        return "sig", round_to_significant_digits, arg
    if args.command == "duration":
        arg = cfg.defaults.step if args.step is None else args.step
        return "duration", round_duration, arg
    arg = cfg.defaults.digits if args.digits is None else args.digits
    return "duration_sig", round_duration_to_significant_digits, arg


def _format_result(op: str, value: int, arg: int, result: int, fmt: str) -> str:
    if fmt == "json":
        return json.dumps({"op": op, "value": value, "arg": arg, "result": result}, sort_keys=True)
    return str(result)


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    cfg = RoundingConfig()
    if args.config:
        try:
            cfg = load_config(args.config)
        except ConfigError as exc:
            print(f"config error: {exc}", file=sys.stderr)
            return 2
    setup_logging(logging.DEBUG if args.verbose else cfg.logging.level)

    if args.print_config:
        print(yaml.safe_dump(cfg.to_dict(), sort_keys=True), end="")
        return 0

    if args.command is None:
        parser.print_help()
        return 0

    op, fn, arg = _select_op(args, cfg)
    value = args.value if args.command in ("step", "sig") else args.nanos
    logger.debug("%s value=%d arg=%d", op, value, arg)
    try:
        result = fn(value, arg)
    except RoundingError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    fmt = args.format or cfg.output.format
    print(_format_result(op, value, arg, result, fmt))
    return 0


__all__ = ["build_parser", "main", "setup_logging"]
