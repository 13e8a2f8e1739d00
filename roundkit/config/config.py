from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

logger = logging.getLogger(__name__)

ALLOWED_FORMATS = {"plain", "json"}
ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(ValueError):
    """設定の検証・読み込みで失敗した際の例外。"""


@dataclass(frozen=True)
class DefaultsConfig:
    digits: int = 3
    step: int = 1
    unsigned: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class OutputConfig:
    format: str = "plain"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "WARNING"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RoundingConfig:
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> dict[str, Any]:
        return {
            "defaults": self.defaults.to_dict(),
            "output": self.output.to_dict(),
            "logging": self.logging.to_dict(),
        }


def _ensure_mapping(raw: Any, field_name: str) -> Mapping[str, Any]:
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise ConfigError(f"{field_name} はマッピングである必要があります")
    return raw


def _ensure_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{field_name} は整数である必要があります")
    return value


def _ensure_choice(value: Any, field_name: str, allowed: set[str]) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{field_name} は空でない文字列である必要があります")
    value = value.strip()
    if value not in allowed:
        raise ConfigError(f"{field_name} は {sorted(allowed)} のいずれかである必要があります")
    return value


def _normalize_defaults(raw: Any) -> DefaultsConfig:
    raw = _ensure_mapping(raw, "defaults")
    digits = _ensure_int(raw.get("digits", 3), "defaults.digits")
    step = _ensure_int(raw.get("step", 1), "defaults.step")
    unsigned = raw.get("unsigned", False)
    if not isinstance(unsigned, bool):
        raise ConfigError("defaults.unsigned は真偽値である必要があります")
    if unsigned and step < 0:
        raise ConfigError("defaults.unsigned が有効な場合 defaults.step は 0 以上である必要があります")
    return DefaultsConfig(digits=digits, step=step, unsigned=unsigned)


def _normalize_output(raw: Any) -> OutputConfig:
    raw = _ensure_mapping(raw, "output")
    fmt = _ensure_choice(raw.get("format", "plain"), "output.format", ALLOWED_FORMATS)
    return OutputConfig(format=fmt)


def _normalize_logging(raw: Any) -> LoggingConfig:
    raw = _ensure_mapping(raw, "logging")
    level = raw.get("level", "WARNING")
    if isinstance(level, str):
        level = level.strip().upper()
    level = _ensure_choice(level, "logging.level", ALLOWED_LOG_LEVELS)
    return LoggingConfig(level=level)


def normalize_config(raw: Any) -> RoundingConfig:
    if not isinstance(raw, Mapping):
        raise ConfigError("設定はマッピングである必要があります")
    unknown = set(raw) - {"defaults", "output", "logging"}
    if unknown:
        raise ConfigError(f"未知の設定キーがあります: {sorted(unknown)}")
    return RoundingConfig(
        defaults=_normalize_defaults(raw.get("defaults")),
        output=_normalize_output(raw.get("output")),
        logging=_normalize_logging(raw.get("logging")),
    )


def load_config(path: str | Path) -> RoundingConfig:
    file_path = Path(path)
    if not file_path.exists():
        raise ConfigError(f"設定ファイルが見つかりません: {file_path}")
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"設定ファイルの読み込みに失敗しました: {exc}") from exc

    try:
        raw = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ConfigError(f"YAMLのパースに失敗しました: {exc}") from exc

    if raw is None:
        raise ConfigError("設定ファイルが空です")

    cfg = normalize_config(raw)
    logger.debug("loaded config from %s: %s", file_path, cfg.to_dict())
    return cfg
