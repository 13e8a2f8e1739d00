"""設定読み込みとスキーマ定義。"""

from .config import (
    ALLOWED_FORMATS,
    ALLOWED_LOG_LEVELS,
    ConfigError,
    DefaultsConfig,
    LoggingConfig,
    OutputConfig,
    RoundingConfig,
    load_config,
    normalize_config,
)

__all__ = [
    "ALLOWED_FORMATS",
    "ALLOWED_LOG_LEVELS",
    "ConfigError",
    "DefaultsConfig",
    "LoggingConfig",
    "OutputConfig",
    "RoundingConfig",
    "load_config",
    "normalize_config",
]
