"""
Configuration Module
Runtime settings for the pattern matcher, loadable from environment variables.
"""

import os
import tempfile
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

ENV_PREFIX = 'CSSMATCH_'

DEFAULT_CACHE_DB_PATH = str(Path(tempfile.gettempdir()) / 'css_pattern_cache.sqlite3')

LogLevel = Literal['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


class ConfigError(ValueError):
    """Raised when a setting cannot be parsed or validated."""


class SettingKind(str, Enum):
    STRING = 'string'
    OPTIONAL_STRING = 'optional_string'
    INTEGER = 'integer'
    FLOAT = 'float'
    BOOLEAN = 'boolean'


_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off'}


def coerce_setting(name: str, raw: str, kind: SettingKind) -> Any:
    """Convert a raw environment string according to its declared kind."""
    value = raw.strip()
    if kind is SettingKind.STRING:
        return value
    if kind is SettingKind.OPTIONAL_STRING:
        return value or None
    if kind is SettingKind.INTEGER:
        try:
            return int(value)
        except ValueError:
            raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if kind is SettingKind.FLOAT:
        try:
            return float(value)
        except ValueError:
            raise ConfigError(f"{name} must be a number, got {raw!r}") from None
    if kind is SettingKind.BOOLEAN:
        lowered = value.lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ConfigError(f"{name} must be a boolean, got {raw!r}")
    raise ConfigError(f"Unsupported setting kind for {name}: {kind}")


class MatcherSettings(BaseModel):
    """Settings shared by the matcher, the result cache and the CLI."""

    model_config = ConfigDict(frozen=True)

    confidence_threshold: int = Field(default=70, ge=0, le=100)
    cache_enabled: bool = True
    cache_ttl: int = Field(default=3600, ge=1)
    cache_prefix: str = Field(default='cssmatch_pattern_', min_length=1)
    redis_url: Optional[str] = None
    cache_db_path: str = DEFAULT_CACHE_DB_PATH
    patterns_dir: Optional[str] = None
    log_level: LogLevel = 'INFO'

    @field_validator('log_level', mode='before')
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def from_environment(cls, environ: Optional[Mapping[str, str]] = None) -> 'MatcherSettings':
        """
        Build settings from CSSMATCH_* variables.

        Unset variables keep their defaults. CSSMATCH_CACHE_TTL=600 sets
        cache_ttl, CSSMATCH_REDIS_URL=redis://localhost:6379/0 enables Redis.
        """
        if environ is None:
            environ = os.environ
        values: Dict[str, Any] = {}
        for name, kind in SETTINGS_SCHEMA.items():
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is not None:
                values[name] = coerce_setting(name, raw, kind)
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigError(str(e)) from e


SETTINGS_SCHEMA: Dict[str, SettingKind] = {
    'confidence_threshold': SettingKind.INTEGER,
    'cache_enabled': SettingKind.BOOLEAN,
    'cache_ttl': SettingKind.INTEGER,
    'cache_prefix': SettingKind.STRING,
    'redis_url': SettingKind.OPTIONAL_STRING,
    'cache_db_path': SettingKind.STRING,
    'patterns_dir': SettingKind.OPTIONAL_STRING,
    'log_level': SettingKind.STRING,
}
