"""Configuration for the numwords command line and batch helpers.

Settings are merged from layered sources. A source with a higher priority
overrides the keys of every source below it:

    DefaultsConfigSource   (priority 0, built-in defaults)
         |
    FileConfigSource       (priority 50, YAML / JSON / TOML)
         |
    EnvConfigSource        (priority 100, NUMWORDS_* variables)
         |
         v
    ConfigManager ---> merge & validate ---> NumWordsSettings

The library functions never read configuration; only the CLI and callers
that ask for it do.

Usage:
    >>> from numwords.config import load_settings
    >>> settings = load_settings("numwords.yaml")
    >>> settings.locale, settings.batch_workers
    ('pl', 8)

A configuration file holds the settings at its top level:

    locale: pl
    log_level: INFO
    batch_workers: 8
    options:
      gender: feminine

Environment variables use the ``NUMWORDS_`` prefix. A double underscore
reaches into a nested mapping:

    NUMWORDS_LOCALE=de
    NUMWORDS_BATCH_WORKERS=2
    NUMWORDS_OPTIONS__INCLUDE_CONJUNCTION=false
"""

from __future__ import annotations

import json
import logging
import os
import re
import tomllib
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping

import yaml

from numwords.exceptions import ConfigSourceError, ConfigValidationError, InvalidOptionError
from numwords.options import RenderOptions

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "NUMWORDS_CONFIG"
ENV_PREFIX = "NUMWORDS"

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


# =============================================================================
# Settings
# =============================================================================


@dataclass(frozen=True)
class NumWordsSettings:
    """Resolved configuration.

    Attributes:
        locale: Default locale for the CLI and batch helpers.
        options: Default render options, by canonical name or alias.
        log_level: Level for the ``numwords`` logger.
        batch_workers: Threads used by ``render_many``.
        batch_chunk_size: Values handed to a worker at a time.
    """

    locale: str = "en"
    options: Mapping[str, Any] = field(default_factory=dict)
    log_level: str = "WARNING"
    batch_workers: int = 4
    batch_chunk_size: int = 1024

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "NumWordsSettings":
        """Build settings from a merged, validated mapping."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["options"] = dict(self.options)
        return data

    def render_options(self) -> RenderOptions:
        """The configured options as a RenderOptions value."""
        return RenderOptions.from_mapping(self.options)


DEFAULTS = NumWordsSettings()


# =============================================================================
# Configuration Sources
# =============================================================================


class ConfigSource(ABC):
    """Abstract base class for configuration sources.

    Sources are merged in priority order; a higher priority overrides a
    lower one.
    """

    def __init__(self, priority: int = 0) -> None:
        self._priority = priority

    @property
    def priority(self) -> int:
        """Get source priority."""
        return self._priority

    @abstractmethod
    def load(self) -> dict[str, Any]:
        """Load configuration from source.

        Returns:
            Dictionary of configuration values.
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(priority={self._priority})"


class DefaultsConfigSource(ConfigSource):
    """Built-in defaults."""

    def __init__(self, settings: NumWordsSettings = DEFAULTS, priority: int = 0) -> None:
        super().__init__(priority)
        self._settings = settings

    def load(self) -> dict[str, Any]:
        return self._settings.to_dict()


class EnvConfigSource(ConfigSource):
    """Environment variable configuration source.

    Example:
        NUMWORDS_LOCALE=pl
        NUMWORDS_OPTIONS__GENDER=feminine

        Will produce:
        {"locale": "pl", "options": {"gender": "feminine"}}
    """

    def __init__(
        self,
        prefix: str = ENV_PREFIX,
        separator: str = "__",
        priority: int = 100,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize environment source.

        Args:
            prefix: Environment variable prefix.
            separator: Separator for nested keys.
            priority: Source priority.
            environ: Mapping to read instead of ``os.environ``.
        """
        super().__init__(priority)
        self._prefix = prefix
        self._separator = separator
        self._environ = environ

    def load(self) -> dict[str, Any]:
        """Load configuration from environment."""
        environ = os.environ if self._environ is None else self._environ
        result: dict[str, Any] = {}
        prefix = f"{self._prefix}_"

        for key, value in environ.items():
            if not key.startswith(prefix) or key == CONFIG_PATH_ENV:
                continue
            parts = key[len(prefix) :].lower().split(self._separator)

            current = result
            for part in parts[:-1]:
                current = current.setdefault(part, {})
            current[parts[-1]] = self._parse_value(value)

        return result

    def _parse_value(self, value: str) -> Any:
        """Parse string value to appropriate type."""
        lowered = value.strip().lower()
        if lowered in ("true", "on"):
            return True
        if lowered in ("false", "off"):
            return False
        if lowered in ("null", "none", ""):
            return None

        try:
            if "." in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        if value.startswith(("[", "{")):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                pass

        return value


class FileConfigSource(ConfigSource):
    """File-based configuration source.

    Supports YAML, JSON, and TOML formats, detected from the file
    extension.
    """

    def __init__(self, path: str | Path, *, required: bool = False, priority: int = 50) -> None:
        """Initialize file source.

        Args:
            path: Path to configuration file.
            required: Raise error if file not found.
            priority: Source priority.
        """
        super().__init__(priority)
        self._path = Path(path)
        self._required = required

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        """Load configuration from file.

        Raises:
            ConfigSourceError: If a required file is missing, the format is
                unsupported, or the content cannot be parsed.
        """
        if not self._path.exists():
            if self._required:
                raise ConfigSourceError(f"Configuration file not found: {self._path}")
            return {}

        content = self._path.read_text(encoding="utf-8")
        suffix = self._path.suffix.lower()

        try:
            if suffix in (".yaml", ".yml"):
                data = yaml.safe_load(content) or {}
            elif suffix == ".json":
                data = json.loads(content)
            elif suffix == ".toml":
                data = tomllib.loads(content)
            else:
                raise ConfigSourceError(f"Unsupported file format: {suffix}")
        except (yaml.YAMLError, json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
            raise ConfigSourceError(f"Failed to load config {self._path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigSourceError(
                f"Configuration file {self._path} must contain a mapping, got {type(data).__name__}"
            )
        logger.debug("Loaded configuration from %s", self._path)
        return data


# =============================================================================
# Configuration Schema & Validation
# =============================================================================


@dataclass
class ConfigField:
    """Configuration field definition for validation."""

    name: str
    type: type | tuple[type, ...] = str
    min_value: float | None = None
    max_value: float | None = None
    pattern: str | None = None
    choices: list[Any] | None = None
    description: str = ""


@dataclass
class ConfigSchema:
    """Configuration schema for validation.

    Example:
        >>> schema = ConfigSchema()
        >>> schema.add_field("batch_workers", int, min_value=1)
    """

    fields: list[ConfigField] = field(default_factory=list)

    def add_field(self, name: str, type: type | tuple[type, ...] = str, **kwargs: Any) -> "ConfigSchema":
        """Add a field to the schema."""
        self.fields.append(ConfigField(name=name, type=type, **kwargs))
        return self

    @property
    def names(self) -> set[str]:
        return {field_def.name for field_def in self.fields}


class ConfigValidator:
    """Validates a merged configuration mapping against a schema."""

    def __init__(self, schema: ConfigSchema) -> None:
        self._schema = schema

    def validate(self, config: Mapping[str, Any]) -> list[str]:
        """Validate configuration.

        Args:
            config: Configuration dictionary.

        Returns:
            List of validation errors (empty if valid).
        """
        errors: list[str] = []

        for key in sorted(set(config) - self._schema.names):
            errors.append(f"Unknown configuration key '{key}'")

        for field_def in self._schema.fields:
            value = config.get(field_def.name)
            if value is None:
                continue

            expected = field_def.type if isinstance(field_def.type, tuple) else (field_def.type,)
            # bool is an int subclass but never a valid count
            if not isinstance(value, expected) or (isinstance(value, bool) and bool not in expected):
                names = " or ".join(t.__name__ for t in expected)
                errors.append(
                    f"Field '{field_def.name}' should be {names}, got {type(value).__name__}"
                )
                continue

            if isinstance(value, (int, float)):
                if field_def.min_value is not None and value < field_def.min_value:
                    errors.append(f"Field '{field_def.name}' must be >= {field_def.min_value}")
                if field_def.max_value is not None and value > field_def.max_value:
                    errors.append(f"Field '{field_def.name}' must be <= {field_def.max_value}")

            if isinstance(value, str) and field_def.pattern:
                if not re.match(field_def.pattern, value):
                    errors.append(
                        f"Field '{field_def.name}' must match pattern '{field_def.pattern}'"
                    )

            if field_def.choices and value not in field_def.choices:
                errors.append(f"Field '{field_def.name}' must be one of {field_def.choices}")

        options = config.get("options")
        if isinstance(options, Mapping):
            try:
                RenderOptions.from_mapping(options)
            except InvalidOptionError as e:
                errors.append(f"Field 'options': {e}")

        return errors


def create_default_schema() -> ConfigSchema:
    """Create the numwords configuration schema."""
    schema = ConfigSchema()
    schema.add_field("locale", str, pattern=r"^[A-Za-z]{2,3}([-_][A-Za-z0-9]+)*$")
    schema.add_field("options", dict)
    schema.add_field("log_level", str, choices=LOG_LEVELS)
    schema.add_field("batch_workers", int, min_value=1, max_value=64)
    schema.add_field("batch_chunk_size", int, min_value=1)
    return schema


# =============================================================================
# Configuration Manager
# =============================================================================


class ConfigManager:
    """Merges configuration sources and validates the result.

    Example:
        >>> manager = ConfigManager()
        >>> manager.add_source(FileConfigSource("numwords.toml", required=True))
        >>> settings = manager.load()
    """

    def __init__(self, schema: ConfigSchema | None = None) -> None:
        self._sources: list[ConfigSource] = []
        self._schema = schema or create_default_schema()

    def add_source(self, source: ConfigSource) -> "ConfigManager":
        self._sources.append(source)
        self._sources.sort(key=lambda s: s.priority)
        return self

    @property
    def sources(self) -> list[ConfigSource]:
        return list(self._sources)

    def load(self, *, validate: bool = True) -> NumWordsSettings:
        """Merge every source and build settings.

        Raises:
            ConfigSourceError: If a source cannot be read.
            ConfigValidationError: If the merged configuration is invalid.
        """
        merged: dict[str, Any] = {}
        for source in self._sources:
            self._merge_config(merged, source.load())

        level = merged.get("log_level")
        if isinstance(level, str):
            merged["log_level"] = level.upper()

        if validate:
            errors = ConfigValidator(self._schema).validate(merged)
            if errors:
                raise ConfigValidationError(errors)

        settings = NumWordsSettings.from_mapping(merged)
        logger.debug("Resolved settings: %s", settings)
        return settings

    def _merge_config(self, base: dict[str, Any], override: Mapping[str, Any]) -> None:
        """Deep merge configuration dictionaries."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            elif isinstance(value, dict):
                base[key] = dict(value)
            else:
                base[key] = value


def load_settings(
    config_path: str | Path | None = None,
    *,
    env_prefix: str = ENV_PREFIX,
    environ: Mapping[str, str] | None = None,
    validate: bool = True,
) -> NumWordsSettings:
    """Load settings from defaults, a config file and the environment.

    Args:
        config_path: Configuration file. Falls back to ``NUMWORDS_CONFIG``.
            A path given either way must exist.
        env_prefix: Environment variable prefix.
        environ: Mapping to read instead of ``os.environ``.
        validate: Validate the merged configuration.

    Returns:
        NumWordsSettings instance.

    Raises:
        ConfigSourceError: If the configuration file is missing or unreadable.
        ConfigValidationError: If a value has the wrong type or range.
    """
    env = os.environ if environ is None else environ
    if config_path is None:
        config_path = env.get(CONFIG_PATH_ENV) or None

    manager = ConfigManager()
    manager.add_source(DefaultsConfigSource())
    if config_path is not None:
        manager.add_source(FileConfigSource(config_path, required=True))
    manager.add_source(EnvConfigSource(prefix=env_prefix, environ=env))
    return manager.load(validate=validate)
