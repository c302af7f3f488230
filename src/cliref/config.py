"""Configuration loading.

Optional TOML file supplying defaults for the cliref command line. Command
line options always win over file values.

Example ``cliref.toml``:

    out_dir = "docs/cli"
    root_dir = "docs"
    root_summary = true
    replacements = [
        ["\\\\(default: \\\\d+\\\\)", "(default: <auto>)"],
    ]

Keys may also live in a ``[cliref]`` table.
"""

import logging
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from cliref.errors import ConfigError
from cliref.help_runner import DEFAULT_COLUMNS, DEFAULT_LINES

logger = logging.getLogger(__name__)

CONFIG_TABLE = "cliref"


@dataclass
class GeneratorConfig:
    """cliref configuration data."""

    out_dir: str | None = None
    root_dir: str = "."
    root_indentation: int = 2
    readme: bool = False
    root_summary: bool = False
    trim_line_endings: bool = False
    columns: int = DEFAULT_COLUMNS
    lines: int = DEFAULT_LINES
    replacements: list[tuple[str, str]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GeneratorConfig":
        """Create from dictionary.

        Raises:
            ConfigError: If a value has the wrong type or a pattern is invalid
        """
        unknown = sorted(set(data) - set(cls.__dataclass_fields__))
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        config = cls(
            out_dir=_typed(data, "out_dir", str, None),
            root_dir=_typed(data, "root_dir", str, "."),
            root_indentation=_typed(data, "root_indentation", int, 2),
            readme=_typed(data, "readme", bool, False),
            root_summary=_typed(data, "root_summary", bool, False),
            trim_line_endings=_typed(data, "trim_line_endings", bool, False),
            columns=_typed(data, "columns", int, DEFAULT_COLUMNS),
            lines=_typed(data, "lines", int, DEFAULT_LINES),
            replacements=_replacements(data.get("replacements", [])),
        )
        if config.root_indentation < 0:
            raise ConfigError("root_indentation must not be negative")
        return config


def _typed(data: dict[str, Any], key: str, expected: type, default: Any) -> Any:
    if key not in data:
        return default
    value = data[key]
    # bool is an int subclass; reject it where a number is expected.
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise ConfigError(f"{key} must be of type {expected.__name__}, got: {value!r}")
    return value


def _replacements(raw: Any) -> list[tuple[str, str]]:
    if not isinstance(raw, list):
        raise ConfigError("replacements must be a list of [pattern, replacement] pairs")

    pairs = []
    for item in raw:
        if (
            not isinstance(item, list)
            or len(item) != 2
            or not all(isinstance(part, str) for part in item)
        ):
            raise ConfigError(f"Invalid replacement entry: {item!r}")
        pattern, replacement = item
        try:
            re.compile(pattern)
        except re.error as e:
            raise ConfigError(f"Invalid replacement pattern {pattern!r}: {e}") from e
        pairs.append((pattern, replacement))
    return pairs


def load_config(path: Path | str | None = None) -> GeneratorConfig:
    """Load configuration from a TOML file.

    Args:
        path: Config file path; defaults are returned when None

    Returns:
        GeneratorConfig object

    Raises:
        ConfigError: If the file is missing, unreadable or invalid
    """
    if path is None:
        logger.debug("No config file given, using defaults")
        return GeneratorConfig()

    config_path = Path(path).expanduser()
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Failed to parse config file {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config file {config_path}: {e}") from e

    if CONFIG_TABLE in data:
        table = data[CONFIG_TABLE]
        if not isinstance(table, dict):
            raise ConfigError(f"[{CONFIG_TABLE}] must be a table")
        data = table

    logger.debug(f"Loaded config from {config_path}")
    return GeneratorConfig.from_dict(data)


__all__ = ["GeneratorConfig", "load_config"]
