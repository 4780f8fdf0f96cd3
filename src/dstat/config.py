"""Configuration loading for DStat.

Configuration sources are merged in priority order:
    1. Defaults (defined in OutputConfig)
    2. Global config (~/.dstat.toml)
    3. Project config (./dstat.toml)
    4. Explicit config file
    5. Environment variables (DSTAT_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(linear=True, quiet=True)
    >>> config.linear
    True
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, get_type_hints

from .exceptions import InvalidConfigError


@dataclass(frozen=True)
class OutputConfig:
    """Resolved format and destination flags.

    Attributes:
        continuous: Re-print cumulative counts after each directory
        linear: Tabular output rather than the descriptive block
        csv: CSV output
        quiet: Suppress directory list and header lines
        outfile: Also append results to this file
        logfile: Append non-fatal errors here instead of halting
        debug: Emit diagnostic logging on stderr
    """

    continuous: bool = False
    linear: bool = False
    csv: bool = False
    quiet: bool = False
    outfile: Optional[str] = None
    logfile: Optional[str] = None
    debug: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        # TOML files can hand over any type; only real booleans turn a flag on
        for key in ("continuous", "linear", "csv", "quiet", "debug"):
            value = getattr(self, key)
            if not isinstance(value, bool):
                raise InvalidConfigError(key, value, "expected true or false")

        for key in ("outfile", "logfile"):
            value = getattr(self, key)
            if value is not None and not isinstance(value, str):
                raise InvalidConfigError(key, value, "expected a file name")
            if value is not None and not value.strip():
                raise InvalidConfigError(key, value, f"--{key} must supply a valid file name")

    @property
    def output_requested(self) -> bool:
        return self.outfile is not None

    @property
    def log_requested(self) -> bool:
        return self.logfile is not None


def load_config(config_file: Optional[Path] = None, **overrides) -> OutputConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); ``None``
            values are ignored so unset CLI options do not mask files

    Returns:
        Validated OutputConfig instance

    Raises:
        InvalidConfigError: If a config file or value is invalid
    """
    merged: dict = {}

    global_config = Path.home() / ".dstat.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "dstat.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise InvalidConfigError("config", str(config_file), "config file not found")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return OutputConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise InvalidConfigError("config", sorted(merged), str(e))


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from DSTAT_* environment variables.

    Supported environment variables:
        DSTAT_CONTINUOUS, DSTAT_LINEAR, DSTAT_CSV, DSTAT_QUIET, DSTAT_DEBUG:
            bool (true/false/1/0/yes/no/on/off)
        DSTAT_OUTFILE, DSTAT_LOGFILE: str

    Returns:
        Dict of field_name -> parsed_value for any DSTAT_* vars found.
    """
    type_hints = get_type_hints(OutputConfig)

    result: dict[str, Any] = {}

    for field_name in OutputConfig.__dataclass_fields__:
        env_key = f"DSTAT_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    # Optional[str] file names pass through verbatim
    return value


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        InvalidConfigError: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        # Fallback to tomli for Python 3.9-3.10
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise InvalidConfigError("config", str(path), str(e))
