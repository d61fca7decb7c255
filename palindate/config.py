"""Configuration file management for palindate."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from palindate.domain.palindromes import MAX_ITERATIONS

DEFAULT_COUNT = 1


@dataclass(frozen=True)
class SearchSettings:
    """Immutable defaults for palindrome searches."""

    count: int = DEFAULT_COUNT
    max_iterations: int = MAX_ITERATIONS


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "palindate" / "config.toml"


def default_config() -> dict[str, Any]:
    """Config contents written by `palindate init`."""
    settings = SearchSettings()
    return {
        "search": {
            "count": settings.count,
            "max_iterations": settings.max_iterations,
        },
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)
    save_config(default_config(), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def _read_int(section: dict[str, Any], key: str, default: int, minimum: int) -> int:
    value = section.get(key, default)
    # bool is an int subclass; `count = true` is a mistake, not 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"search.{key} must be an integer, got {value!r}")
    if value < minimum:
        raise ValueError(f"search.{key} must be at least {minimum}, got {value}")
    return value


def load_search_settings(config_path: Path | None = None) -> SearchSettings:
    """Load search defaults from the config file.

    A missing config file is not an error: built-in defaults are used.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        SearchSettings from the [search] table, defaults filled in.

    Raises:
        ValueError: If a search setting is not a valid integer.
        tomllib.TOMLDecodeError: If the config file is not valid TOML.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        return SearchSettings()

    section = config.get("search", {})
    if not isinstance(section, dict):
        raise ValueError("[search] must be a table")

    defaults = SearchSettings()
    return SearchSettings(
        count=_read_int(section, "count", defaults.count, minimum=0),
        max_iterations=_read_int(section, "max_iterations", defaults.max_iterations, minimum=1),
    )
