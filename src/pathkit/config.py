"""Configuration data structures and loading.

Provides immutable config data loaded from ~/.pathkit/pathkit.toml and
overridden by PATHKIT_* environment variables.

Example config:
  encoding = "utf-8"
  case_sensitive = false
  debug = true
"""

import codecs
import logging
import os
import posixpath
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import tomlkit

from pathkit import lexical
from pathkit.filesystem import get_filesystem

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = "~/.pathkit"
CONFIG_FILENAME = "pathkit.toml"

ENV_ENCODING = "PATHKIT_ENCODING"
ENV_CASE_SENSITIVE = "PATHKIT_CASE_SENSITIVE"
ENV_DEBUG = "PATHKIT_DEBUG"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class PathkitConfig:
    """Immutable pathkit configuration.

    Attributes:
        encoding: Default text encoding for read_text() and write_text()
        case_sensitive: Overrides the filesystem case-sensitivity query used
            by abbreviate(). None asks the filesystem adapter.
        debug: Enable debug logging in the CLI
    """

    encoding: str = "utf-8"
    case_sensitive: bool | None = None
    debug: bool = False


def _parse_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {name}: {value!r}")


def _validate_encoding(encoding: Any) -> str:
    if not isinstance(encoding, str) or not encoding:
        raise ValueError(f"Invalid encoding: {encoding!r}")
    try:
        codecs.lookup(encoding)
    except LookupError:
        raise ValueError(f"Unknown encoding: {encoding!r}") from None
    return encoding


def config_path(config_dir: str | None = None) -> str:
    """Get the path to the config file inside config_dir (default ~/.pathkit)."""
    directory = config_dir if config_dir is not None else DEFAULT_CONFIG_DIR
    home = get_filesystem().home_directory()
    return posixpath.join(lexical.expand_tilde(directory, home), CONFIG_FILENAME)


def config_from_mapping(data: Mapping[str, Any], base: PathkitConfig | None = None) -> PathkitConfig:
    """Build a config from parsed TOML data, falling back to base for missing keys.

    Raises:
        ValueError: If a value is malformed or the encoding is unknown
    """
    base = base if base is not None else PathkitConfig()

    encoding = base.encoding
    if "encoding" in data:
        encoding = _validate_encoding(data["encoding"])

    case_sensitive = base.case_sensitive
    if "case_sensitive" in data:
        case_sensitive = _parse_bool(data["case_sensitive"], "case_sensitive")

    debug = base.debug
    if "debug" in data:
        debug = _parse_bool(data["debug"], "debug")

    return PathkitConfig(encoding=encoding, case_sensitive=case_sensitive, debug=debug)


def apply_environment(config: PathkitConfig, environ: Mapping[str, str]) -> PathkitConfig:
    """Override config values with PATHKIT_* environment variables."""
    overrides: dict[str, Any] = {}
    if environ.get(ENV_ENCODING):
        overrides["encoding"] = environ[ENV_ENCODING]
    if environ.get(ENV_CASE_SENSITIVE):
        overrides["case_sensitive"] = environ[ENV_CASE_SENSITIVE]
    if environ.get(ENV_DEBUG):
        overrides["debug"] = environ[ENV_DEBUG]
    return config_from_mapping(overrides, base=config)


def load_config(
    config_dir: str | None = None, *, environ: Mapping[str, str] | None = None
) -> PathkitConfig:
    """Load config from the config file if present, then apply the environment.

    A missing config file is not an error; defaults are used instead.

    Raises:
        ValueError: If the config file or an environment variable is malformed
    """
    filesystem = get_filesystem()
    path = config_path(config_dir)

    config = PathkitConfig()
    if filesystem.is_file(path):
        logger.debug("loading config from %s", path)
        try:
            data = tomllib.loads(filesystem.read_bytes(path).decode("utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Malformed config file {path}: {e}") from e
        config = config_from_mapping(data)

    return apply_environment(config, environ if environ is not None else os.environ)


def save_config(config: PathkitConfig, config_dir: str | None = None) -> str:
    """Save config to the config file, creating its directory if needed.

    Keys left at None are omitted. Returns the path that was written.
    """
    filesystem = get_filesystem()
    path = config_path(config_dir)

    doc = tomlkit.document()
    doc["encoding"] = config.encoding
    if config.case_sensitive is not None:
        doc["case_sensitive"] = config.case_sensitive
    doc["debug"] = config.debug

    filesystem.create_directory(posixpath.dirname(path), parents=True)
    filesystem.write_bytes(path, tomlkit.dumps(doc).encode("utf-8"))
    logger.debug("saved config to %s", path)
    return path


_active: PathkitConfig | None = None


def get_config() -> PathkitConfig:
    """Return the active config, loading it on first use."""
    global _active
    if _active is None:
        _active = load_config()
    return _active


def set_config(config: PathkitConfig | None) -> None:
    """Install config as the active config; None reloads on next access."""
    global _active
    _active = config
