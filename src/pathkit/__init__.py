"""Immutable path values with a lexical path algebra and pluggable filesystem access."""

from pathkit.config import PathkitConfig, get_config, load_config, save_config, set_config
from pathkit.enumerator import DirectoryEnumerator
from pathkit.errors import ErrorKind, classify_error, error_path
from pathkit.filesystem import (
    FakeFilesystem,
    Filesystem,
    RealFilesystem,
    get_filesystem,
    set_filesystem,
    use_filesystem,
)
from pathkit.path import Path
from pathkit.temporary import process_unique_temporary, unique_temporary
from pathkit.working_directory import change_directory

__all__ = [
    "DirectoryEnumerator",
    "ErrorKind",
    "FakeFilesystem",
    "Filesystem",
    "Path",
    "PathkitConfig",
    "RealFilesystem",
    "change_directory",
    "classify_error",
    "error_path",
    "get_config",
    "get_filesystem",
    "load_config",
    "process_unique_temporary",
    "save_config",
    "set_config",
    "set_filesystem",
    "unique_temporary",
    "use_filesystem",
]
