"""Temporary directory helpers.

process_unique_temporary() names one directory per process under the system
temporary directory. unique_temporary() creates a fresh subdirectory of it on
every call. Neither is removed automatically.
"""

import logging
import os
import uuid

from pathkit.path import Path

logger = logging.getLogger(__name__)

_PROCESS_TOKEN = uuid.uuid4().hex


def _process_directory_name() -> str:
    return f"pathkit-{os.getpid()}-{_PROCESS_TOKEN}"


def process_unique_temporary() -> Path:
    """Return the per-process temporary directory, creating it if missing."""
    path = Path.temporary() + _process_directory_name()
    if not path.exists():
        logger.debug("creating process temporary directory %s", path)
        path.mkpath()
    return path


def unique_temporary() -> Path:
    """Create and return a new uniquely named temporary directory."""
    path = process_unique_temporary() + uuid.uuid4().hex
    path.mkdir()
    logger.debug("created temporary directory %s", path)
    return path
