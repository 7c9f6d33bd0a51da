"""Environment utilities for resolving secret files.

Credentials such as the lock vendor bearer token are usually mounted as
Docker secrets. ``LOCK_VENDOR__AUTH_TOKEN_FILE``
pointing at a file is resolved into ``LOCK_VENDOR__AUTH_TOKEN`` before the
settings are loaded.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import MutableMapping, Optional

logger = logging.getLogger(__name__)

_FILE_SUFFIX = "_FILE"


def _read_secret(key: str, file_path: str) -> Optional[str]:
    try:
        return Path(file_path).read_text(encoding="utf-8").strip()
    except FileNotFoundError as exc:
        logger.warning(
            "env.secret_file.missing",
            extra={"key": key, "path": file_path, "error": str(exc)},
        )
    except UnicodeDecodeError as exc:
        logger.warning(
            "env.secret_file.decode_failed",
            extra={"key": key, "path": file_path, "error": str(exc)},
        )
    except OSError as exc:
        logger.warning(
            "env.secret_file.load_failed",
            extra={"key": key, "path": file_path, "error": str(exc)},
        )
    return None


def load_secret_file_variables(
    environ: Optional[MutableMapping[str, str]] = None,
) -> None:
    """
    Resolve environment variables that follow Docker secret conventions.

    For every KEY_FILE entry, read the referenced file and expose its
    contents via KEY unless KEY is already set. Errors are logged but do
    not raise exceptions.
    """
    env = os.environ if environ is None else environ

    for key, file_path in list(env.items()):
        if not key.endswith(_FILE_SUFFIX) or not file_path:
            continue
        target_key = key[: -len(_FILE_SUFFIX)]
        if env.get(target_key):
            continue
        value = _read_secret(key, file_path)
        if value is not None:
            env[target_key] = value


load_secret_file_variables()
