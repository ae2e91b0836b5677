"""Optional ``.env`` loading for the CLI and host applications.

Purpose
-------
Let operators keep ``LOG_BRIDGE_*`` settings in a ``.env`` file next to the
project instead of exporting them in every shell.

Contents
--------
* :data:`DOTENV_ENV_VAR` - environment toggle for dotenv loading.
* :func:`should_use_dotenv` - resolve CLI flag vs. environment toggle.
* :func:`enable_dotenv` - load the nearest ``.env`` without overriding values.
"""

from __future__ import annotations

from pathlib import Path
from threading import Lock

from dotenv import find_dotenv, load_dotenv

DOTENV_ENV_VAR = "LOG_BRIDGE_USE_DOTENV"
_TRUTHY = {"1", "true", "yes", "on"}

_LOADED_PATH: Path | None = None
_LOCK = Lock()


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Return whether ``.env`` loading is requested.

    An explicit CLI choice wins over the environment toggle.

    Examples
    --------
    >>> should_use_dotenv(explicit=None, env_value="yes")
    True
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv()
    False
    """
    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` walking up from the working directory.

    Existing environment variables keep precedence. The file is loaded once per
    process; later calls return the cached path.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """
    global _LOADED_PATH
    with _LOCK:
        if _LOADED_PATH is not None:
            return _LOADED_PATH
        found = find_dotenv(usecwd=True)
        if not found:
            return None
        load_dotenv(found, override=False)
        _LOADED_PATH = Path(found).resolve()
        return _LOADED_PATH


def _reset_dotenv_state_for_testing() -> None:
    global _LOADED_PATH
    with _LOCK:
        _LOADED_PATH = None


__all__ = ["DOTENV_ENV_VAR", "enable_dotenv", "should_use_dotenv"]
