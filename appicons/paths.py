"""Path resolution shared by the CLI commands and the font loader."""

from __future__ import annotations

import os


def home_directory() -> str | None:
    """Return the current user's home directory, or None if it is unknown.

    The home directory is unknown when neither ``HOME`` (``USERPROFILE`` on
    Windows) nor the password database names one.
    """
    home = os.path.expanduser("~")
    if home.startswith("~"):
        return None
    return home


def resolve_path(input_path: str) -> str:
    """Resolve a user-provided path to an absolute path.

    Handles:
    - Home directory expansion (``~`` and ``~/foo``; ``~user`` is left alone)
    - Relative paths (``./foo``, ``../foo``, ``foo/bar``) against the cwd
    - Absolute paths (normalized, otherwise unchanged)

    Only a tilde in the very first position is expanded. When the home
    directory cannot be determined, the current directory stands in for it.

    Args:
        input_path: User-provided path string.

    Returns:
        Absolute, normalized path.

    Example:
        >>> resolve_path("/tmp/icons/../out")
        '/tmp/out'
    """
    if input_path == "~" or input_path.startswith(("~/", "~" + os.sep)):
        # Strip every leading separator so join() cannot discard the home dir.
        remainder = input_path[1:].lstrip("/" + os.sep)
        home = home_directory() or os.getcwd()
        return os.path.abspath(os.path.join(home, remainder))
    return os.path.abspath(input_path)
