"""Version management for git-commit-lint."""

import importlib.metadata

from . import __version__


def get_current_version() -> str:
    """Get the current version of git-commit-lint."""
    return __version__


def get_installed_version() -> str:
    """Get the installed version from pip metadata."""
    try:
        return importlib.metadata.version("git-commit-lint")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def get_version_summary() -> str:
    """Get a brief version summary for CLI output."""
    current_version = get_current_version()
    installed_version = get_installed_version()

    if current_version == installed_version:
        return f"git-commit-lint {current_version}"
    else:
        return f"git-commit-lint {current_version} (installed: {installed_version})"
