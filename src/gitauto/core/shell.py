"""Shell environment abstraction.

Tool lookup goes through this interface so that commands can be tested
against environments with or without git/gh installed.
"""

import shutil
from abc import ABC, abstractmethod


class Shell(ABC):
    """Abstract interface for shell environment queries."""

    @abstractmethod
    def get_installed_tool_path(self, tool_name: str) -> str | None:
        """Return the absolute path of an executable on PATH, or None.

        Args:
            tool_name: Executable name (e.g. "git", "gh")

        Returns:
            Resolved path, or None if the tool is not installed
        """
        ...


class RealShell(Shell):
    """Production implementation backed by shutil.which."""

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        return shutil.which(tool_name)
