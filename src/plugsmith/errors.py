"""Errors raised while scaffolding a plugin.

All of them are fatal for the current invocation; the CLI prints the
message and exits with status 1.
"""

from __future__ import annotations

from pathlib import Path


class PluginError(RuntimeError):
    """Base class for plugin scaffolding failures."""


class InvalidNameError(PluginError, ValueError):
    """Plugin name is empty or contains characters outside [A-Za-z0-9_-]."""


class AlreadyExistsError(PluginError, FileExistsError):
    """Target plugin directory is already present."""


class ProjectNotFoundError(PluginError, FileNotFoundError):
    """No project root (directory with s-project.json) could be located."""


class ManifestError(PluginError):
    """A project metadata file exists but has an unexpected shape."""


class TemplateNotFoundError(PluginError, FileNotFoundError):
    """A plugin template file is missing from the template directory."""


class ScaffoldWriteError(PluginError, OSError):
    """The plugin directory or one of its files could not be written."""


class LinkError(PluginError):
    """An npm link invocation failed."""

    def __init__(
        self,
        command: list[str],
        cwd: Path,
        returncode: int | None,
        output: str = "",
    ) -> None:
        self.command = list(command)
        self.cwd = cwd
        self.returncode = returncode
        self.output = output
        detail = output or (
            f"exit code {returncode}" if returncode is not None else "could not start"
        )
        super().__init__(f"`{' '.join(self.command)}` failed in {cwd}: {detail}")
