"""Link a freshly scaffolded plugin with npm."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol

from plugsmith.errors import LinkError

logger = logging.getLogger(__name__)


class Linker(Protocol):
    def link_local(self, plugin_dir: Path) -> None: ...

    def link_into_project(self, project_root: Path, name: str) -> None: ...


class NpmLinker:
    """Runs ``npm link`` in the plugin dir, then ``npm link <name>`` in the project."""

    def __init__(self, npm_command: str = "npm") -> None:
        self.npm_command = npm_command

    def link_local(self, plugin_dir: Path) -> None:
        self._run([self.npm_command, "link"], cwd=plugin_dir)

    def link_into_project(self, project_root: Path, name: str) -> None:
        self._run([self.npm_command, "link", name], cwd=project_root)

    def _run(self, cmd: list[str], *, cwd: Path) -> None:
        logger.info("Running %s in %s", " ".join(cmd), cwd)
        try:
            proc = subprocess.run(
                cmd,
                cwd=str(cwd),
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise LinkError(cmd, cwd, None, str(exc)) from exc

        if proc.returncode != 0:
            err = (proc.stderr or proc.stdout or "").strip()
            raise LinkError(cmd, cwd, proc.returncode, err)
        logger.debug("%s finished: %s", " ".join(cmd), (proc.stdout or "").strip())
