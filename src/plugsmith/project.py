"""Project metadata files touched by ``plugin create``.

Two JSON files at the project root are borrowed for the duration of an
operation, each through an explicit load -> mutate -> save cycle:

    s-project.json   <- project manifest, owns the ``plugins`` list
    package.json     <- npm manifest, owns the ``dependencies`` map
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from plugsmith.errors import ManifestError, ProjectNotFoundError

logger = logging.getLogger(__name__)

PROJECT_FILE = "s-project.json"
PACKAGE_FILE = "package.json"


def find_project_root(start: Path | None = None) -> Path:
    """Walk up from ``start`` to the first directory holding s-project.json."""
    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / PROJECT_FILE).is_file():
            return candidate
    raise ProjectNotFoundError(
        f"Not inside a project: no {PROJECT_FILE} found in {current} or its parents"
    )


def _read_json_object(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestError(f"{path} must contain a JSON object")
    return data


def _write_json(path: Path, data: dict[str, Any]) -> None:
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


class ProjectFiles:
    """Load/save access to the project's s-project.json and package.json."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    @property
    def project_path(self) -> Path:
        return self.root / PROJECT_FILE

    @property
    def package_path(self) -> Path:
        return self.root / PACKAGE_FILE

    @property
    def plugins_dir(self) -> Path:
        return self.root / "plugins"

    # ─── s-project.json ─────────────────────────────────────────────────

    def load_project(self) -> dict[str, Any]:
        if not self.project_path.is_file():
            raise ProjectNotFoundError(f"Project manifest not found: {self.project_path}")
        return _read_json_object(self.project_path)

    def save_project(self, data: dict[str, Any]) -> None:
        _write_json(self.project_path, data)

    def add_plugin(self, name: str) -> list[str]:
        """Append ``name`` to the project's plugin list if it is not there yet."""
        data = self.load_project()
        plugins = data.setdefault("plugins", [])
        if not isinstance(plugins, list):
            raise ManifestError(f"'plugins' in {self.project_path} must be a list")
        if name not in plugins:
            plugins.append(name)
            self.save_project(data)
            logger.debug("Added plugin %s to %s", name, self.project_path)
        return list(plugins)

    # ─── package.json ───────────────────────────────────────────────────

    def load_package(self) -> dict[str, Any]:
        if not self.package_path.exists():
            return {}
        return _read_json_object(self.package_path)

    def save_package(self, data: dict[str, Any]) -> None:
        _write_json(self.package_path, data)

    def add_dependency(self, name: str, version: str) -> dict[str, Any]:
        data = self.load_package()
        dependencies = data.setdefault("dependencies", {})
        if not isinstance(dependencies, dict):
            raise ManifestError(f"'dependencies' in {self.package_path} must be an object")
        dependencies[name] = version
        self.save_package(data)
        logger.debug("Set dependency %s=%s in %s", name, version, self.package_path)
        return dict(dependencies)
