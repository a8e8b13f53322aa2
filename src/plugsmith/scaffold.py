"""Create a new plugin under ``<project_root>/plugins/<name>``.

The steps run in a fixed order and stop at the first failure:

    validate name -> refuse existing dir -> check project files and template
      -> mkdir -> write templates
      -> npm link (unless skipped) -> s-project.json -> package.json

Nothing is rolled back. When linking fails, the plugin directory and its
files stay on disk.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from plugsmith.errors import AlreadyExistsError, ScaffoldWriteError
from plugsmith.linker import Linker, NpmLinker
from plugsmith.naming import validate_name
from plugsmith.project import ProjectFiles
from plugsmith.template_set import MANIFEST_FILE, TemplateSet, load_templates, read_manifest_version

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScaffoldRequest:
    name: str
    skip_link: bool = False


@dataclass
class PluginDescriptor:
    name: str
    plugin_dir: Path
    version: str
    linked: bool
    files: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "plugin_dir": str(self.plugin_dir),
            "version": self.version,
            "linked": self.linked,
            "files": list(self.files),
        }


class PluginScaffolder:
    def __init__(
        self,
        project: ProjectFiles,
        templates: TemplateSet,
        linker: Linker | None = None,
    ) -> None:
        self.project = project
        self.templates = templates
        self.linker = linker or NpmLinker()

    def validate(self, name: str | None) -> str:
        return validate_name(name)

    def create(self, request: ScaffoldRequest) -> PluginDescriptor:
        name = self.validate(request.name)
        plugins_dir = self.project.plugins_dir
        plugin_dir = plugins_dir / name

        if plugin_dir.exists():
            raise AlreadyExistsError(f"Plugin with the name {name} already exists.")
        # Fail on broken project files or templates before touching the disk.
        self.project.load_project()
        self.project.load_package()
        files = self.templates.files_for(name)
        version = read_manifest_version(files[MANIFEST_FILE])

        try:
            plugins_dir.mkdir(exist_ok=True)
        except OSError as exc:
            raise ScaffoldWriteError(
                f"Cannot create plugins directory {plugins_dir}: {exc}"
            ) from exc
        try:
            plugin_dir.mkdir()
        except FileExistsError as exc:
            raise AlreadyExistsError(f"Plugin with the name {name} already exists.") from exc
        except OSError as exc:
            raise ScaffoldWriteError(f"Cannot create plugin directory {plugin_dir}: {exc}") from exc

        try:
            for filename, text in files.items():
                (plugin_dir / filename).write_text(text, encoding="utf-8")
        except OSError as exc:
            raise ScaffoldWriteError(f"Cannot write plugin files in {plugin_dir}: {exc}") from exc
        logger.debug("Wrote %s into %s", ", ".join(files), plugin_dir)

        if request.skip_link:
            logger.info("Skipping npm link for %s", name)
        else:
            self.linker.link_local(plugin_dir)
            self.linker.link_into_project(self.project.root, name)

        self.project.add_plugin(name)
        self.project.add_dependency(name, version)

        logger.info('Successfully created plugin scaffold with the name: "%s"', name)
        return PluginDescriptor(
            name=name,
            plugin_dir=plugin_dir,
            version=version,
            linked=not request.skip_link,
            files=tuple(files),
        )


def create_plugin(
    name: str,
    *,
    project_root: Path,
    skip_link: bool = False,
    templates_dir: Path | None = None,
    npm_command: str = "npm",
) -> PluginDescriptor:
    """Scaffold ``name`` into ``project_root`` using the packaged templates and npm."""
    scaffolder = PluginScaffolder(
        ProjectFiles(project_root),
        load_templates(templates_dir),
        NpmLinker(npm_command),
    )
    return scaffolder.create(ScaffoldRequest(name=name, skip_link=skip_link))
