"""plugsmith: scaffold framework plugins.

Creates ``plugins/<name>/`` inside a project from fixed templates, links
it with npm, and registers it in ``s-project.json`` and ``package.json``.
"""

from plugsmith.errors import (
    AlreadyExistsError,
    InvalidNameError,
    LinkError,
    ManifestError,
    PluginError,
    ProjectNotFoundError,
    ScaffoldWriteError,
    TemplateNotFoundError,
)
from plugsmith.naming import validate_name
from plugsmith.scaffold import PluginDescriptor, PluginScaffolder, ScaffoldRequest, create_plugin

__all__ = [
    "AlreadyExistsError",
    "InvalidNameError",
    "LinkError",
    "ManifestError",
    "PluginDescriptor",
    "PluginError",
    "PluginScaffolder",
    "ProjectNotFoundError",
    "ScaffoldRequest",
    "ScaffoldWriteError",
    "TemplateNotFoundError",
    "create_plugin",
    "validate_name",
]
