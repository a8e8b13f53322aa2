"""Fixed template resources for a new plugin.

The packaged templates live in ``templates/plugin/`` next to this module:

    templates/plugin/
      package.json   <- manifest; ``{{pluginName}}`` is replaced with the name
      index.js       <- plugin stub, written verbatim
      README.md      <- written verbatim
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from plugsmith.errors import ManifestError, TemplateNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates" / "plugin"

NAME_PLACEHOLDER = "{{pluginName}}"
DEFAULT_VERSION = "0.0.1"

MANIFEST_FILE = "package.json"
INDEX_FILE = "index.js"
README_FILE = "README.md"


@dataclass(frozen=True)
class TemplateSet:
    manifest: str
    index: str
    readme: str

    def render_manifest(self, name: str) -> str:
        """Substitute the plugin name into the manifest template."""
        return self.manifest.replace(NAME_PLACEHOLDER, name)

    def files_for(self, name: str) -> dict[str, str]:
        return {
            MANIFEST_FILE: self.render_manifest(name),
            INDEX_FILE: self.index,
            README_FILE: self.readme,
        }


def read_manifest_version(text: str) -> str:
    """Return the ``version`` field of a package.json text."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Invalid plugin manifest template: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestError("Plugin manifest template must be a JSON object")
    return str(data.get("version") or DEFAULT_VERSION)


def load_templates(source: Path | None = None) -> TemplateSet:
    """Read the three plugin templates from ``source`` (packaged ones by default)."""
    template_dir = Path(source) if source is not None else DEFAULT_TEMPLATES_DIR
    logger.debug("Loading plugin templates from %s", template_dir)

    texts: dict[str, str] = {}
    for filename in (MANIFEST_FILE, INDEX_FILE, README_FILE):
        path = template_dir / filename
        if not path.is_file():
            raise TemplateNotFoundError(f"Plugin template not found: {path}")
        texts[filename] = path.read_text(encoding="utf-8")

    return TemplateSet(
        manifest=texts[MANIFEST_FILE],
        index=texts[INDEX_FILE],
        readme=texts[README_FILE],
    )
