import json
import logging
from pathlib import Path

import pytest

from plugsmith.config import get_settings
from plugsmith.errors import LinkError


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path: Path):
    for key in (
        "PLUGSMITH_INTERACTIVE",
        "PLUGSMITH_NPM_COMMAND",
        "PLUGSMITH_TEMPLATES_DIR",
        "PLUGSMITH_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    # Settings read .env from the working directory.
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    logging.getLogger("plugsmith").handlers.clear()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "proj"
    root.mkdir()
    (root / "s-project.json").write_text(
        json.dumps({"name": "proj", "plugins": []}, indent=2), encoding="utf-8"
    )
    (root / "package.json").write_text(
        json.dumps({"name": "proj", "version": "0.0.1", "dependencies": {}}, indent=2),
        encoding="utf-8",
    )
    return root


class RecordingLinker:
    def __init__(self, fail_on: str | None = None):
        self.calls: list[tuple[str, ...]] = []
        self.fail_on = fail_on

    def link_local(self, plugin_dir: Path) -> None:
        self.calls.append(("link_local", str(plugin_dir)))
        if self.fail_on == "link_local":
            raise LinkError(["npm", "link"], plugin_dir, 1, "npm ERR! boom")

    def link_into_project(self, project_root: Path, name: str) -> None:
        self.calls.append(("link_into_project", str(project_root), name))
        if self.fail_on == "link_into_project":
            raise LinkError(["npm", "link", name], project_root, 1, "npm ERR! boom")


@pytest.fixture
def make_linker():
    return RecordingLinker
