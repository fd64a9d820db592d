"""
Shared test fixtures and configuration.
"""

import logging
import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    """Write a complete vimforge.yml into a temp directory."""
    path = tmp_path / "vimforge.yml"
    path.write_text(textwrap.dedent("""\
        defaults:
          dialect: vimscript
          lua_manager: packer
          vimscript_manager: dein
          scope: o
        web:
          host: 127.0.0.1
          port: 9001
    """))
    return path


@pytest.fixture
def isolated_cwd(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty directory so no stray vimforge.yml is picked up."""
    work = tmp_path_factory.mktemp("cwd")
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def restore_logging():
    """Put the root logger back the way it was after a test reconfigures it."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
