import io
import stat
import sys
from pathlib import Path
from typing import Callable, Dict, Tuple

import pytest

from minish_core.cli.config import Settings
from minish_core.cli.dispatcher import Dispatcher
from minish_core.cli.loader import build_registry
from minish_core.cli.logsetup import configure_logging
from minish_core.cli.registry import CommandRegistry
from minish_core.cli.state import ShellState

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="uses /bin/sh scripts")


@pytest.fixture
def registry() -> CommandRegistry:
    return build_registry()


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def make_script(bin_dir: Path) -> Callable[..., Path]:
    def _make(name: str, body: str, executable: bool = True) -> Path:
        script = bin_dir / name
        script.write_text("#!/bin/sh\n" + body + "\n", encoding="utf-8")
        mode = script.stat().st_mode
        if executable:
            script.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        else:
            script.chmod(mode & ~(stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH))
        return script

    return _make


@pytest.fixture
def environ(bin_dir: Path, tmp_path: Path) -> Dict[str, str]:
    home = tmp_path / "home"
    home.mkdir()
    return {"PATH": str(bin_dir), "HOME": str(home)}


@pytest.fixture
def shell(registry: CommandRegistry, environ: Dict[str, str]) -> Tuple[Dispatcher, io.StringIO, io.StringIO]:
    out, err = io.StringIO(), io.StringIO()
    state = ShellState(stdout=out, stderr=err, environ=environ)
    return Dispatcher(registry, state), out, err


@pytest.fixture(autouse=True)
def quiet_logging() -> io.StringIO:
    stream = io.StringIO()
    configure_logging(Settings(), stream)
    return stream
