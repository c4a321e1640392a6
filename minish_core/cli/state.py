from __future__ import annotations
import os
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Mapping, Optional, TextIO

from .pathsearch import find_executable

if TYPE_CHECKING:
    from .registry import CommandRegistry

@dataclass
class ShellState:
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)
    environ: Mapping[str, str] = field(default_factory=lambda: os.environ)

    # injected by the Dispatcher that owns it
    registry: Optional["CommandRegistry"] = None

    which: Callable[..., Optional[str]] = find_executable

    def out(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def err(self, text: str) -> None:
        self.stderr.write(text + "\n")

    def resolve(self, name: str) -> Optional[str]:
        return self.which(name, self.environ)

    def flush(self) -> None:
        self.stdout.flush()
        self.stderr.flush()
