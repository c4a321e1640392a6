from __future__ import annotations
import logging
import subprocess
from typing import List, Optional, TextIO

from .errors import CommandError, ShellExit
from .registry import CommandRegistry, CommandSpec
from .state import ShellState

log = logging.getLogger("minish.dispatch")

def _write_verbatim(stream: TextIO, data: bytes) -> None:
    """Write child output bytes untouched when the stream exposes its buffer."""
    if not data:
        return
    raw = getattr(stream, "buffer", None)
    if raw is None:
        stream.write(data.decode(errors="replace"))
        return
    stream.flush()
    raw.write(data)
    raw.flush()

class Dispatcher:
    """
    Resolves a parsed command line to a builtin or an external program.

    Builtins win over anything on PATH and never fall through to external
    execution. External failures of any kind (missing, not executable,
    non-zero status, spawn error) report '<name>: command not found' and
    return normally; only ShellExit escapes dispatch().
    """

    def __init__(self, registry: CommandRegistry, state: Optional[ShellState] = None) -> None:
        self.registry = registry
        self.state = state or ShellState()
        self.state.registry = registry

    def dispatch(self, args: List[str]) -> None:
        if not args:
            raise ValueError("dispatch() needs at least a command name")
        name, params = args[0], args[1:]

        spec = self.registry.lookup(name)
        if spec is not None:
            log.debug("builtin %r args=%r", name, params)
            self._run_builtin(spec, name, params)
            return

        log.debug("external %r args=%r", name, params)
        self._run_external(name, params)

    def _run_builtin(self, spec: CommandSpec, name: str, params: List[str]) -> None:
        try:
            spec.handler.run(params, self.state)
        except ShellExit:
            raise
        except CommandError as e:
            self.state.out(e.message)
        except Exception as e:
            log.exception("builtin %r failed", name)
            self.state.err(f"{name}: {e}")

    def _run_external(self, name: str, params: List[str]) -> None:
        path = self.state.resolve(name)
        if path is None:
            self._not_found(name)
            return

        try:
            proc = subprocess.run(
                [name, *params],
                executable=path,
                capture_output=True,
                env=dict(self.state.environ),
            )
        except OSError as e:
            log.debug("spawn of %s failed: %s", path, e)
            self._not_found(name)
            return

        if proc.stderr:
            _write_verbatim(self.state.stderr, proc.stderr)

        log.debug("%s exited with status %d", path, proc.returncode)
        if proc.returncode != 0:
            self._not_found(name)
            return

        _write_verbatim(self.state.stdout, proc.stdout)

    def _not_found(self, name: str) -> None:
        self.state.out(f"{name}: command not found")
