from __future__ import annotations
import logging
import os
import sys
from typing import Mapping, Optional, TextIO

from .config import Settings
from .dispatcher import Dispatcher
from .errors import ShellExit
from .loader import build_registry
from .logsetup import configure_logging, release_logging
from .registry import CommandRegistry
from .state import ShellState
from .tokenizer import tokenize_command

log = logging.getLogger("minish.shell")

def _strip_newline(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line

def run(stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        settings: Optional[Settings] = None,
        registry: Optional[CommandRegistry] = None,
        environ: Optional[Mapping[str, str]] = None) -> int:
    """Run the read-parse-dispatch loop and return the exit status."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    environ = os.environ if environ is None else environ
    settings = settings or Settings.from_env(environ)

    configure_logging(settings, stderr)

    if registry is None:
        registry = build_registry()
    state = ShellState(stdout=stdout, stderr=stderr, environ=environ)
    dispatcher = Dispatcher(registry, state)

    try:
        while True:
            stdout.write(settings.prompt)
            stdout.flush()

            try:
                raw = stdin.readline()
            except OSError as e:
                log.error("reading input failed", exc_info=True)
                stderr.write(f"minish: error reading input: {e}\n")
                return 1

            # readline() returns '' only at end of input
            if raw == "":
                log.debug("end of input")
                return 0

            parsed = tokenize_command(_strip_newline(raw))
            log.debug("parsed: %r", parsed)
            if parsed is None:
                continue

            name, params = parsed
            try:
                dispatcher.dispatch([name, *params])
            except ShellExit as e:
                log.debug("exit with status %d", e.status)
                return e.status
    finally:
        state.flush()
        release_logging()
