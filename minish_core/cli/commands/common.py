from __future__ import annotations
import re
from ..registry import Command
from ..errors import ShellExit

_EXIT_CODE_RE = re.compile(r"[+-]?[0-9]+")

class Echo(Command):
    name = 'echo'

    def run(self, args, state) -> None:
        state.out(' '.join(args))

class Exit(Command):
    name = 'exit'

    def run(self, args, state) -> None:
        if not args:
            raise ShellExit(0)
        if not _EXIT_CODE_RE.fullmatch(args[0]):
            state.out('Invalid exit code')
            return
        raise ShellExit(int(args[0]))
