from __future__ import annotations
from ..registry import Command
from ..errors import CommandError

class Type(Command):
    name = 'type'

    def run(self, args, state) -> None:
        if not args:
            raise CommandError('type: missing argument')
        if len(args) > 1:
            raise CommandError('type: too many arguments')

        target = args[0]
        if state.registry is not None and state.registry.exists(target):
            state.out(f"{target} is a shell builtin")
            return

        path = state.resolve(target)
        if path:
            state.out(f"{target} is {path}")
        else:
            state.out(f"{target}: not found")
