from __future__ import annotations
import os
from ..registry import Command
from ..errors import CommandError

def _expand_home(path: str, environ) -> str:
    """Expand a bare '~' or a leading '~/' using HOME."""
    if path != '~' and not path.startswith('~/'):
        return path
    home = environ.get('HOME')
    if not home:
        raise CommandError('cd: HOME not set')
    return home + path[1:]

class Pwd(Command):
    name = 'pwd'

    def run(self, args, state) -> None:
        if args:
            raise CommandError('pwd: too many arguments')
        state.out(os.getcwd())

class Cd(Command):
    name = 'cd'

    def run(self, args, state) -> None:
        if not args:
            raise CommandError('cd: missing argument')
        if len(args) > 1:
            raise CommandError('cd: too many arguments')

        target = _expand_home(args[0], state.environ)
        try:
            os.chdir(target)
        except (FileNotFoundError, NotADirectoryError):
            state.err(f"{args[0]}: No such file or directory")
        except PermissionError:
            state.err(f"{args[0]}: Permission denied")
        except OSError:
            state.err(f"{args[0]}: No such file or directory")
