from __future__ import annotations


class ShellError(Exception):
    """Base class for errors raised inside the shell."""


class CommandError(ShellError):
    """A user input error; the dispatcher prints the message and carries on."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ShellExit(ShellError):
    """Raised by `exit`; only the shell loop catches it."""

    def __init__(self, status: int = 0) -> None:
        super().__init__(f"exit requested with status {status}")
        self.status = status


class RegistryError(ShellError):
    pass


class RegistryFrozenError(RegistryError):
    def __init__(self, name: str) -> None:
        super().__init__(f"cannot register '{name}': registry is frozen")
        self.name = name
