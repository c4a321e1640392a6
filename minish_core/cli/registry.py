from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from .errors import RegistryFrozenError

log = logging.getLogger("minish.registry")

@dataclass
class CommandSpec:
    name: str
    handler: "Command"

class CommandRegistry:
    def __init__(self) -> None:
        self._by_name: Dict[str, CommandSpec] = {}
        self._frozen = False

    def register(self, name: str, handler: "Command") -> CommandSpec:
        if self._frozen:
            raise RegistryFrozenError(name)
        spec = CommandSpec(name=name, handler=handler)
        if name in self._by_name:
            log.debug("overwriting handler for %r", name)
        self._by_name[name] = spec
        return spec

    def lookup(self, name: str) -> Optional[CommandSpec]:
        return self._by_name.get(name)

    def exists(self, name: str) -> bool:
        return name in self._by_name

    def names(self) -> List[str]:
        return sorted(self._by_name.keys())

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)

class Command:
    name: str = ''

    def run(self, args: list[str], state) -> None:
        raise NotImplementedError('Command.run must be implemented')
