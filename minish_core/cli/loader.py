from __future__ import annotations
import importlib
import logging
import pkgutil
from typing import List
from .registry import CommandRegistry, Command

log = logging.getLogger("minish.loader")

def discover_commands(registry: CommandRegistry, package_root: str = 'minish_core.cli.commands') -> List[str]:
    """Register every Command subclass found in the modules of `package_root`."""
    pkg = importlib.import_module(package_root)
    registered: List[str] = []
    for modinfo in pkgutil.iter_modules(pkg.__path__):
        if modinfo.name.startswith('_'):
            continue
        module = importlib.import_module(f"{package_root}.{modinfo.name}")
        for attr in dir(module):
            obj = getattr(module, attr)
            if not (isinstance(obj, type) and issubclass(obj, Command) and obj is not Command):
                continue
            # skip classes only imported into this module
            if obj.__module__ != module.__name__ or not obj.name:
                continue
            cmd = obj()
            registry.register(cmd.name, cmd)
            registered.append(cmd.name)
            log.debug("registered builtin %r from %s", cmd.name, module.__name__)
    return registered

def build_registry(package_root: str = 'minish_core.cli.commands') -> CommandRegistry:
    registry = CommandRegistry()
    discover_commands(registry, package_root)
    registry.freeze()
    return registry
