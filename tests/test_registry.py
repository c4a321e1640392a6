import pytest

from minish_core.cli.errors import RegistryFrozenError
from minish_core.cli.registry import Command, CommandRegistry


class _Noop(Command):
    name = "noop"

    def run(self, args, state) -> None:
        pass


def test_lookup_missing_returns_none() -> None:
    reg = CommandRegistry()
    assert reg.lookup("nope") is None
    assert not reg.exists("nope")
    assert "nope" not in reg


def test_register_then_lookup() -> None:
    reg = CommandRegistry()
    handler = _Noop()
    reg.register("noop", handler)

    spec = reg.lookup("noop")
    assert spec is not None
    assert spec.handler is handler
    assert reg.exists("noop")
    assert len(reg) == 1


def test_last_registration_wins() -> None:
    reg = CommandRegistry()
    first, second = _Noop(), _Noop()
    reg.register("noop", first)
    reg.register("noop", second)
    assert reg.lookup("noop").handler is second
    assert len(reg) == 1


def test_names_are_case_sensitive() -> None:
    reg = CommandRegistry()
    reg.register("echo", _Noop())
    assert reg.exists("echo")
    assert not reg.exists("ECHO")


def test_exists_matches_lookup() -> None:
    reg = CommandRegistry()
    reg.register("a", _Noop())
    for name in ("a", "b", ""):
        assert reg.exists(name) == (reg.lookup(name) is not None)


def test_frozen_registry_rejects_registration() -> None:
    reg = CommandRegistry()
    reg.register("noop", _Noop())
    reg.freeze()
    assert reg.frozen
    with pytest.raises(RegistryFrozenError):
        reg.register("other", _Noop())
    assert reg.lookup("noop") is not None


def test_base_command_run_is_abstract() -> None:
    with pytest.raises(NotImplementedError):
        Command().run([], None)
