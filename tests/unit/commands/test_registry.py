"""Tests for the verb registry."""

import pytest

from gcal.commands.models import CommandDescriptor
from gcal.commands.registry import CommandRegistry


def _noop(flags, args):
    return 0


def _descriptor(name: str) -> CommandDescriptor:
    return CommandDescriptor(name=name, syntax=name, usage=f"{name} things", handler=_noop)


class TestCommandRegistry:
    def test_lookup(self):
        registry = CommandRegistry([_descriptor("list"), _descriptor("auth")])
        assert registry.lookup("list").usage == "list things"
        assert registry.lookup("foo") is None

    def test_mapping_interface(self):
        registry = CommandRegistry([_descriptor("list"), _descriptor("auth")])
        assert len(registry) == 2
        assert "list" in registry
        assert registry["auth"].name == "auth"
        with pytest.raises(KeyError):
            registry["foo"]

    def test_iterates_in_name_order(self):
        registry = CommandRegistry([_descriptor("list"), _descriptor("auth"), _descriptor("show")])
        assert list(registry) == ["auth", "list", "show"]

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError, match="duplicate command: list"):
            CommandRegistry([_descriptor("list"), _descriptor("list")])

    def test_table_is_read_only(self):
        registry = CommandRegistry([_descriptor("list")])
        with pytest.raises(TypeError):
            registry._table["auth"] = _descriptor("auth")
        assert not hasattr(registry, "register")

    def test_descriptor_is_frozen(self):
        descriptor = _descriptor("list")
        with pytest.raises(AttributeError):
            descriptor.name = "other"
