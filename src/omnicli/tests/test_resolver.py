"""
Tests for longest-prefix resolution of command lines.
"""

import pytest

from omnicli.command import Command
from omnicli.registry import CommandRegistry
from omnicli.resolver import InputResolver


@pytest.fixture
def resolver(sample_commands):
    registry = CommandRegistry()
    registry.register(sample_commands)
    return InputResolver(registry)


class TestInputResolver:

    def test_longest_prefix_match(self, resolver):
        resolved = resolver.resolve("human say hello Alice")

        assert resolved.command.name == "human say hello"
        assert resolved.args == ["Alice"]
        assert resolved.consumed == 3

    def test_aliases_resolve_at_each_level(self, resolver):
        resolved = resolver.resolve("human s h Alice Bob")

        assert resolved.command.name == "human s h"
        assert resolved.args == ["Alice", "Bob"]

    def test_partial_path(self, resolver):
        resolved = resolver.resolve("human say")

        assert resolved.command.name == "human say"
        assert resolved.args == []

    def test_falls_back_to_root(self, resolver):
        resolved = resolver.resolve("human dance now")

        assert resolved.command.name == "human"
        assert resolved.args == ["dance", "now"]

    def test_stops_at_deepest_match(self, resolver):
        resolved = resolver.resolve("human say goodbye hello")

        assert resolved.command.name == "human say"
        assert resolved.args == ["goodbye", "hello"]

    def test_depth_one_command(self, resolver):
        resolved = resolver.resolve("ls  many   spaced\targs")

        assert resolved.command.name == "ls"
        assert resolved.args == ["many", "spaced", "args"]
        assert resolved.consumed == 1

    def test_unknown_root_without_default(self, resolver):
        resolved = resolver.resolve("dance all night")

        assert resolved.command is None
        assert not resolved.matched
        assert resolved.args == ["dance", "all", "night"]

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_blank_input(self, resolver, text):
        resolved = resolver.resolve(text)

        assert resolved.command is None
        assert resolved.args == []

    def test_unknown_root_routes_to_default(self):
        registry = CommandRegistry(default_command="*")
        registry.register([Command("*"), Command("known")])
        resolver = InputResolver(registry)

        resolved = resolver.resolve("search for cats")

        assert resolved.command.name == "*"
        assert resolved.args == ["search", "for", "cats"]
        assert resolved.consumed == 0

    def test_known_root_ignores_default(self):
        registry = CommandRegistry(default_command="*")
        registry.register([Command("*"), Command("known")])
        resolver = InputResolver(registry)

        assert resolver.resolve("known arg").command.name == "known"

    def test_args_shorter_than_depth(self, resolver):
        resolved = resolver.resolve("human")

        assert resolved.command.name == "human"
        assert resolved.args == []

    def test_leading_whitespace(self, resolver):
        resolved = resolver.resolve("   human say hello   Bob ")

        assert resolved.command.name == "human say hello"
        assert resolved.args == ["Bob"]
