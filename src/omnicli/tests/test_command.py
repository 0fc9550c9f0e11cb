"""
Tests for command declarations and normalization.
"""

import asyncio
import pytest

from omnicli.command import (
    Command,
    find_command_depth,
    noop,
    normalize_command,
    wrap_suggestion_provider,
)
from omnicli.suggestion import Suggestion
from omnicli.utils.error_handling import ValidationError


def leaf(name):
    return Command(name=name)


class TestFindCommandDepth:
    """Depth is one plus the depth of every child."""

    def test_childless_command(self):
        assert find_command_depth(leaf("solo")) == 1

    def test_chain(self):
        command = Command("a", subcommands=[Command("b", subcommands=[leaf("c")])])
        assert find_command_depth(command) == 3

    def test_sums_siblings(self):
        # a -> (b -> (c, d), e): 1 + (1 + 1 + 1) + 1
        command = Command("a", subcommands=[
            Command("b", subcommands=[leaf("c"), leaf("d")]),
            leaf("e"),
        ])
        assert find_command_depth(command) == 5

    def test_matches_recursive_definition(self):
        def depth(cmd):
            return 1 + sum(depth(sub) for sub in cmd.subcommands)

        command = Command("a", subcommands=[
            Command("b", subcommands=[leaf("c"), Command("d", subcommands=[leaf("x")])]),
            Command("e", subcommands=[leaf("f")]),
        ])
        assert find_command_depth(command) == depth(command)


class TestNormalizeCommand:
    """Defaults and derived fields of normalized commands."""

    def test_defaults(self):
        normalized = normalize_command(Command("solo"))

        assert normalized.name == "solo"
        assert normalized.action is noop
        assert normalized.subcommands == ()
        assert normalized.suggestion_provider is None
        assert normalized.depth == 1
        assert normalized.action(["anything"]) is None

    def test_lists_become_tuples(self):
        command = Command("a", aliases=["x", "y"], subcommands=[leaf("b")])

        assert command.aliases == ("x", "y")
        assert command.names == ("a", "x", "y")
        assert isinstance(command.subcommands, tuple)

    def test_token_count_follows_path(self):
        normalized = normalize_command(leaf("hello")).with_name("human say hello")

        assert normalized.path == ("human", "say", "hello")
        assert normalized.token_count == 3

    @pytest.mark.parametrize("name", ["", " padded", "two words", "tab\tname"])
    def test_rejects_bad_names(self, name):
        with pytest.raises(ValidationError):
            normalize_command(Command(name))

    def test_rejects_bad_alias(self):
        with pytest.raises(ValidationError):
            normalize_command(Command("ok", aliases=["not ok"]))

    def test_rejects_non_callable_action(self):
        with pytest.raises(ValidationError):
            normalize_command(Command("ok", action="print"))

    def test_rejects_non_callable_provider(self):
        with pytest.raises(ValidationError):
            normalize_command(Command("ok", suggestion_provider=["a"]))


class TestWrapSuggestionProvider:
    """Sync and async providers are awaited the same way."""

    @pytest.mark.asyncio
    async def test_sync_provider(self):
        provider = wrap_suggestion_provider(
            lambda args: [Suggestion(content=a, description=a) for a in args]
        )

        result = await provider(["x", "y"])

        assert [s.content for s in result] == ["x", "y"]

    @pytest.mark.asyncio
    async def test_async_provider(self):
        async def fetch(args):
            await asyncio.sleep(0)
            return (Suggestion(content="later", description=""),)

        provider = wrap_suggestion_provider(fetch)
        result = await provider([])

        assert result == [Suggestion(content="later", description="")]

    @pytest.mark.asyncio
    async def test_none_becomes_empty_list(self):
        provider = wrap_suggestion_provider(lambda args: None)

        assert await provider([]) == []

    @pytest.mark.asyncio
    async def test_normalized_provider_is_awaitable(self):
        normalized = normalize_command(
            Command("x", suggestion_provider=lambda args: [])
        )

        assert await normalized.suggestion_provider([]) == []


class TestCommandDeclaration:
    """Shapes accepted for aliases and subcommands."""

    def test_single_string_alias(self):
        command = Command("say", aliases="sy")

        assert command.aliases == ("sy",)
        assert command.names == ("say", "sy")

    def test_none_aliases(self):
        assert Command("say", aliases=None).aliases == ()
