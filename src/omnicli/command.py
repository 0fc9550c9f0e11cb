"""
Command declarations and their normalized, registry-ready form.

A host declares a tree of ``Command`` objects. Before lookup each one is
normalized: the action defaults to a no-op, subcommands to an empty tuple,
the suggestion provider is wrapped so it is always awaitable, and the depth
of the subtree is computed once.
"""

import inspect
from dataclasses import dataclass, replace
from typing import Any, Awaitable, Callable, List, Optional, Sequence, Tuple, Union

from .suggestion import Suggestion
from .utils.error_handling import ValidationError, validate_input

ActionResult = Optional[Exception]
Action = Callable[[List[str]], ActionResult]
SuggestionProvider = Callable[
    [List[str]], Union[Sequence[Suggestion], Awaitable[Sequence[Suggestion]]]
]
AsyncSuggestionProvider = Callable[[List[str]], Awaitable[List[Suggestion]]]


def noop(args: List[str]) -> None:
    return None


@dataclass(frozen=True)
class Command:
    """A command as declared by the embedding application.

    Attributes:
        name: Token matched against the input, unique among siblings
        aliases: Alternate tokens that resolve to the same command
        description: Shown next to the command in suggestion lists
        action: Called with the leftover arguments when input is submitted
        subcommands: Nested commands reachable after this one
        suggestion_provider: Called with the leftover arguments while typing;
            may return a sequence or an awaitable of one
    """
    name: str
    aliases: Tuple[str, ...] = ()
    description: str = ""
    action: Optional[Action] = None
    subcommands: Tuple["Command", ...] = ()
    suggestion_provider: Optional[SuggestionProvider] = None

    def __post_init__(self):
        # Lists are accepted for convenience but stored as tuples
        aliases = self.aliases or ()
        if isinstance(aliases, str):
            aliases = (aliases,)
        object.__setattr__(self, "aliases", tuple(aliases))
        object.__setattr__(self, "subcommands", tuple(self.subcommands or ()))

    @property
    def names(self) -> Tuple[str, ...]:
        """Canonical name followed by every alias."""
        return (self.name,) + self.aliases


@dataclass(frozen=True)
class NormalizedCommand:
    """A command stored in the registry under one of its full paths.

    ``name`` is the full space-joined path (``"human say hello"``), so two
    entries created from the same declaration differ only in ``name``.
    """
    name: str
    description: str
    action: Action
    subcommands: Tuple[Command, ...]
    depth: int
    aliases: Tuple[str, ...] = ()
    suggestion_provider: Optional[AsyncSuggestionProvider] = None

    @property
    def path(self) -> Tuple[str, ...]:
        return tuple(self.name.split(" "))

    @property
    def token_count(self) -> int:
        """Number of input tokens this entry's path consumes."""
        return len(self.path)

    def with_name(self, name: str) -> "NormalizedCommand":
        return replace(self, name=name)


def find_command_depth(command: Command) -> int:
    """Depth is one for the command itself plus the depth of every child."""
    depth = 1
    stack: List[Any] = list(command.subcommands)
    while stack:
        sub = stack.pop()
        depth += 1
        stack.extend(sub.subcommands)
    return depth


def wrap_suggestion_provider(fn: SuggestionProvider) -> AsyncSuggestionProvider:
    """Wrap a sync-or-async provider so callers can always await it."""
    async def provider(args: List[str]) -> List[Suggestion]:
        suggestions = fn(args)
        if inspect.isawaitable(suggestions):
            suggestions = await suggestions
        return list(suggestions or [])

    provider.__name__ = getattr(fn, "__name__", "suggestion_provider")
    provider.__wrapped__ = fn
    return provider


def _validate_name(name: str) -> str:
    if not name or name != name.strip() or len(name.split()) != 1:
        raise ValidationError(f"command names must be single non-empty tokens, got {name!r}")
    return name


def validate_command(command: Command) -> Command:
    """Check a declaration before it is registered.

    Raises:
        ValidationError: If a name is not a single token or a callback is
            not callable
    """
    validate_input(command, "command", Command)
    validate_input(command.name, "command.name", str, validator=_validate_name)
    for alias in command.aliases:
        validate_input(alias, f"alias of {command.name!r}", str, validator=_validate_name)

    if command.action is not None and not callable(command.action):
        raise ValidationError(f"action of {command.name!r} must be callable")
    if command.suggestion_provider is not None and not callable(command.suggestion_provider):
        raise ValidationError(f"suggestion_provider of {command.name!r} must be callable")

    return command


def normalize_command(command: Command) -> NormalizedCommand:
    """Fill in defaults and compute depth for a declared command."""
    validate_command(command)

    provider = None
    if command.suggestion_provider is not None:
        provider = wrap_suggestion_provider(command.suggestion_provider)

    return NormalizedCommand(
        name=command.name,
        description=command.description or "",
        action=command.action or noop,
        subcommands=command.subcommands,
        depth=find_command_depth(command),
        aliases=command.aliases,
        suggestion_provider=provider,
    )

