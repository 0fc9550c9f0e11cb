"""
Resolution of raw command lines against the registry.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional

from .command import NormalizedCommand
from .registry import DELIMITER, CommandRegistry
from .utils.logging import get_logger

WHITESPACE = re.compile(r"\s+")


@dataclass
class ResolvedInput:
    """Outcome of resolving one command line.

    ``command`` is None when nothing matched and no catch-all exists; in that
    case ``args`` holds every token of the input.
    """
    text: str
    command: Optional[NormalizedCommand] = None
    args: List[str] = field(default_factory=list)
    consumed: int = 0

    @property
    def matched(self) -> bool:
        return self.command is not None


class InputResolver:
    """Finds the longest registered path that prefixes the input tokens."""

    def __init__(self, registry: CommandRegistry):
        self.registry = registry
        self.logger = get_logger(__name__)

    def tokenize(self, text: str) -> List[str]:
        stripped = text.strip()
        if not stripped:
            return []
        return WHITESPACE.split(stripped)

    def resolve(self, text: str) -> ResolvedInput:
        """Resolve text that has already had its prefix removed."""
        tokens = self.tokenize(text)
        if not tokens:
            return self._unresolved(text, tokens)

        root, args = tokens[0], tokens[1:]

        root_command = self.registry.get(root)
        if root_command is None:
            return self._unresolved(text, tokens)

        if root_command.depth == 1:
            return ResolvedInput(text=text, command=root_command, args=args, consumed=1)

        command = root_command
        for idx in range(1, min(root_command.depth - 1, len(args)) + 1):
            candidate = DELIMITER.join([root] + args[:idx])
            sub = self.registry.get(candidate)
            if sub is not None:
                command = sub

        consumed = command.token_count
        self.logger.debug(f"Resolved '{text}' to '{command.name}' ({consumed} token(s))")

        return ResolvedInput(
            text=text,
            command=command,
            args=args[consumed - 1:],
            consumed=consumed,
        )

    def _unresolved(self, text: str, tokens: List[str]) -> ResolvedInput:
        default = self.registry.default_command
        if default is not None:
            return ResolvedInput(text=text, command=default, args=tokens, consumed=0)

        return ResolvedInput(text=text, command=None, args=tokens, consumed=0)
