"""
Flat lookup table for a declared command tree.

Every command is stored once per name variant (canonical name and each alias)
under its full space-joined path, at every nesting level. Looking up any
prefix of any registered command is then a single dict access.
"""

from typing import Dict, Iterable, Iterator, List, Optional

from .command import Command, NormalizedCommand, normalize_command
from .config.models import DEFAULT_COMMAND_NAME
from .utils.logging import get_logger, log_performance

DELIMITER = " "


class CommandRegistry:
    """Path-keyed table of normalized commands."""

    def __init__(self, default_command: str = DEFAULT_COMMAND_NAME):
        self.logger = get_logger(__name__)
        self.default_command_name = default_command
        self._commands: Dict[str, NormalizedCommand] = {}
        self._top_level: List[str] = []

    def register(self, commands: Iterable[Command]) -> None:
        """Register a list of command trees.

        A later registration under an existing path replaces the earlier one.
        """
        commands = list(commands)
        with log_performance(f"registering {len(commands)} command tree(s)"):
            for command in commands:
                if command.name not in self._top_level:
                    self._top_level.append(command.name)
            self._process_commands(commands, "")

        self.logger.debug(f"Registry holds {len(self._commands)} path(s)")

    def _process_commands(self, commands: Iterable[Command], prefix: str) -> None:
        for command in commands:
            normalized = normalize_command(command)

            for name in command.names:
                key = f"{prefix}{DELIMITER}{name}" if prefix else name

                if key in self._commands:
                    self.logger.debug(f"Overwriting registered command '{key}'")
                self._commands[key] = normalized.with_name(key)

                self._process_commands(command.subcommands, key)

    def get(self, key: str) -> Optional[NormalizedCommand]:
        return self._commands.get(key)

    @property
    def default_command(self) -> Optional[NormalizedCommand]:
        """The catch-all command, if one was registered."""
        return self._commands.get(self.default_command_name)

    @property
    def top_level_names(self) -> List[str]:
        """Canonical names of the registered roots, excluding the catch-all."""
        return [name for name in self._top_level if name != self.default_command_name]

    def entries(self) -> List[NormalizedCommand]:
        """Every registered path except the catch-all, in insertion order."""
        return [
            command for key, command in self._commands.items()
            if key != self.default_command_name
        ]

    def __contains__(self, key: str) -> bool:
        return key in self._commands

    def __getitem__(self, key: str) -> NormalizedCommand:
        return self._commands[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)
