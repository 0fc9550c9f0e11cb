"""
The embeddable OmniCLI engine.

The host forwards its text-input events here:

    cli = create_cli(commands, prefix=":")

    on_input_started()              -> cli.on_input_started()
    on_input_changed(text)          -> await cli.on_input_changed(text)
    on_input_entered(text)          -> cli.on_input_entered(text)
    on_input_cancelled()            -> cli.on_input_cancelled()

and renders the returned suggestions. The engine performs no I/O itself.
"""

from typing import Any, Callable, Iterable, List, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

from .command import Command, NormalizedCommand
from .config.models import InputConfig, OmniCLIConfig
from .motion.keymap import MotionContext
from .motion.parser import find_segments, parse_motion, strip_segments
from .registry import DELIMITER, CommandRegistry
from .resolver import InputResolver, ResolvedInput
from .rotator import arrange_suggestions
from .session import Session
from .suggestion import Suggestion
from .utils.error_handling import (
    NoCommandMatchedError,
    OmniCLIError,
    PrefixMismatchError,
    ProviderRejectedError,
    ValidationError,
    handle_command_action,
    handle_provider_operation,
)
from .utils.logging import get_logger, is_logging_initialized, setup_logging

ErrorCallback = Callable[[Exception], Any]


def _coerce_suggestion(item: Any) -> Suggestion:
    if isinstance(item, Suggestion):
        return item
    if isinstance(item, Mapping):
        return Suggestion(
            content=str(item["content"]),
            description=str(item.get("description", "")),
        )
    raise TypeError(f"expected a Suggestion, got {type(item).__name__}")


class OmniCLI:
    """Command resolution and suggestion engine for one text input."""

    def __init__(
        self,
        commands: Iterable[Command],
        config: Optional[OmniCLIConfig] = None,
        on_error: Optional[ErrorCallback] = None,
    ):
        self.logger = get_logger(__name__)
        self.config = config or OmniCLIConfig()
        self.prefix = self.config.input.prefix
        self.on_error = on_error

        self.registry = CommandRegistry(default_command=self.config.input.default_command)
        self.registry.register(commands)
        self.resolver = InputResolver(self.registry)
        self.session = Session()

        self.default_suggestion_text = self._build_default_suggestion_text()

    def _build_default_suggestion_text(self) -> str:
        return ", ".join(f"{self.prefix}{name}" for name in self.registry.top_level_names)

    def has_prefix(self, text: str) -> bool:
        return text.startswith(self.prefix)

    def strip_prefix(self, text: str) -> str:
        if self.prefix and text.startswith(self.prefix):
            return text[len(self.prefix):]
        return text

    def process_input(self, text: str) -> ResolvedInput:
        """Resolve a command line with its prefix and motion segments removed."""
        line = self.strip_prefix(text)
        if self.config.vim.enabled:
            line = strip_segments(line)
        return self.resolver.resolve(line)

    # Lifecycle entry points

    def on_input_started(self) -> None:
        self.logger.debug("Input session started")
        self.session.reset()

    def on_input_cancelled(self) -> None:
        self.logger.debug("Input session cancelled")
        self.session.reset()

    async def on_input_changed(self, text: str) -> List[Suggestion]:
        """Return the ordered, annotated suggestions for ``text``.

        Never raises for bad input or failing providers; those yield ``[]``.
        """
        if not self.has_prefix(text):
            return []

        sequence = self.session.begin_change(text)
        resolved = self.process_input(text)

        try:
            suggestions = await self._get_suggestions(resolved)
        except ProviderRejectedError as e:
            if self.session.is_current(sequence):
                if self.config.vim.enabled and find_segments(self.strip_prefix(text)):
                    self.session.enter_vim_mode()
                self.session.complete([], "")
                self._report_error(e)
            return []

        if not self.session.is_current(sequence):
            self.logger.debug(f"Discarding stale suggestions for '{text}' (#{sequence})")
            return []

        if self.config.vim.enabled:
            line = self.strip_prefix(text)
            if self.session.vim_mode or find_segments(line):
                ctx = self.session.context_for(len(suggestions))
            else:
                ctx = MotionContext()
            self.session.apply_motion(parse_motion(line, ctx))

        arrangement = arrange_suggestions(
            suggestions,
            self.session.position,
            keymap=self.session.keymap,
            vim_mode=self.session.vim_mode,
            highlight_hint=self.config.vim.highlight_hint,
            key_format=self.config.vim.key_format,
        )
        self.session.complete(arrangement.suggestions, arrangement.selected)

        return arrangement.suggestions

    def on_input_entered(self, text: str, disposition: Optional[str] = None) -> Optional[Exception]:
        """Run the command for ``text``.

        Returns None on success, otherwise the error: a prefix mismatch, no
        matching command, a failing action, or the error the action returned.
        """
        try:
            if not self.has_prefix(text):
                return PrefixMismatchError(
                    f"the given input does not match the prefix '{self.prefix}'",
                    details={"text": text, "prefix": self.prefix},
                )

            source = self.session.submission_text(text)
            resolved = self.process_input(source)
            if not resolved.matched:
                return NoCommandMatchedError(
                    "no command matched for the given input",
                    details={"text": source, "tokens": resolved.args},
                )

            self.logger.debug(
                f"Running '{resolved.command.name}' with {resolved.args}"
                + (f" ({disposition})" if disposition else "")
            )
            return self._run_action(resolved.command, resolved.args)
        finally:
            self.session.reset()

    # Internals

    async def _get_suggestions(self, resolved: ResolvedInput) -> List[Suggestion]:
        command = resolved.command
        if command is None:
            return self._command_listing()

        is_default = command is self.registry.default_command

        if command.suggestion_provider is not None:
            provided = await self._call_provider(command, resolved.args)
            if is_default:
                return provided
            return [
                Suggestion(
                    content=f"{command.name}{DELIMITER}{suggestion.content}",
                    description=suggestion.description,
                )
                for suggestion in provided
            ]

        if is_default:
            return self._command_listing()

        suggestions = [self._to_suggestion(command.name, command.description)]
        for sub in command.subcommands:
            suggestions.append(
                self._to_suggestion(f"{command.name}{DELIMITER}{sub.name}", sub.description)
            )
        return suggestions

    @handle_provider_operation("suggestion_provider")
    async def _call_provider(self, command: NormalizedCommand, args: List[str]) -> List[Suggestion]:
        provided = await command.suggestion_provider(list(args))
        return [_coerce_suggestion(item) for item in provided]

    def _command_listing(self) -> List[Suggestion]:
        suggestions = [Suggestion(content="", description=self.config.input.empty_hint)]
        if self.config.input.list_all_commands:
            for command in self.registry.entries():
                suggestions.append(self._to_suggestion(command.name, command.description))
        return suggestions

    def _to_suggestion(self, name: str, description: str) -> Suggestion:
        return Suggestion(
            content=f"{self.prefix}{name}",
            description=f"{name} - {description}" if description else name,
        )

    def _run_action(self, command: NormalizedCommand, args: List[str]) -> Optional[Exception]:
        action = handle_command_action(command.name, self.logger)(command.action)
        try:
            result = action(list(args))
        except OmniCLIError as e:
            return e

        if isinstance(result, Exception):
            return result
        return None

    def _report_error(self, error: Exception) -> None:
        self.session.last_error = error
        if self.on_error is None:
            return
        try:
            self.on_error(error)
        except Exception:
            self.logger.exception("on_error callback failed")


def create_cli(
    commands: Optional[Iterable[Command]] = None,
    config: Optional[OmniCLIConfig] = None,
    on_error: Optional[ErrorCallback] = None,
    **overrides: Any,
) -> OmniCLI:
    """Build an engine from command declarations.

    Keyword overrides are applied to the input section of the config, for
    example ``create_cli(commands, prefix=":")``.

    Raises:
        ValidationError: If commands are missing, malformed, or an override
            is unknown
    """
    if commands is None:
        raise ValidationError("commands is required")

    config = config or OmniCLIConfig()

    unknown = set(overrides) - set(InputConfig.model_fields)
    if unknown:
        raise ValidationError(f"unknown option(s): {', '.join(sorted(unknown))}")

    if overrides:
        try:
            input_config = InputConfig(**{**config.input.model_dump(), **overrides})
        except PydanticValidationError as e:
            raise ValidationError(f"invalid option: {e}") from e
        config = config.model_copy(update={"input": input_config})

    if (config.app.debug or config.app.log_file) and not is_logging_initialized():
        setup_logging(config, verbose=config.app.debug)

    return OmniCLI(commands, config=config, on_error=on_error)
