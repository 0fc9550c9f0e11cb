"""
Per-instance input session state.

One ``Session`` lives as long as its ``OmniCLI``. It is only mutated from the
four lifecycle entry points (start, change, submit, cancel), which the host
calls from a single event loop, so it needs no locking.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .motion.keymap import KeyMap, MotionContext, generate_keymap
from .motion.nodes import MenuPosition, MotionNode
from .motion.parser import MotionParse
from .suggestion import Suggestion
from .utils.logging import get_logger


class SessionState(Enum):
    IDLE = "idle"
    COMPOSING = "composing"
    VIM_MODE_ACTIVE = "vim_mode_active"


@dataclass
class Session:
    """State carried between change events of one typing episode."""
    state: SessionState = SessionState.IDLE
    raw_text: str = ""
    position: MenuPosition = field(default_factory=MenuPosition)
    chains: List[Optional[MotionNode]] = field(default_factory=list)
    keymap: Optional[KeyMap] = None
    selected: str = ""
    suggestions: List[Suggestion] = field(default_factory=list)
    last_error: Optional[Exception] = None

    # Survives resets so completions issued before a reset are still stale
    sequence: int = 0

    def __post_init__(self):
        self.logger = get_logger(__name__)

    @property
    def vim_mode(self) -> bool:
        return self.state is SessionState.VIM_MODE_ACTIVE

    def reset(self) -> None:
        """Return to IDLE, dropping the keymap, selection and motion chain."""
        self.state = SessionState.IDLE
        self.raw_text = ""
        self.position = MenuPosition()
        self.chains = []
        self.keymap = None
        self.selected = ""
        self.suggestions = []
        self.last_error = None
        self.sequence += 1

    def begin_change(self, raw_text: str) -> int:
        """Record a change event and return its sequence number."""
        if self.state is SessionState.IDLE:
            self.state = SessionState.COMPOSING
        self.raw_text = raw_text
        self.sequence += 1
        return self.sequence

    def is_current(self, sequence: int) -> bool:
        return sequence == self.sequence

    def context_for(self, size: int) -> MotionContext:
        """Motion context with a keymap for ``size`` entries, cached by size."""
        if self.keymap is None or self.keymap.size != size:
            self.logger.debug(f"Generating keymap for {size} suggestion(s)")
            self.keymap = generate_keymap(size)
        return MotionContext(keymap=self.keymap)

    def enter_vim_mode(self) -> None:
        if self.state is not SessionState.VIM_MODE_ACTIVE:
            self.logger.debug("Entering vim mode")
            self.state = SessionState.VIM_MODE_ACTIVE

    def apply_motion(self, motion: MotionParse) -> None:
        self.chains = motion.chains
        self.position = motion.position
        if motion.is_vim_mode:
            self.enter_vim_mode()

    def complete(self, suggestions: List[Suggestion], selected: str) -> None:
        self.suggestions = suggestions
        self.selected = selected

    def submission_text(self, text: str) -> str:
        """Text to resolve on submit: the highlighted entry in vim mode."""
        if self.vim_mode and self.selected:
            return self.selected
        return text
