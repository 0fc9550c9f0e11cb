"""
Reordering and annotation of the suggestion list.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, TypeVar

from .motion.keymap import KeyMap
from .motion.nodes import MenuPosition
from .suggestion import Suggestion, VimSuggestion

T = TypeVar("T")

DEFAULT_HIGHLIGHT_HINT = "[↓j↑k] ↳"
DEFAULT_KEY_FORMAT = "[{key}]"


def rotate_suggestions(items: Sequence[T], offset: int) -> List[T]:
    """Left-rotate ``items`` so the entry at ``offset`` comes first.

    Negative offsets wrap to the tail. An empty sequence is returned as is.
    """
    if not items:
        return list(items)

    y_pos = offset % len(items)
    return list(items[y_pos:]) + list(items[:y_pos])


@dataclass
class Arrangement:
    suggestions: List[Suggestion] = field(default_factory=list)
    selected: str = ""


def annotate_suggestions(
    suggestions: Sequence[Suggestion],
    keymap: KeyMap,
    highlighted: int,
    highlight_hint: str = DEFAULT_HIGHLIGHT_HINT,
    key_format: str = DEFAULT_KEY_FORMAT,
) -> List[VimSuggestion]:
    """Prefix each description with its jump code, or the hint if highlighted."""
    annotated = []
    for idx, suggestion in enumerate(suggestions):
        key = keymap.key_for(idx)
        if idx == highlighted:
            prefix = highlight_hint
        else:
            prefix = key_format.format(key=key)

        annotated.append(VimSuggestion(
            content=suggestion.content,
            description=f"{prefix} {suggestion.description}",
            key=key,
        ))
    return annotated


def arrange_suggestions(
    suggestions: Sequence[Suggestion],
    position: MenuPosition,
    keymap: Optional[KeyMap] = None,
    vim_mode: bool = False,
    highlight_hint: str = DEFAULT_HIGHLIGHT_HINT,
    key_format: str = DEFAULT_KEY_FORMAT,
) -> Arrangement:
    """Rotate the list to ``position`` and, in vim mode, annotate it.

    The returned ``selected`` is the content of the entry now first in the
    list, or "" if the list is empty.
    """
    if not suggestions:
        return Arrangement()

    items: Sequence[Suggestion] = suggestions
    if vim_mode:
        y_pos = position.y % len(suggestions)
        items = annotate_suggestions(
            suggestions,
            keymap or KeyMap(),
            y_pos,
            highlight_hint=highlight_hint,
            key_format=key_format,
        )

    rotated = rotate_suggestions(items, position.y)
    return Arrangement(suggestions=rotated, selected=rotated[0].content)
