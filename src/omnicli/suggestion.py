"""
Suggestion entries shown in the autocomplete menu.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Suggestion:
    """A single entry in the suggestion list.

    ``content`` is the text placed in the input when the entry is picked,
    ``description`` is what the menu displays.
    """
    content: str
    description: str


@dataclass(frozen=True)
class VimSuggestion(Suggestion):
    """Suggestion annotated with the keymap code that jumps to it."""
    key: str = ""
