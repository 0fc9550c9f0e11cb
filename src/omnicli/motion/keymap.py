"""
Short jump codes for suggestion indices.

Codes are built only from letters that are not motion letters, so any code
typed inside a motion segment is read as a single keymap token. The first 18
indices get one letter, the next 18*18 get two, and so on.
"""

import string
from dataclasses import dataclass, field
from typing import Dict, Optional

from .nodes import RESERVED_LETTERS
from ..utils.logging import performance_timer

KEY_ALPHABET = "".join(c for c in string.ascii_lowercase if c not in RESERVED_LETTERS)


@dataclass
class KeyMap:
    key_to_index: Dict[str, int] = field(default_factory=dict)
    index_to_key: Dict[int, str] = field(default_factory=dict)

    @property
    def size(self) -> int:
        return len(self.index_to_key)

    def key_for(self, index: int) -> str:
        return self.index_to_key.get(index, "")

    def index_for(self, key: str) -> Optional[int]:
        return self.key_to_index.get(key)


@dataclass
class MotionContext:
    """What the parser needs to resolve keymap tokens."""
    keymap: KeyMap = field(default_factory=KeyMap)


def code_for_index(index: int) -> str:
    """Return the jump code for ``index`` (0 -> 'a', 17 -> 'z', 18 -> 'aa')."""
    base = len(KEY_ALPHABET)
    length = 1
    block = base
    while index >= block:
        index -= block
        length += 1
        block *= base

    letters = []
    for _ in range(length):
        index, remainder = divmod(index, base)
        letters.append(KEY_ALPHABET[remainder])
    return "".join(reversed(letters))


@performance_timer("keymap generation")
def generate_keymap(length: int) -> KeyMap:
    """Build the code <-> index bijection for a list of ``length`` entries."""
    keymap = KeyMap()
    for idx in range(max(length, 0)):
        key = code_for_index(idx)
        keymap.key_to_index[key] = idx
        keymap.index_to_key[idx] = key
    return keymap


def create_context(size: int) -> MotionContext:
    return MotionContext(keymap=generate_keymap(size))
