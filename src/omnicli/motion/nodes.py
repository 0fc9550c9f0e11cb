"""
Node and position types produced by the motion parser.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Optional


class NodeType(Enum):
    DIRECTIONAL = "directional"
    KEYMAP = "keymap"
    MULTIPLIER = "multiplier"


class Axis(str, Enum):
    X = "x"
    Y = "y"


# Reserved motion letters: (axis, signed delta)
DIRECTIONS: Dict[str, tuple] = {
    # Vim directions
    "h": (Axis.X, -1),
    "j": (Axis.Y, 1),
    "k": (Axis.Y, -1),
    "l": (Axis.X, 1),

    # Common suggestion traversing
    "n": (Axis.Y, 1),
    "p": (Axis.Y, -1),

    # Page forward/back
    "f": (Axis.Y, 5),
    "b": (Axis.Y, -5),
}

RESERVED_LETTERS = frozenset(DIRECTIONS)


@dataclass
class MotionNode:
    """One token of a motion segment, linked to the token after it.

    For KEYMAP nodes ``delta`` is an absolute index, or None when the code is
    not in the keymap. For MULTIPLIER nodes it is always 0 and the parsed
    factor lives in ``multiplier``.
    """
    key: str
    delta: Optional[int]
    type: NodeType
    next: Optional["MotionNode"] = None
    axis: Optional[Axis] = None
    multiplier: int = 1

    def __iter__(self) -> Iterator["MotionNode"]:
        node: Optional[MotionNode] = self
        while node is not None:
            yield node
            node = node.next

    def __repr__(self) -> str:
        # Avoid dumping the whole chain recursively
        return f"MotionNode(key={self.key!r}, delta={self.delta!r}, type={self.type.name})"


@dataclass
class MenuPosition:
    """Offset into the suggestion menu. ``x`` is reserved and stays 0."""
    x: int = 0
    y: int = 0
