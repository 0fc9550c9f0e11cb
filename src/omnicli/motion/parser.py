"""
Lexer and parser for bracketed motion segments.

A motion segment is text like ``[2jk]`` embedded in the input. Inside it:

- a run of digits is a MULTIPLIER that scales the next token if (and only
  if) that token is directional, so ``2jj`` moves 2 + 1;
- one of ``h j k l n p f b`` is a DIRECTIONAL step;
- any other run of non-digit, non-motion characters is a KEYMAP code that
  jumps to an absolute suggestion index.

Parsing never raises on user text: unknown codes become no-op nodes.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .evaluator import calculate_delta
from .keymap import MotionContext
from .nodes import DIRECTIONS, MenuPosition, MotionNode, NodeType
from ..utils.error_handling import MalformedMotionTokenError
from ..utils.logging import get_logger

logger = get_logger(__name__)

# The closing bracket is optional so a segment is live while it is typed
MOTION_PATTERN = re.compile(r"\[[A-Za-z0-9]*\]?")

# Longer digit runs are truncated to this many leading digits
MAX_MULTIPLIER_DIGITS = 18


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _read_number(text: str) -> Tuple[MotionNode, int]:
    end = 0
    while end < len(text) and _is_digit(text[end]):
        end += 1
    digits = text[:end]
    if len(digits) > MAX_MULTIPLIER_DIGITS:
        logger.debug(f"Multiplier of {len(digits)} digits truncated to {MAX_MULTIPLIER_DIGITS}")
    return MotionNode(
        key=digits,
        delta=0,
        type=NodeType.MULTIPLIER,
        multiplier=int(digits[:MAX_MULTIPLIER_DIGITS]),
    ), end


def _read_directional(text: str) -> Tuple[MotionNode, int]:
    key = text[0]
    axis, delta = DIRECTIONS[key]
    return MotionNode(key=key, delta=delta, type=NodeType.DIRECTIONAL, axis=axis), 1


def _read_keymap(text: str, ctx: MotionContext) -> Tuple[MotionNode, int]:
    end = 0
    while end < len(text) and not _is_digit(text[end]) and text[end] not in DIRECTIONS:
        end += 1
    key = text[:end]

    delta = ctx.keymap.index_for(key)
    if delta is None:
        logger.debug(f"Motion code '{key}' is not in the keymap, ignoring it")

    return MotionNode(key=key, delta=delta, type=NodeType.KEYMAP), end


def _read_node(text: str, ctx: MotionContext) -> Tuple[MotionNode, int]:
    first = text[0]
    if _is_digit(first):
        return _read_number(text)
    if first in DIRECTIONS:
        return _read_directional(text)
    return _read_keymap(text, ctx)


def _bind(node: MotionNode, next_node: Optional[MotionNode]) -> MotionNode:
    """Link ``next_node`` after ``node``, applying a multiplier if needed."""
    node.next = next_node
    if (
        node.type is NodeType.MULTIPLIER
        and next_node is not None
        and next_node.type is NodeType.DIRECTIONAL
    ):
        next_node.delta = next_node.delta * node.multiplier
    return node


def lex(text: str, ctx: MotionContext) -> List[MotionNode]:
    """Split segment text into unlinked nodes."""
    nodes = []
    pos = 0
    while pos < len(text):
        node, consumed = _read_node(text[pos:], ctx)
        nodes.append(node)
        pos += consumed
    return nodes


def parse_nodes(text: str, ctx: MotionContext) -> Optional[MotionNode]:
    """Parse segment text into a linked chain, or None for empty text."""
    head = None
    for node in reversed(lex(text, ctx)):
        head = _bind(node, head)
    return head


def parse_directional_node(text: str, ctx: MotionContext) -> MotionNode:
    if not text or text[0] not in DIRECTIONS:
        raise MalformedMotionTokenError(f"'{text[:1]}' is not a motion letter")
    node, consumed = _read_directional(text)
    return _bind(node, parse_nodes(text[consumed:], ctx))


def parse_keymap_node(text: str, ctx: MotionContext) -> MotionNode:
    if not text or _is_digit(text[0]) or text[0] in DIRECTIONS:
        raise MalformedMotionTokenError(f"'{text[:1]}' does not start a keymap code")
    node, consumed = _read_keymap(text, ctx)
    return _bind(node, parse_nodes(text[consumed:], ctx))


def parse_number_node(text: str, ctx: MotionContext) -> MotionNode:
    if not text or not _is_digit(text[0]):
        raise MalformedMotionTokenError(f"'{text[:1]}' does not start a number")
    node, consumed = _read_number(text)
    return _bind(node, parse_nodes(text[consumed:], ctx))


@dataclass
class MotionParse:
    """Result of scanning a whole input line for motion segments."""
    text: str
    position: MenuPosition = field(default_factory=MenuPosition)
    chains: List[Optional[MotionNode]] = field(default_factory=list)

    @property
    def is_vim_mode(self) -> bool:
        return bool(self.chains)


def find_segments(raw: str) -> List[str]:
    """Return the inner text of every motion segment in ``raw``."""
    return [match.strip("[]") for match in MOTION_PATTERN.findall(raw)]


def strip_segments(raw: str) -> str:
    """Remove motion segments, leaving only the command line."""
    return MOTION_PATTERN.sub(" ", raw).strip()


def parse_motion(raw: str, ctx: MotionContext) -> MotionParse:
    """Parse every segment in ``raw`` and sum their offsets."""
    result = MotionParse(text=strip_segments(raw))

    for segment in find_segments(raw):
        head = parse_nodes(segment, ctx)
        result.chains.append(head)
        result.position.y += calculate_delta(head)

    return result
