"""
Vim-style navigation of the suggestion list.

Usage:
    from omnicli.motion import create_context, parse_motion

    ctx = create_context(len(suggestions))
    parsed = parse_motion("list [2j]", ctx)
    parsed.position.y   # 2
"""

from .nodes import (
    Axis,
    DIRECTIONS,
    MenuPosition,
    MotionNode,
    NodeType,
    RESERVED_LETTERS,
)

from .keymap import (
    KEY_ALPHABET,
    KeyMap,
    MotionContext,
    code_for_index,
    create_context,
    generate_keymap,
)

from .evaluator import calculate_delta

from .parser import (
    MOTION_PATTERN,
    MotionParse,
    find_segments,
    lex,
    parse_directional_node,
    parse_keymap_node,
    parse_motion,
    parse_nodes,
    parse_number_node,
    strip_segments,
)

__all__ = [
    "Axis",
    "DIRECTIONS",
    "MenuPosition",
    "MotionNode",
    "NodeType",
    "RESERVED_LETTERS",
    "KEY_ALPHABET",
    "KeyMap",
    "MotionContext",
    "code_for_index",
    "create_context",
    "generate_keymap",
    "calculate_delta",
    "MOTION_PATTERN",
    "MotionParse",
    "find_segments",
    "lex",
    "parse_directional_node",
    "parse_keymap_node",
    "parse_motion",
    "parse_nodes",
    "parse_number_node",
    "strip_segments",
]
