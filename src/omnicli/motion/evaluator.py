"""
Folding a motion chain into a vertical offset.
"""

from typing import Optional

from .nodes import Axis, MotionNode, NodeType


def calculate_delta(head: Optional[MotionNode]) -> int:
    """Net vertical offset of a chain.

    Directional and multiplier deltas add up. A keymap node replaces the
    running total with its absolute index; steps after it add on top of that
    index. Horizontal steps and unmapped codes contribute nothing.
    """
    delta = 0
    node = head
    while node is not None:
        if node.type is NodeType.KEYMAP:
            if node.delta is not None:
                delta = node.delta
        elif node.type is NodeType.DIRECTIONAL:
            if node.axis is not Axis.X:
                delta += node.delta
        else:
            delta += node.delta

        node = node.next

    return delta
