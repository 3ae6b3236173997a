"""Conversion of leveled lists into trees."""

from __future__ import annotations

from typing import Sequence

from ..tree_printer import LeveledListItem, TreeNode


def tree_from_leveled_list(items: Sequence[LeveledListItem]) -> TreeNode:
    """Build a tree from items whose level gives their depth.

    Negative levels count as 0, and a level more than one deeper than the
    item before it is reduced to one deeper. The items are not modified.
    """
    if not items:
        return TreeNode()
    levels = [item.level for item in items]
    root = TreeNode()
    for index, item in enumerate(items):
        level = max(levels[index], 0)
        if index + 1 < len(levels) and levels[index + 1] - 1 > level:
            levels[index + 1] = level + 1
        node = root
        for _ in range(level):
            if not node.children:
                raise ValueError(f"item {item.text!r} at level {level} has no parent")
            node = node.children[-1]
        node.children.append(TreeNode(text=item.text))
    return root