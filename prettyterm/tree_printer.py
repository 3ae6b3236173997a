"""Rendering of nested tree structures with box-drawing connectors."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import TextIO

from .theme import DEFAULT_THEME, Style


@dataclass
class TreeNode:
    """A node of a tree: a text and its child nodes."""

    children: list[TreeNode] = field(default_factory=list)
    text: str = ""


@dataclass
class LeveledListItem:
    """A text paired with an indentation level."""

    level: int = 0
    text: str = ""


LeveledList = list[LeveledListItem]


@dataclass(frozen=True)
class TreePrinter:
    """Renders a TreeNode and its descendants."""

    root: TreeNode = field(default_factory=TreeNode)
    tree_style: Style | None = None
    text_style: Style | None = None
    top_right_corner_string: str = ""
    top_right_down_string: str = ""
    horizontal_string: str = ""
    vertical_string: str = ""
    right_down_left_string: str = ""
    indent: int = 0
    writer: TextIO | None = field(default=None, compare=False)

    def with_tree_style(self, style: Style) -> TreePrinter:
        """Return a copy with a different connector style."""
        return replace(self, tree_style=style)

    def with_text_style(self, style: Style) -> TreePrinter:
        """Return a copy with a different text style."""
        return replace(self, text_style=style)

    def with_top_right_corner_string(self, s: str) -> TreePrinter:
        """Return a copy with a different last-item connector."""
        return replace(self, top_right_corner_string=s)

    def with_top_right_down_string_ongoing(self, s: str) -> TreePrinter:
        """Return a copy with a different ongoing-item connector."""
        return replace(self, top_right_down_string=s)

    def with_horizontal_string(self, s: str) -> TreePrinter:
        """Return a copy with a different horizontal line string."""
        return replace(self, horizontal_string=s)

    def with_vertical_string(self, s: str) -> TreePrinter:
        """Return a copy with a different vertical line string."""
        return replace(self, vertical_string=s)

    def with_root(self, root: TreeNode) -> TreePrinter:
        """Return a copy rendering ``root``."""
        return replace(self, root=root)

    def with_indent(self, indent: int) -> TreePrinter:
        """Return a copy with a different indent; values below 1 become 1."""
        return replace(self, indent=max(indent, 1))

    def with_writer(self, writer: TextIO) -> TreePrinter:
        """Return a copy that writes to ``writer``."""
        return replace(self, writer=writer)

    def render(self) -> None:
        """Write the rendered tree, followed by a newline, to the writer."""
        (self.writer if self.writer is not None else sys.stdout).write(self.srender() + "\n")

    def srender(self) -> str:
        """Return the rendered tree."""
        tree_style = self.tree_style if self.tree_style is not None else Style()
        text_style = self.text_style if self.text_style is not None else Style()
        result = ""
        if self.root.text:
            result += text_style.sprint(self.root.text) + "\n"
        return result + "".join(self._walk(self.root.children, "", tree_style, text_style))

    def _walk(self, nodes: list[TreeNode], prefix: str, tree_style: Style, text_style: Style):
        horizontal = tree_style.sprint(self.horizontal_string)
        last_index = len(nodes) - 1
        for index, node in enumerate(nodes):
            is_last = index == last_index
            connector = self.top_right_corner_string if is_last else self.top_right_down_string
            line = prefix + tree_style.sprint(connector)
            if not node.children:
                yield line + horizontal * self.indent + text_style.sprint(node.text) + "\n"
                continue
            yield (
                line
                + horizontal * (self.indent - 1)
                + tree_style.sprint(self.right_down_left_string)
                + text_style.sprint(node.text)
                + "\n"
            )
            if is_last:
                child_prefix = prefix + " " * self.indent
            else:
                child_prefix = prefix + tree_style.sprint(self.vertical_string) + " " * (self.indent - 1)
            yield from self._walk(node.children, child_prefix, tree_style, text_style)


DEFAULT_TREE = TreePrinter(
    tree_style=DEFAULT_THEME.tree_style,
    text_style=DEFAULT_THEME.tree_text_style,
    top_right_corner_string="└",
    horizontal_string="─",
    top_right_down_string="├",
    vertical_string="│",
    right_down_left_string="┬",
    indent=2,
)