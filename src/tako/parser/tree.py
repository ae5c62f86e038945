"""Render a syntax tree as an indented, width-bounded diagram."""

import json
from enum import Enum
from typing import TYPE_CHECKING, Optional

from tree_sitter import Node

from .extractor import iter_fields

if TYPE_CHECKING:
    from .document import Document


# Column the source preview starts at
PREVIEW_COLUMN = 40


class Connector(Enum):
    """Margin cell drawn for one ancestor level."""
    BLANK = "  "
    VERTICAL = "│ "
    BRANCH = "├─"
    LAST = "└─"

    def below(self) -> "Connector":
        """The cell to draw under this one once its own line is printed."""
        if self is Connector.BRANCH:
            return Connector.VERTICAL
        if self is Connector.LAST:
            return Connector.BLANK
        return self


def _label(doc: "Document", node: Node, field_name: Optional[str]) -> str:
    if node.is_named:
        return f"{node.type} {field_name}" if field_name else node.type
    text = doc.text(node)
    if text.strip() == "":
        return ""
    return json.dumps(text, ensure_ascii=False)


def _format_line(doc: "Document", node: Node, margin: str, label: str, terminal_width: int) -> str:
    head = f"{margin}{label}".ljust(PREVIEW_COLUMN) + " "
    available = terminal_width - len(head)
    if available <= 0:
        return f"{margin}{label}"
    preview = " ".join(doc.text(node).split())
    return (head + preview[:available]).rstrip()


def render_tree(doc: "Document", max_depth: int, terminal_width: int) -> list[str]:
    """Render the document's syntax tree, one line per visible node.

    Args:
        doc: Parsed document
        max_depth: Number of tree levels to print; 0 prints nothing
        terminal_width: Column budget for each line, resolved by the caller

    Returns:
        Printed lines, without trailing newlines
    """
    lines: list[str] = []
    _render_node(doc, doc.root, None, (), max_depth, terminal_width, lines)
    return lines


def _render_node(
    doc: "Document",
    node: Node,
    field_name: Optional[str],
    margin: tuple[Connector, ...],
    depth: int,
    terminal_width: int,
    lines: list[str],
) -> None:
    if depth <= 0:
        return

    label = _label(doc, node, field_name)
    if label:
        prefix = "".join(cell.value for cell in margin)
        lines.append(_format_line(doc, node, prefix, label, terminal_width))

    if node.child_count == 0:
        return

    # Descendants see the parent's cell with the branch closed off
    inherited = margin[:-1] + (margin[-1].below(),) if margin else ()

    # Whitespace-only tokens print nothing, so they never count as the last child
    children = [
        (child_field, child)
        for child_field, child in iter_fields(node)
        if child.child_count > 0 or _label(doc, child, child_field)
    ]
    for i, (child_field, child) in enumerate(children):
        cell = Connector.LAST if i == len(children) - 1 else Connector.BRANCH
        _render_node(
            doc, child, child_field, inherited + (cell,), depth - 1, terminal_width, lines
        )
