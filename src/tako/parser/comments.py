"""Attach leading documentation comments to declarations."""

from dataclasses import dataclass
from typing import Optional

from tree_sitter import Node


@dataclass(frozen=True)
class AttachedComment:
    """An unbroken run of comments directly above a declaration."""
    text: str                       # Comment texts joined with "\n"
    start_point: tuple[int, int]    # Start of the first comment in the run
    start_byte: int


def preceding_comments(
    node: Node,
    source: bytes,
    comment_types: tuple[str, ...] = ("comment",),
) -> Optional[AttachedComment]:
    """Find the comments immediately preceding a node among its siblings.

    Any non-comment sibling between a comment and the node breaks the run,
    so only the comments with nothing else after them are returned.
    """
    parent = node.parent
    if parent is None:
        return None

    comments: list[Node] = []
    for sibling in parent.children:
        if sibling.end_byte >= node.start_byte:
            break
        if sibling.type in comment_types:
            comments.append(sibling)
        else:
            comments = []

    if not comments:
        return None

    first = comments[0]
    text = "\n".join(
        source[c.start_byte:c.end_byte].decode("utf-8", errors="replace")
        for c in comments
    )
    return AttachedComment(
        text=text,
        start_point=(first.start_point[0], first.start_point[1]),
        start_byte=first.start_byte,
    )
