"""Compile and run tree-sitter structural queries."""

from functools import lru_cache
from typing import TYPE_CHECKING, Iterator

from tree_sitter import Node, Query, QueryCursor, QueryError
from tree_sitter_language_pack import get_language

from ..errors import QueryCompileError
from ..logger import logger

if TYPE_CHECKING:
    from .document import Document


@lru_cache(maxsize=None)
def compile_query(ts_language: str, pattern: str) -> Query:
    """Compile a pattern for a grammar, once per (grammar, pattern)."""
    try:
        query = Query(get_language(ts_language), pattern)
    except QueryError as e:
        raise QueryCompileError(ts_language, pattern, str(e)) from e
    logger.debug("query_compiled", language=ts_language, pattern=pattern)
    return query


def is_direct_child(node: Node, root: Node) -> bool:
    parent = node.parent
    return parent is not None and parent == root


def query_captures(
    doc: "Document",
    pattern: str,
    restrict_to_direct_children: bool = True,
) -> Iterator[tuple[str, Node]]:
    """Run a pattern against the document root.

    Args:
        doc: Parsed document
        pattern: tree-sitter query source
        restrict_to_direct_children: Only keep captures whose parent is the
            root, i.e. top-level declarations

    Yields:
        (capture_name, node) pairs in document order
    """
    query = compile_query(doc.spec.ts_language, pattern)
    root = doc.root

    captures = []
    for name, nodes in QueryCursor(query).captures(root).items():
        for node in nodes:
            if restrict_to_direct_children and not is_direct_child(node, root):
                continue
            captures.append((name, node))

    captures.sort(key=lambda cap: cap[1].start_byte)
    yield from captures
