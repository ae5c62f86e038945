"""Declaration extraction over a parsed Document."""

import re
from typing import TYPE_CHECKING, Iterator, Optional

from tree_sitter import Node

from ..errors import InvalidRegexError
from ..logger import logger
from .comments import preceding_comments
from .query import query_captures
from .ranges import get_range
from .symbols import DeclarationKind, Symbol

if TYPE_CHECKING:
    from .document import Document


BODY_FIELD = "body"
NAME_FIELD = "name"
PARAMETERS_FIELD = "parameters"
DECLARATOR_FIELD = "declarator"

# Stands in for a missing parameter list, e.g. Ruby's "def greet"
EMPTY_PARAMETERS = "()"

# Order the catalog runs its queries in; output is re-sorted by position.
CATALOG_KINDS = (
    DeclarationKind.METHOD,
    DeclarationKind.FUNCTION,
    DeclarationKind.TYPE_DEFINITION,
    DeclarationKind.VARIABLE_DECLARATION,
)


def iter_fields(node: Node) -> Iterator[tuple[Optional[str], Node]]:
    """Yield (field_name, child) for every immediate child of a node."""
    cursor = node.walk()
    if not cursor.goto_first_child():
        return
    while True:
        yield cursor.field_name, cursor.node
        if not cursor.goto_next_sibling():
            break


def unwrap(doc: "Document", node: Node) -> Node:
    """Follow decorator/export wrappers down to the declaration they hold."""
    field_name = doc.spec.wrapper_fields.get(node.type)
    while field_name is not None:
        inner = node.child_by_field_name(field_name)
        if inner is None:
            break
        node = inner
        field_name = doc.spec.wrapper_fields.get(node.type)
    return node


def everything_except_body(
    doc: "Document",
    node: Node,
    kind: Optional[DeclarationKind] = None,
) -> Symbol:
    """Build a Symbol from a declaration, leaving out its body.

    The summary is any preceding comments, then the text of every child
    except the ``body`` field, space-separated. Parameter lists are glued to
    whatever precedes them so ``F`` and ``()`` read as ``F()``.

    Wrapped declarations (``@decorator``, ``export``) keep the wrapper's
    range and comments; the wrapper text before the declaration is copied
    verbatim. Functions and methods without a ``parameters`` field get an
    empty ``()`` after their name.
    """
    parts = []
    rng = get_range(node)

    comment = preceding_comments(node, doc.source, doc.spec.comment_node_types)
    if comment:
        parts.append(comment.text)
        parts.append("\n")
        rng = rng.with_start(comment.start_point, comment.start_byte)

    decl = unwrap(doc, node)
    if decl is not node:
        parts.append(
            doc.source[node.start_byte:decl.start_byte].decode("utf-8", errors="replace")
        )

    if decl.child_count == 0:
        parts.append(doc.text(decl))
        return Symbol(summary="".join(parts), range=rng, node=node)

    needs_parameters = (
        kind in (DeclarationKind.METHOD, DeclarationKind.FUNCTION)
        and decl.child_by_field_name(PARAMETERS_FIELD) is None
    )
    started = False
    for field_name, child in iter_fields(decl):
        if field_name == BODY_FIELD:
            continue
        if started and field_name != PARAMETERS_FIELD:
            parts.append(" ")
        parts.append(doc.text(child))
        started = True
        if field_name == NAME_FIELD and needs_parameters:
            parts.append(EMPTY_PARAMETERS)

    return Symbol(summary="".join(parts), range=rng, node=node)


def query_symbols(doc: "Document") -> list[Symbol]:
    """Extract every top-level declaration the language spec knows about.

    Returns:
        Symbols sorted by (comment-widened) start byte
    """
    symbols = []
    for kind in CATALOG_KINDS:
        pattern = doc.spec.declaration_patterns.get(kind)
        if not pattern:
            continue
        for _, node in query_captures(doc, pattern, restrict_to_direct_children=True):
            symbols.append(everything_except_body(doc, node, kind))

    symbols.sort(key=lambda s: s.range.start_byte)

    logger.debug("symbols_queried", language=doc.language, count=len(symbols))
    return symbols


def derive_name(doc: "Document", node: Node) -> str:
    """Approximate the identifier a top-level node declares.

    Wrappers are looked through first. Uses the ``name`` field when the
    grammar has one, then the ``declarator`` chain for C-family nodes.
    Otherwise falls back to picking a whitespace-delimited token of the
    node's text, per the language's ``name_token_fallbacks``. The fallback
    is syntactic only: ``var a, b int`` yields ``a,``.
    """
    node = unwrap(doc, node)

    name_node = node.child_by_field_name(NAME_FIELD)
    if name_node is not None:
        return doc.text(name_node)

    if node.type in doc.spec.declarator_name_types:
        return _declarator_name(doc, node)

    index = doc.spec.name_token_fallbacks.get(node.type)
    if index is None:
        return ""

    tokens = doc.text(node).split()
    if index < len(tokens):
        return tokens[index]
    return ""


def _declarator_name(doc: "Document", node: Node) -> str:
    # int *(*p)(void) -> declaration > init/pointer/function/parenthesized > p
    current = node.child_by_field_name(DECLARATOR_FIELD)
    while current is not None:
        inner = current.child_by_field_name(DECLARATOR_FIELD)
        if inner is None and current.type.endswith("_declarator") and current.named_child_count:
            # reference_declarator and parenthesized_declarator have no field
            inner = current.named_children[0]
        if inner is None:
            return doc.text(current)
        current = inner
    return ""


def find_symbols_matching(doc: "Document", pattern: str) -> list[Symbol]:
    """Find top-level declarations whose name matches a regular expression.

    Unlike query_symbols, the summary is the full declaration text (body
    included), prefixed by any preceding comments.

    Raises:
        InvalidRegexError: If the pattern does not compile
    """
    try:
        regex = re.compile(pattern)
    except re.error as e:
        raise InvalidRegexError(pattern, str(e)) from e

    symbols = []
    for node in doc.root.children:
        name = derive_name(doc, node)
        if not name or not regex.search(name):
            continue

        rng = get_range(node)
        summary = doc.text(node)

        comment = preceding_comments(node, doc.source, doc.spec.comment_node_types)
        if comment:
            summary = f"{comment.text}\n{summary}"
            rng = rng.with_start(comment.start_point, comment.start_byte)

        symbols.append(Symbol(summary=summary, range=rng, node=node))

    logger.debug(
        "symbols_matched", language=doc.language, pattern=pattern, count=len(symbols)
    )
    return symbols
