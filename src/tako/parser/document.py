"""Parsed source documents."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from tree_sitter import Node
from tree_sitter_language_pack import get_parser

from ..errors import ParseError, UnsupportedLanguageError
from ..logger import logger
from .extractor import find_symbols_matching, query_symbols
from .languages import LANGUAGE_REGISTRY, LanguageSpec, language_for_path
from .symbols import Symbol


@dataclass(frozen=True)
class Document:
    """One parsed file: its tree, its source bytes and its grammar.

    Nodes handed out by a Document (including ``Symbol.node``) are only
    meaningful while the Document is alive.
    """
    tree: Any
    source: bytes
    language: str
    spec: LanguageSpec

    @property
    def root(self) -> Node:
        return self.tree.root_node

    @property
    def has_error(self) -> bool:
        return self.root.has_error

    def text(self, node: Node) -> str:
        """Source text of a node, decoded as UTF-8."""
        return self.source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")

    def query_symbols(self) -> list[Symbol]:
        return query_symbols(self)

    def find_symbols_matching(self, pattern: str) -> list[Symbol]:
        return find_symbols_matching(self, pattern)


def new_document(source: bytes, language: str) -> Document:
    """Parse source bytes with the named grammar.

    Args:
        source: Raw file contents
        language: Language name (must be in LANGUAGE_REGISTRY)

    Returns:
        Document wrapping the parsed tree

    Raises:
        UnsupportedLanguageError: If the language is not registered
        ParseError: If tree-sitter could not produce a tree
    """
    if language not in LANGUAGE_REGISTRY:
        raise UnsupportedLanguageError(language)

    spec = LANGUAGE_REGISTRY[language]
    parser = get_parser(spec.ts_language)

    try:
        tree = parser.parse(source)
    except (TypeError, ValueError) as e:
        raise ParseError(language, str(e)) from e

    if tree is None:
        raise ParseError(language, "parser returned no tree")

    if tree.root_node.has_error:
        logger.warning("syntax_errors_in_tree", language=language)

    logger.debug(
        "document_parsed",
        language=language,
        size=len(source),
        children=tree.root_node.child_count,
    )

    return Document(tree=tree, source=source, language=language, spec=spec)


def load_document(path: Path) -> Document:
    """Read a file and parse it with the grammar for its extension."""
    language = language_for_path(str(path))
    if language is None:
        raise UnsupportedLanguageError(path.suffix or str(path))
    return new_document(path.read_bytes(), language)
