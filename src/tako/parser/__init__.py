"""Parser package for extracting symbols and rendering syntax trees."""

from .ranges import Range, get_range, range_string
from .symbols import DeclarationKind, Symbol
from .languages import LanguageSpec, LANGUAGE_REGISTRY, LANGUAGE_EXTENSIONS, language_for_path
from .comments import AttachedComment, preceding_comments
from .query import compile_query, query_captures
from .extractor import derive_name, everything_except_body, find_symbols_matching, query_symbols
from .document import Document, load_document, new_document
from .tree import Connector, render_tree

__all__ = [
    "Range",
    "get_range",
    "range_string",
    "DeclarationKind",
    "Symbol",
    "LanguageSpec",
    "LANGUAGE_REGISTRY",
    "LANGUAGE_EXTENSIONS",
    "language_for_path",
    "AttachedComment",
    "preceding_comments",
    "compile_query",
    "query_captures",
    "derive_name",
    "everything_except_body",
    "find_symbols_matching",
    "query_symbols",
    "Document",
    "new_document",
    "load_document",
    "Connector",
    "render_tree",
]
