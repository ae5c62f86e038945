"""Language registry with LanguageSpec definitions for all supported languages."""

import os
from dataclasses import dataclass, field
from typing import Optional

from .symbols import DeclarationKind


@dataclass(frozen=True)
class LanguageSpec:
    """How to find declarations in one language's syntax tree."""
    # tree-sitter language name (for tree-sitter-language-pack)
    ts_language: str

    # Structural pattern per declaration kind. Kinds missing here are
    # skipped for this language.
    declaration_patterns: dict[DeclarationKind, str]

    # Node types that count as documentation comments
    comment_node_types: tuple[str, ...] = ("comment",)

    # Name fallback for nodes without a "name" field:
    # node_type -> index of the whitespace-delimited token in the node's text
    name_token_fallbacks: dict[str, int] = field(default_factory=dict)

    # Wrapper node type -> field holding the declaration it wraps
    # (decorators, export keywords). The wrapper keeps its own range.
    wrapper_fields: dict[str, str] = field(default_factory=dict)

    # Node types named by following their "declarator" field chain
    # down to the identifier (C-family declarators)
    declarator_name_types: tuple[str, ...] = ()


# File extension to language mapping
LANGUAGE_EXTENSIONS = {
    ".go": "go",
    ".rs": "rust",
    ".js": "javascript",
    ".ts": "typescript",
    ".c": "c",
    ".h": "c",
    ".cpp": "cpp",
    ".cxx": "cpp",
    ".cc": "cpp",
    ".hpp": "cpp",
    ".hxx": "cpp",
    ".hh": "cpp",
    ".java": "java",
    ".php": "php",
    ".py": "python",
    ".rb": "ruby",
    ".cs": "csharp",
    ".scala": "scala",
    ".proto": "proto",
}


GO_SPEC = LanguageSpec(
    ts_language="go",
    declaration_patterns={
        DeclarationKind.METHOD: "(method_declaration) @method",
        DeclarationKind.FUNCTION: "(function_declaration) @function",
        DeclarationKind.TYPE_DEFINITION: "(type_declaration) @type",
        DeclarationKind.VARIABLE_DECLARATION: "(var_declaration) @variable",
    },
    # "type Person struct {" -> "Person", "var a, b int" -> "a,"
    name_token_fallbacks={
        "type_declaration": 1,
        "var_declaration": 1,
        "const_declaration": 1,
    },
)


PYTHON_SPEC = LanguageSpec(
    ts_language="python",
    declaration_patterns={
        DeclarationKind.FUNCTION: (
            "[(function_definition)"
            " (decorated_definition definition: (function_definition))] @function"
        ),
        DeclarationKind.TYPE_DEFINITION: (
            "[(class_definition)"
            " (decorated_definition definition: (class_definition))] @type"
        ),
        # Older grammars wrap module-level assignments in expression_statement
        DeclarationKind.VARIABLE_DECLARATION: (
            "[(expression_statement (assignment)) (assignment)] @variable"
        ),
    },
    # "MAX_SIZE = 100" -> "MAX_SIZE"
    name_token_fallbacks={
        "expression_statement": 0,
        "assignment": 0,
    },
    wrapper_fields={
        "decorated_definition": "definition",
    },
)


def _with_export(node_types: str, capture: str) -> str:
    """Match node_types at top level, bare or inside an export statement."""
    return f"[{node_types} (export_statement declaration: [{node_types}])] @{capture}"


JS_FUNCTION_TYPES = "(function_declaration) (generator_function_declaration)"
JS_VARIABLE_TYPES = "(lexical_declaration) (variable_declaration)"
TS_TYPE_TYPES = (
    "(class_declaration) (abstract_class_declaration) (interface_declaration)"
    " (type_alias_declaration) (enum_declaration)"
)


JAVASCRIPT_SPEC = LanguageSpec(
    ts_language="javascript",
    declaration_patterns={
        DeclarationKind.FUNCTION: _with_export(JS_FUNCTION_TYPES, "function"),
        DeclarationKind.TYPE_DEFINITION: _with_export("(class_declaration)", "type"),
        DeclarationKind.VARIABLE_DECLARATION: _with_export(JS_VARIABLE_TYPES, "variable"),
    },
    name_token_fallbacks={
        "lexical_declaration": 1,
        "variable_declaration": 1,
    },
    wrapper_fields={
        "export_statement": "declaration",
    },
)


TYPESCRIPT_SPEC = LanguageSpec(
    ts_language="typescript",
    declaration_patterns={
        DeclarationKind.FUNCTION: _with_export(JS_FUNCTION_TYPES, "function"),
        DeclarationKind.TYPE_DEFINITION: _with_export(TS_TYPE_TYPES, "type"),
        DeclarationKind.VARIABLE_DECLARATION: _with_export(JS_VARIABLE_TYPES, "variable"),
    },
    name_token_fallbacks={
        "lexical_declaration": 1,
        "variable_declaration": 1,
    },
    wrapper_fields={
        "export_statement": "declaration",
    },
)


RUST_SPEC = LanguageSpec(
    ts_language="rust",
    declaration_patterns={
        DeclarationKind.FUNCTION: "(function_item) @function",
        DeclarationKind.TYPE_DEFINITION: (
            "[(struct_item) (enum_item) (trait_item) (type_item) (impl_item)] @type"
        ),
        DeclarationKind.VARIABLE_DECLARATION: "[(const_item) (static_item)] @variable",
    },
    comment_node_types=("line_comment", "block_comment"),
    # "impl User {" -> "User"
    name_token_fallbacks={
        "impl_item": 1,
    },
)


C_SPEC = LanguageSpec(
    ts_language="c",
    declaration_patterns={
        DeclarationKind.FUNCTION: "(function_definition) @function",
        DeclarationKind.TYPE_DEFINITION: (
            "[(type_definition) (struct_specifier) (enum_specifier) (union_specifier)] @type"
        ),
        DeclarationKind.VARIABLE_DECLARATION: "(declaration) @variable",
    },
    # "int main(void) {" -> "main", "static int *p = 0;" -> "p"
    declarator_name_types=("function_definition", "declaration", "type_definition"),
)


CPP_SPEC = LanguageSpec(
    ts_language="cpp",
    declaration_patterns={
        DeclarationKind.FUNCTION: "(function_definition) @function",
        DeclarationKind.TYPE_DEFINITION: (
            "[(type_definition) (class_specifier) (struct_specifier) (enum_specifier)"
            " (union_specifier)] @type"
        ),
        DeclarationKind.VARIABLE_DECLARATION: "(declaration) @variable",
    },
    declarator_name_types=("function_definition", "declaration", "type_definition"),
)


JAVA_SPEC = LanguageSpec(
    ts_language="java",
    declaration_patterns={
        DeclarationKind.TYPE_DEFINITION: (
            "[(class_declaration) (interface_declaration) (enum_declaration)] @type"
        ),
    },
    comment_node_types=("comment", "line_comment", "block_comment"),
)


PHP_SPEC = LanguageSpec(
    ts_language="php",
    declaration_patterns={
        DeclarationKind.FUNCTION: "(function_definition) @function",
        DeclarationKind.TYPE_DEFINITION: (
            "[(class_declaration) (interface_declaration) (trait_declaration)] @type"
        ),
    },
)


RUBY_SPEC = LanguageSpec(
    ts_language="ruby",
    declaration_patterns={
        DeclarationKind.FUNCTION: "(method) @function",
        DeclarationKind.TYPE_DEFINITION: "[(class) (module)] @type",
    },
)


CSHARP_SPEC = LanguageSpec(
    ts_language="csharp",
    declaration_patterns={
        DeclarationKind.TYPE_DEFINITION: (
            "[(class_declaration) (interface_declaration) (struct_declaration)"
            " (enum_declaration)] @type"
        ),
    },
)


SCALA_SPEC = LanguageSpec(
    ts_language="scala",
    declaration_patterns={
        DeclarationKind.FUNCTION: "(function_definition) @function",
        DeclarationKind.TYPE_DEFINITION: (
            "[(class_definition) (object_definition) (trait_definition)] @type"
        ),
        DeclarationKind.VARIABLE_DECLARATION: "[(val_definition) (var_definition)] @variable",
    },
    comment_node_types=("comment", "block_comment"),
    name_token_fallbacks={
        "val_definition": 1,
        "var_definition": 1,
    },
)


# Parsed and renderable, but no declaration patterns yet.
PROTO_SPEC = LanguageSpec(
    ts_language="proto",
    declaration_patterns={},
    name_token_fallbacks={
        "message": 1,
        "enum": 1,
        "service": 1,
    },
)


# Language registry
LANGUAGE_REGISTRY = {
    "go": GO_SPEC,
    "python": PYTHON_SPEC,
    "javascript": JAVASCRIPT_SPEC,
    "typescript": TYPESCRIPT_SPEC,
    "rust": RUST_SPEC,
    "c": C_SPEC,
    "cpp": CPP_SPEC,
    "java": JAVA_SPEC,
    "php": PHP_SPEC,
    "ruby": RUBY_SPEC,
    "csharp": CSHARP_SPEC,
    "scala": SCALA_SPEC,
    "proto": PROTO_SPEC,
}


def language_for_path(path: str) -> Optional[str]:
    """Return the language name for a file path, or None if unsupported."""
    _, ext = os.path.splitext(path)
    return LANGUAGE_EXTENSIONS.get(ext.lower())
