"""Tests for the structural query matcher and comment attacher."""

import pytest
from tako.errors import QueryCompileError
from tako.parser import compile_query, new_document, preceding_comments, query_captures


GO_SOURCE = b'''type Outer struct{}

func F() {
\ttype Inner struct{}
\t_ = Inner{}
}
'''


def test_captures_are_top_level_by_default():
    """Test nested matches are filtered out unless asked for."""
    doc = new_document(GO_SOURCE, "go")

    top = list(query_captures(doc, "(type_declaration) @type"))
    assert len(top) == 1
    assert top[0][0] == "type"
    assert doc.text(top[0][1]) == "type Outer struct{}"

    everywhere = list(
        query_captures(doc, "(type_declaration) @type", restrict_to_direct_children=False)
    )
    assert [doc.text(node) for _, node in everywhere] == [
        "type Outer struct{}",
        "type Inner struct{}",
    ]


def test_compile_query_is_memoized():
    """Test a pattern compiles once per grammar."""
    assert compile_query("go", "(function_declaration) @f") is compile_query(
        "go", "(function_declaration) @f"
    )


def test_malformed_pattern_raises():
    """Test syntax errors in patterns surface as QueryCompileError."""
    with pytest.raises(QueryCompileError) as exc_info:
        compile_query("go", "(function_declaration")
    assert exc_info.value.language == "go"


def test_root_has_no_comment():
    """Test the attacher returns nothing for a parentless node."""
    doc = new_document(b"// c\nfunc F() {}\n", "go")
    assert preceding_comments(doc.root, doc.source) is None


def test_comment_types_are_per_language():
    """Test only the given comment node types are attached."""
    doc = new_document(b"// c\nfunc F() {}\n", "go")
    func = next(c for c in doc.root.children if c.type == "function_declaration")

    assert preceding_comments(func, doc.source).text == "// c"
    assert preceding_comments(func, doc.source, comment_types=("line_comment",)) is None
