"""Tests for language-specific parsing."""

import pytest
from tako.parser import LANGUAGE_EXTENSIONS, LANGUAGE_REGISTRY, compile_query, language_for_path, new_document


PYTHON_SOURCE = b'''import os

# Add two numbers.
def add(a, b):
    return a + b

class Calculator(object):
    def method(self, x):
        return x

MAX_SIZE = 100
'''


def test_parse_python():
    """Test Python functions, classes and assignments."""
    doc = new_document(PYTHON_SOURCE, "python")
    symbols = doc.query_symbols()

    assert [s.node.type for s in symbols][:2] == [
        "function_definition",
        "class_definition",
    ]
    # Grammar revisions differ on wrapping module-level assignments
    assert symbols[2].node.type in ("expression_statement", "assignment")

    add, calc, const = symbols
    assert add.summary.startswith("# Add two numbers.\ndef add(a, b)")
    assert "return" not in add.summary
    assert calc.summary.startswith("class Calculator")
    assert "def method" not in calc.summary
    assert const.summary == "MAX_SIZE = 100"


DECORATED_PYTHON_SOURCE = b'''import dataclasses

# Helper.
@staticmethod
def helper():
    pass

@dataclasses.dataclass
class Point:
    x: int

def plain():
    pass
'''


def test_parse_python_decorated():
    """Test decorated definitions are listed with their decorators."""
    doc = new_document(DECORATED_PYTHON_SOURCE, "python")
    symbols = doc.query_symbols()

    assert [s.node.type for s in symbols] == [
        "decorated_definition",
        "decorated_definition",
        "function_definition",
    ]

    helper, point, plain = symbols
    assert helper.summary == "# Helper.\n@staticmethod\ndef helper() :"
    assert point.summary == "@dataclasses.dataclass\nclass Point :"
    assert plain.summary == "def plain() :"
    assert helper.range.start_byte == DECORATED_PYTHON_SOURCE.index(b"# Helper.")
    assert point.range.start_byte == DECORATED_PYTHON_SOURCE.index(b"@dataclasses")


JAVASCRIPT_SOURCE = b'''/** Greet a user. */
function greet(name) {
    return `Hello, ${name}!`;
}

class Calculator {
    add(a, b) {
        return a + b;
    }
}

const MAX_RETRY = 5;
'''


def test_parse_javascript():
    """Test JavaScript parsing."""
    doc = new_document(JAVASCRIPT_SOURCE, "javascript")
    symbols = doc.query_symbols()

    greet, calc, retry = symbols
    assert greet.summary == "/** Greet a user. */\nfunction greet(name)"
    assert calc.summary == "class Calculator"
    assert retry.summary.startswith("const MAX_RETRY = 5")


TYPESCRIPT_SOURCE = b'''interface User {
    name: string;
}

function getUser(id: number): User {
    return { name: "Test" };
}

type ID = string | number;
'''


def test_parse_typescript():
    """Test TypeScript parsing."""
    doc = new_document(TYPESCRIPT_SOURCE, "typescript")
    kinds = [s.node.type for s in doc.query_symbols()]

    assert kinds == [
        "interface_declaration",
        "function_declaration",
        "type_alias_declaration",
    ]


EXPORTED_TYPESCRIPT_SOURCE = b'''// Public entry point.
export function api(x: number): number {
    return x;
}

export class Svc {}

function local() {}
'''


def test_parse_typescript_exports():
    """Test exported declarations are listed with the export keyword."""
    doc = new_document(EXPORTED_TYPESCRIPT_SOURCE, "typescript")
    symbols = doc.query_symbols()

    assert [s.node.type for s in symbols] == [
        "export_statement",
        "export_statement",
        "function_declaration",
    ]

    api, svc, local = symbols
    assert api.summary.startswith("// Public entry point.\nexport function api(x: number)")
    assert "return" not in api.summary
    assert api.range.start_byte == 0
    assert svc.summary == "export class Svc"
    assert local.summary == "function local()"


def test_parse_javascript_exports():
    """Test exported JavaScript declarations are listed."""
    doc = new_document(b"export const LIMIT = 3;\nexport function run() {}\n", "javascript")
    symbols = doc.query_symbols()

    limit, run = symbols
    assert limit.summary.startswith("export const LIMIT = 3")
    assert run.summary == "export function run()"
    assert doc.find_symbols_matching("^LIMIT$")[0].summary == "export const LIMIT = 3;"


RUBY_SOURCE = b'''def greet
  puts "hi"
end

def add(a, b)
  a + b
end
'''


def test_missing_parameters_get_placeholder():
    """Test a method declared without a parameter list gets an empty one."""
    doc = new_document(RUBY_SOURCE, "ruby")
    greet, add = doc.query_symbols()

    assert greet.summary.startswith("def greet()")
    assert add.summary.startswith("def add(a, b)")
    assert "()" not in add.summary


RUST_SOURCE = b'''// A user in the system.
pub struct User {
    name: String,
}

impl User {
    pub fn name(&self) -> &str {
        &self.name
    }
}

pub fn add(a: i32, b: i32) -> i32 {
    a + b
}

pub const MAX_USERS: usize = 1000;
'''


def test_parse_rust():
    """Test Rust parsing, including line_comment attachment."""
    doc = new_document(RUST_SOURCE, "rust")
    symbols = doc.query_symbols()

    assert [s.node.type for s in symbols] == [
        "struct_item",
        "impl_item",
        "function_item",
        "const_item",
    ]

    user, impl, add, _ = symbols
    assert user.summary == "// A user in the system.\npub struct User"
    assert impl.summary == "impl User"
    assert add.summary == "pub fn add(a: i32, b: i32) -> i32"


@pytest.mark.parametrize("language", sorted(LANGUAGE_REGISTRY))
def test_builtin_patterns_compile(language):
    """Test every registered pattern compiles against its grammar."""
    spec = LANGUAGE_REGISTRY[language]
    for pattern in spec.declaration_patterns.values():
        assert compile_query(spec.ts_language, pattern) is not None


def test_every_extension_has_a_spec():
    """Test the extension table only names registered languages."""
    assert set(LANGUAGE_EXTENSIONS.values()) <= set(LANGUAGE_REGISTRY)


def test_language_for_path():
    """Test extension lookup."""
    assert language_for_path("main.go") == "go"
    assert language_for_path("src/lib.RS") == "rust"
    assert language_for_path("include/util.hpp") == "cpp"
    assert language_for_path("README.md") is None
    assert language_for_path("Makefile") is None
