"""Extract declaration signatures and render syntax trees with tree-sitter."""

__version__ = "0.1.0"
