"""Symbol dataclass and declaration kinds."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .ranges import Range, range_string


class DeclarationKind(str, Enum):
    """Kinds of top-level declaration the catalog recognizes."""
    METHOD = "method"
    FUNCTION = "function"
    TYPE_DEFINITION = "type"
    VARIABLE_DECLARATION = "variable"


@dataclass
class Symbol:
    """A declaration extracted from a Document."""
    summary: str                    # Signature (or full text) with attached comments
    range: Range                    # Widened to the first attached comment, if any
    node: Any = field(repr=False, compare=False)  # tree-sitter Node; valid while the Document lives

    def __str__(self) -> str:
        return f"{self.summary} {range_string(self.range)}"

    def to_dict(self) -> dict:
        """Serialize for the tool layer (drops the node back-reference)."""
        return {
            "summary": self.summary,
            "kind": self.node.type,
            "range": range_string(self.range),
            "start_byte": self.range.start_byte,
            "end_byte": self.range.end_byte,
            "line": self.range.start_point[0] + 1,
            "end_line": self.range.end_point[0] + 1,
        }
