"""Byte and row/column spans of tree-sitter nodes."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Range:
    """Half-open span of source, in bytes and (row, column) points."""
    start_byte: int
    end_byte: int
    start_point: tuple[int, int]    # (row, column), 0-indexed
    end_point: tuple[int, int]

    def with_start(self, point: tuple[int, int], byte: int) -> "Range":
        """Return a copy whose start is moved to the given point and byte."""
        return replace(self, start_point=point, start_byte=byte)

    def slice(self, source: bytes) -> bytes:
        return source[self.start_byte:self.end_byte]


def get_range(node) -> Range:
    """Return the Range covered by a tree-sitter node."""
    return Range(
        start_byte=node.start_byte,
        end_byte=node.end_byte,
        start_point=(node.start_point[0], node.start_point[1]),
        end_point=(node.end_point[0], node.end_point[1]),
    )


def range_string(rng: Range) -> str:
    """Format a Range as ``row:col-row:col``."""
    start_row, start_col = rng.start_point
    end_row, end_col = rng.end_point
    return f"{start_row}:{start_col}-{end_row}:{end_col}"
