"""Render the syntax tree of a file."""

from pathlib import Path
from typing import Optional

from ..config import load_settings, resolve_terminal_width
from ..errors import TakoError
from ..parser import load_document, render_tree


def get_syntax_tree(
    path: str,
    max_depth: Optional[int] = None,
    terminal_width: Optional[int] = None,
) -> dict:
    """Render a file's syntax tree as indented lines.

    Args:
        path: Source file path
        max_depth: Tree levels to render (default: TAKO_TREE_DEPTH)
        terminal_width: Line width budget (default: detected once here)

    Returns:
        Dict with the rendered lines
    """
    file_path = Path(path).expanduser()

    if not file_path.is_file():
        return {"error": f"File not found: {path}"}

    settings = load_settings()
    if max_depth is None:
        max_depth = settings.tree_depth
    if terminal_width is None:
        terminal_width = resolve_terminal_width(settings)

    try:
        doc = load_document(file_path)
    except (TakoError, OSError) as e:
        return {"error": str(e)}

    return {
        "file": str(file_path),
        "language": doc.language,
        "max_depth": max_depth,
        "lines": render_tree(doc, max_depth, terminal_width),
    }
