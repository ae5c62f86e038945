"""Find declarations by name in a single file."""

from pathlib import Path

from ..errors import TakoError
from ..parser import load_document


def find_symbol(path: str, pattern: str) -> dict:
    """Get the full source of top-level declarations whose name matches.

    Args:
        path: Source file path
        pattern: Regular expression matched against declaration names

    Returns:
        Dict with matching symbols (full text, comments included)
    """
    file_path = Path(path).expanduser()

    if not file_path.is_file():
        return {"error": f"File not found: {path}"}

    try:
        doc = load_document(file_path)
        symbols = doc.find_symbols_matching(pattern)
    except (TakoError, OSError) as e:
        return {"error": str(e)}

    return {
        "file": str(file_path),
        "pattern": pattern,
        "result_count": len(symbols),
        "symbols": [s.to_dict() for s in symbols],
    }
