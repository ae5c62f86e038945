"""Get declaration signatures for a file or directory."""

from pathlib import Path
from typing import Optional

from ..config import load_settings
from ..errors import TakoError
from ..parser import load_document
from ..walker import discover_source_files


def get_symbols(path: str, max_size: Optional[int] = None) -> dict:
    """Extract top-level declaration signatures from source files.

    Args:
        path: File or directory (absolute or relative, supports ~)
        max_size: Skip files larger than this many bytes

    Returns:
        Dict with per-file symbols and any per-file errors
    """
    root = Path(path).expanduser()

    if not root.exists():
        return {"error": f"Path not found: {path}"}

    if max_size is None:
        max_size = load_settings().max_file_size

    files = []
    errors = []

    for file_path in discover_source_files(root, max_size=max_size):
        try:
            doc = load_document(file_path)
            symbols = doc.query_symbols()
        except (TakoError, OSError) as e:
            # One bad file never hides the others
            errors.append({"file": str(file_path), "error": str(e)})
            continue

        files.append({
            "file": str(file_path),
            "language": doc.language,
            "symbols": [s.to_dict() for s in symbols],
        })

    result = {
        "path": str(root),
        "file_count": len(files),
        "files": files,
    }

    if errors:
        result["errors"] = errors

    return result
