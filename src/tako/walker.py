"""Discover source files under a directory."""

import os
from pathlib import Path
from typing import Optional

import pathspec

from .config import DEFAULT_MAX_FILE_SIZE
from .logger import logger
from .parser import LANGUAGE_EXTENSIONS


# Directory names never descended into
IGNORED_DIRS = frozenset({
    "vendor", "node_modules", "third_party", "build", "dist", "out", "target",
    "bin", ".git",
})


def load_gitignore(root: Path) -> Optional[pathspec.PathSpec]:
    """Load root/.gitignore as a PathSpec, if present."""
    gitignore = root / ".gitignore"
    if not gitignore.is_file():
        return None
    lines = gitignore.read_text(encoding="utf-8", errors="replace").splitlines()
    return pathspec.PathSpec.from_lines("gitwildmatch", lines)


def is_source_file(path: Path) -> bool:
    return path.suffix.lower() in LANGUAGE_EXTENSIONS


def discover_source_files(
    root: Path,
    max_size: int = DEFAULT_MAX_FILE_SIZE,
) -> list[Path]:
    """Find source files under root, in sorted order per directory.

    A file path is returned as-is when it exists. Directories named in
    IGNORED_DIRS and paths matched by root/.gitignore are skipped.

    Args:
        root: File or directory to scan
        max_size: Maximum file size in bytes

    Returns:
        List of Path objects for source files
    """
    if root.is_file():
        return [root]

    ignore_spec = load_gitignore(root)
    files = []

    for dirpath, dirnames, filenames in os.walk(root):
        current = Path(dirpath)
        rel_dir = current.relative_to(root).as_posix()

        kept = []
        for name in sorted(dirnames):
            rel_path = name if rel_dir == "." else f"{rel_dir}/{name}"
            if name in IGNORED_DIRS:
                logger.debug("skip_dir", path=rel_path, reason="ignored")
                continue
            if ignore_spec and ignore_spec.match_file(rel_path + "/"):
                logger.debug("skip_dir", path=rel_path, reason="gitignore")
                continue
            kept.append(name)
        # Prune in place so os.walk does not descend
        dirnames[:] = kept

        for name in sorted(filenames):
            path = current / name
            rel_path = name if rel_dir == "." else f"{rel_dir}/{name}"
            if not is_source_file(path):
                continue
            if ignore_spec and ignore_spec.match_file(rel_path):
                logger.debug("skip_file", path=rel_path, reason="gitignore")
                continue
            try:
                if path.stat().st_size > max_size:
                    logger.debug("skip_file", path=rel_path, reason="too_large")
                    continue
            except OSError as e:
                logger.debug("skip_file", path=rel_path, reason=str(e))
                continue
            files.append(path)

    return files
