# src/symfreq/core/scanner.py
import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set

from symfreq.core.ignore import IgnoreRules, is_path_ignored, load_ignore_spec


def file_extension(name: str) -> Optional[str]:
    """
    Returns the text after the final '.' of a file name, or None.
    Dotfiles like '.bashrc' have no extension; 'notes.' has the empty one.
    """
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return None
    return ext


def normalize_extensions(extensions: Iterable[str]) -> Set[str]:
    """Accepts both 'py' and '.py'."""
    return {e.strip().lstrip(".") for e in extensions if e.strip()}


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


def _is_regular_file(path: Path) -> bool:
    try:
        return path.is_file() and not path.is_symlink()
    except OSError:
        return False


def select_files(root: Path, extensions: Optional[Iterable[str]] = None) -> Optional[List[Path]]:
    """
    Collects the regular files under `root` that should be analyzed.

    Without `extensions` the .gitignore/.ignore files of every visited
    directory are honored. With `extensions` those files are not consulted
    and only files whose extension is listed are kept.

    Returns None when nothing matches.
    """
    root = Path(root)
    if not root.is_dir():
        raise NotADirectoryError(f"Invalid directory '{root}'")

    ext_filter = normalize_extensions(extensions) if extensions is not None else None
    use_ignore_files = ext_filter is None

    rules_by_dir: Dict[Path, IgnoreRules] = {}
    files: List[Path] = []

    # Unreadable directories are skipped by os.walk (onerror defaults to None)
    for current, dirs, names in os.walk(root):
        current_path = Path(current)
        rel_dir = current_path.relative_to(root)
        base = "" if rel_dir == Path(".") else rel_dir.as_posix() + "/"

        rules = rules_by_dir.pop(current_path, [])
        if use_ignore_files:
            spec = load_ignore_spec(current_path)
            if spec is not None:
                rules = rules + [(base, spec)]

        # --- 1. Prune directories (in place, os.walk honors it) ---
        dirs.sort()
        for d in list(dirs):
            if _is_hidden(d) or (current_path / d).is_symlink():
                dirs.remove(d)
                continue
            if use_ignore_files and is_path_ignored(rel_dir / d, rules, is_directory=True):
                dirs.remove(d)
                continue
            rules_by_dir[current_path / d] = rules

        # --- 2. Files ---
        for name in sorted(names):
            if _is_hidden(name):
                continue

            file_path = current_path / name
            if not _is_regular_file(file_path):
                continue

            if use_ignore_files:
                if is_path_ignored(rel_dir / name, rules):
                    continue
            elif file_extension(name) not in ext_filter:
                continue

            files.append(file_path)

    return files or None
