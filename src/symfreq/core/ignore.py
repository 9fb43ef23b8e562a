# src/symfreq/core/ignore.py
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import pathspec

from symfreq.config import DEFAULT_ENCODING, IGNORE_FILE_NAMES

# (base directory as a posix prefix like "" or "src/", rules found there)
IgnoreRules = List[Tuple[str, pathspec.PathSpec]]


def load_ignore_spec(directory: Path, file_names: Sequence[str] = IGNORE_FILE_NAMES) -> Optional[pathspec.GitIgnoreSpec]:
    """
    Loads the ignore files found in `directory` into a single PathSpec.
    Returns None if the directory has no ignore file at all.
    """
    lines: List[str] = []
    found = False

    for name in file_names:
        ignore_file = directory / name
        if not ignore_file.is_file():
            continue
        try:
            with open(ignore_file, "r", encoding=DEFAULT_ENCODING) as f:
                lines.extend(f.read().splitlines())
            found = True
        except (OSError, UnicodeDecodeError) as e:
            print(f"Warning: Could not read {ignore_file}: {e}", file=sys.stderr)

    if not found:
        return None

    try:
        return pathspec.GitIgnoreSpec.from_lines(lines)
    except Exception as e:
        print(f"Error parsing ignore rules in {directory}: {e}", file=sys.stderr)
        return None


def _match_spec(spec: pathspec.PathSpec, rel_posix: str) -> Optional[bool]:
    """
    Last matching pattern wins.
    True = ignored, False = whitelisted by a '!' pattern, None = no pattern matched.
    """
    return spec.check_file(rel_posix).include


def is_path_ignored(rel_path: Path, rules: IgnoreRules, is_directory: bool = False) -> bool:
    """
    Checks `rel_path` (relative to the scan root) against every ignore file
    that applies to it. Deeper ignore files take precedence over shallower ones.
    """
    rel_posix = rel_path.as_posix()

    for base, spec in reversed(rules):
        if base and not rel_posix.startswith(base):
            continue
        candidate = rel_posix[len(base):]
        if is_directory:
            candidate += "/"

        verdict = _match_spec(spec, candidate)
        if verdict is not None:
            return verdict

    return False
