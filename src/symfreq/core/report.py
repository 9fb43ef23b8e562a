# src/symfreq/core/report.py
from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple

from symfreq.models import FileBigrams
from symfreq.utils.text import join_with_commas


def format_symbol_counts(pairs: Iterable[Tuple[str, int]]) -> str:
    """One '<symbol>: <count>' line per pair, in the given order."""
    return "\n".join(f"{symbol}: {count}" for symbol, count in pairs)


def format_file_bigrams(file_bigrams: FileBigrams) -> str:
    lines = [f"--- {file_bigrams.rel_path} ---"]
    ordered = sorted(file_bigrams.bigrams.items(), key=lambda item: item[1], reverse=True)
    lines.extend(f"{bigram}: {count}" for bigram, count in ordered)
    return "\n".join(lines)


def no_files_message(root_dir: Path, extensions: Optional[Sequence[str]] = None) -> str:
    if not extensions:
        return f"No files found in '{root_dir}'"

    word = "extension" if len(extensions) == 1 else "extensions"
    return f"No files with the {word} '{join_with_commas(list(extensions))}' found in '{root_dir}'"
