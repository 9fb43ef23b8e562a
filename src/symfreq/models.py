# src/symfreq/models.py
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class FileBigrams:
    """Bigram table of a single file."""
    path: Path
    rel_path: str
    bigrams: Dict[str, int]


@dataclass
class AnalysisResult:
    files_scanned: int = 0
    symbol_counts: Counter = field(default_factory=Counter)
    bigrams: List[FileBigrams] = field(default_factory=list)
    # (rel_path, error message)
    skipped: List[Tuple[str, str]] = field(default_factory=list)

    def sorted_counts(self) -> List[Tuple[str, int]]:
        """(symbol, count) pairs, highest count first."""
        return self.symbol_counts.most_common()
