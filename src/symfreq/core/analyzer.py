# src/symfreq/core/analyzer.py
import sys
from collections import Counter
from pathlib import Path
from typing import Iterable, Optional

from symfreq.config import DEFAULT_ENCODING
from symfreq.core.bigrams import detect_bigrams
from symfreq.core.scanner import select_files
from symfreq.core.symbols import count_symbols
from symfreq.models import AnalysisResult, FileBigrams


class SymbolAnalyzer:
    def __init__(self, root_dir: Path, extensions: Optional[Iterable[str]] = None, verbose: bool = False):
        self.root_dir = Path(root_dir)
        self.extensions = list(extensions) if extensions is not None else None
        self.verbose = verbose

    def _rel(self, path: Path) -> str:
        try:
            return path.relative_to(self.root_dir).as_posix()
        except ValueError:
            return path.as_posix()

    def run(self) -> Optional[AnalysisResult]:
        """
        Selects the files, then feeds each one to the symbol counter and the
        bigram detector. Returns None when no file matched.
        A file that cannot be read is skipped; it never stops the run.
        """
        files = select_files(self.root_dir, self.extensions)
        if files is None:
            return None

        counts: Counter = Counter()
        result = AnalysisResult(symbol_counts=counts)

        for path in files:
            rel_path = self._rel(path)
            try:
                # Decode the raw bytes so '\r\n' is kept and bigram chunks stay aligned
                content = path.read_bytes().decode(DEFAULT_ENCODING)
            except (OSError, UnicodeDecodeError) as e:
                result.skipped.append((rel_path, str(e)))
                if self.verbose:
                    print(f"  > [Warning] Skipping {rel_path} (read error: {e})", file=sys.stderr)
                continue

            result.files_scanned += 1
            count_symbols(content, counts)

            bigrams = detect_bigrams(content)
            if bigrams is not None:
                result.bigrams.append(FileBigrams(path=path, rel_path=rel_path, bigrams=bigrams))

        return result
