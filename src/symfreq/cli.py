# src/symfreq/cli.py
import sys
import argparse
import os
from pathlib import Path
from typing import List, Optional

# Module imports
from symfreq.core.analyzer import SymbolAnalyzer
from symfreq.core.report import format_file_bigrams, format_symbol_counts, no_files_message

def create_arg_parser():
    parser = argparse.ArgumentParser(
        description="Count punctuation and operator symbols, and symbol bigrams, across a project's files."
    )
    parser.add_argument("root_dir", type=str, nargs="?", default=os.getcwd(), help="Project root directory")
    parser.add_argument(
        "-e", "--extension",
        dest="extensions",
        action="append",
        default=None,
        help="File extension to include (repeatable, or comma-separated). Disables ignore files."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Report files that could not be read")
    parser.add_argument("-b", "--bigrams", action="store_true", help="Also print each file's symbol bigrams")
    return parser

def parse_extensions(raw: Optional[List[str]]) -> Optional[List[str]]:
    """Flattens repeated and comma-separated -e values. None means 'no filter'."""
    if raw is None:
        return None
    extensions = []
    for value in raw:
        for ext in value.split(","):
            ext = ext.strip()
            if ext and ext not in extensions:
                extensions.append(ext)
    return extensions or None

def main():
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args()

        root_dir = Path(args.root_dir).resolve()
        if not root_dir.is_dir():
            print(f"Error: Invalid directory '{root_dir}'", file=sys.stderr)
            sys.exit(1)

        extensions = parse_extensions(args.extensions)

        # 2. Scanning & counting
        analyzer = SymbolAnalyzer(root_dir, extensions, verbose=args.verbose)
        result = analyzer.run()

        if result is None:
            print(no_files_message(root_dir, extensions))
            return

        # 3. Report
        counts = result.sorted_counts()
        if counts:
            print(format_symbol_counts(counts))

        if args.bigrams:
            for file_bigrams in result.bigrams:
                print()
                print(format_file_bigrams(file_bigrams))

        if args.verbose and result.skipped:
            print(f"\nSkipped {len(result.skipped)} unreadable file(s).", file=sys.stderr)

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
