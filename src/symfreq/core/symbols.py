# src/symfreq/core/symbols.py
from typing import FrozenSet, Iterable, Iterator, MutableMapping, Tuple

from symfreq.config import SYMBOLS


class SymbolAlphabet:
    """Immutable, ordered set of single-character symbols."""

    __slots__ = ("_ordered", "_members")

    def __init__(self, symbols: Iterable[str]):
        ordered: Tuple[str, ...] = tuple(symbols)
        for s in ordered:
            if len(s) != 1:
                raise ValueError(f"Symbol {s!r} is not a single character")
        members: FrozenSet[str] = frozenset(ordered)
        if len(members) != len(ordered):
            raise ValueError("Symbol alphabet contains duplicates")
        self._ordered = ordered
        self._members = members

    def __contains__(self, ch: object) -> bool:
        return ch in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __repr__(self) -> str:
        return f"SymbolAlphabet({''.join(self._ordered)!r})"


ALPHABET = SymbolAlphabet(SYMBOLS)


def count_symbols(content: str, accumulator: MutableMapping[str, int]) -> None:
    """
    Adds every symbol occurrence in `content` to `accumulator`.
    Non-symbol characters are ignored; existing entries are never reset,
    so the same accumulator can be fed file after file.
    """
    for ch in content:
        if ch in ALPHABET:
            accumulator[ch] = accumulator.get(ch, 0) + 1
