# src/symfreq/core/bigrams.py
from dataclasses import dataclass
from typing import Dict, Optional

from symfreq.core.symbols import ALPHABET


class BigramError(ValueError):
    """Raised when a string cannot be parsed into a Bigram."""


@dataclass(frozen=True)
class Bigram:
    first: str
    second: str

    @classmethod
    def parse(cls, text: str) -> "Bigram":
        """Builds a Bigram from a string of exactly two characters."""
        if len(text) < 2:
            raise BigramError(
                f"Can not parse given string '{text}' with length {len(text)} "
                f"into a bigram as it is too short."
            )
        if len(text) > 2:
            raise BigramError(
                f"Can not parse given string '{text}' with length {len(text)} "
                f"into a bigram as it is too long."
            )
        return cls(text[0], text[1])

    def __str__(self) -> str:
        return self.first + self.second


def detect_bigrams(content: str) -> Optional[Dict[str, int]]:
    """
    Counts symbol bigrams in non-overlapping two-character chunks of `content`.

    Chunks are taken at positions 0-1, 2-3, ... so a pair straddling a chunk
    boundary is never seen, and a trailing single character is dropped.
    A chunk made of the same symbol twice invalidates the whole input.

    Returns None for empty input, for an invalidated input, or when no
    bigram was found.
    """
    if not content:
        return None

    counts: Dict[str, int] = {}
    for i in range(0, len(content), 2):
        first = content[i]
        if first not in ALPHABET:
            continue

        if i + 1 >= len(content):
            continue
        second = content[i + 1]
        if second not in ALPHABET:
            continue

        if first == second:
            return None

        key = first + second
        counts[key] = counts.get(key, 0) + 1

    return counts or None
