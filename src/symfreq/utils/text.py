# src/symfreq/utils/text.py
from typing import Sequence


def join_with_commas(items: Sequence[str]) -> str:
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    return ", ".join(items)
