from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Sequence

from .schemes import Scheme

_ALPHABET = frozenset("abcdefghijklmnopqrstuvwxyz")


@dataclass(frozen=True)
class Weight:
    total: int
    breakdown: tuple[tuple[str, int], ...]


def normalize_letters(text: str) -> str:
    """
    Reduce text to the letters that carry weight:
      * lowercase
      * keep a-z only; accented letters, digits, punctuation and whitespace vanish
    """
    return "".join(ch for ch in text.lower() if ch in _ALPHABET)


def compute_weight(text: str, scheme: Scheme) -> Weight:
    """Per-letter breakdown and total of text under one scheme. Never fails."""
    breakdown = tuple((ch, scheme[ch]) for ch in normalize_letters(text))
    return Weight(total=sum(v for _, v in breakdown), breakdown=breakdown)


def weight_vector(text: str, schemes: Sequence[Scheme]) -> tuple[int, ...]:
    """One total per scheme. Normalizes once instead of once per scheme."""
    letters = normalize_letters(text)
    return tuple(sum(s[ch] for ch in letters) for s in schemes)


def format_breakdown(breakdown: Iterable[tuple[str, int]]) -> str:
    return " + ".join(f"{ch}{v}" for ch, v in breakdown)


def is_repdigit(n: int) -> bool:
    """111, 2222, ... (at least two identical decimal digits)."""
    s = str(n)
    return n > 0 and len(s) > 1 and len(set(s)) == 1
