from __future__ import annotations
import logging
import random
from collections import Counter
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from . import config as CFG
from .models import AnagramOutcome, Decomposition, EmptyInput, WordRecord
from .normalize import normalize_letters

log = logging.getLogger(__name__)

_Entry = Tuple[str, Counter, float]  # (word, letter counts, pick weight)


def _fits(need: Counter, have: Counter) -> bool:
    """True when every letter of need, with multiplicity, is available in have."""
    return all(have[ch] >= n for ch, n in need.items())


def _entries(corpus: Iterable[Union[WordRecord, str]], exponent: float) -> List[_Entry]:
    out: List[_Entry] = []
    for item in corpus:
        text = item.text if isinstance(item, WordRecord) else str(item)
        letters = normalize_letters(text)
        if letters:
            out.append((text, Counter(letters), len(letters) ** exponent))
    return out


def decompose(letters: Union[str, Iterable[str]],
              corpus: Sequence[Union[WordRecord, str]],
              max_attempts: int = CFG.ANAGRAM_ATTEMPTS,
              *,
              exponent: float = CFG.ANAGRAM_LENGTH_EXPONENT,
              rng: Optional[random.Random] = None) -> AnagramOutcome:
    """
    Spell the letter multiset with corpus words using randomized greedy restarts.

    Each attempt repeatedly picks a consumable word (weighted by length**exponent),
    removes its letters, and stops when nothing fits. The first attempt that uses
    every letter wins; otherwise the attempt with the fewest leftover letters is
    returned. Empty input returns EmptyInput.
    """
    if max_attempts <= 0:
        raise ValueError("max_attempts must be positive")
    if isinstance(letters, Counter):
        letters = letters.elements()
    pool = Counter(normalize_letters("".join(letters)))
    size = sum(pool.values())
    if size == 0:
        return EmptyInput()

    rng = rng or random.Random()
    # only words that fit the full multiset can ever fit a smaller remainder
    usable = [e for e in _entries(corpus, exponent) if _fits(e[1], pool)]
    if not usable:
        log.info("No corpus word fits the %d input letters", size)
        return Decomposition(phrase=(), leftover=size, remaining=Counter(pool))

    best: Optional[Decomposition] = None
    for attempt in range(1, max_attempts + 1):
        remaining = Counter(pool)
        left = size
        phrase: List[str] = []
        candidates = usable
        while left:
            candidates = [e for e in candidates if _fits(e[1], remaining)]
            if not candidates:
                break
            word, counts, _ = rng.choices(candidates, weights=[e[2] for e in candidates])[0]
            remaining.subtract(counts)
            left -= sum(counts.values())
            phrase.append(word)

        if left == 0:
            log.info("Anagram found on attempt %d: %r", attempt, " ".join(phrase))
            return Decomposition(phrase=tuple(phrase), leftover=0, remaining=Counter())
        if best is None or left < best.leftover:
            best = Decomposition(phrase=tuple(phrase), leftover=left, remaining=+remaining)

    log.info("No full anagram in %d attempts; best leaves %d letters", max_attempts, best.leftover)
    return best
