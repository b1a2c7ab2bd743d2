from __future__ import annotations
import asyncio
import bisect
import logging
import random
import time
from dataclasses import dataclass, field
from string import ascii_lowercase
from typing import List, Mapping, Optional, Sequence, Tuple

from . import config as CFG
from .categories import PHRASE_SHAPES, SLOT_ROLE
from .index import Bucket, WordIndex
from .models import (
    Approximation, EmptyCorpus, Exhausted, Matched, Phrase, SearchOutcome,
    TargetVector, TimedOut, WordRecord,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchSettings:
    """
    Heuristic knobs for one search. Defaults come from gematria.config;
    tests swap in small values for deterministic runs.
    """
    bands: Tuple[Tuple[Optional[int], Tuple[int, int]], ...] = CFG.WORD_COUNT_BANDS
    pace_floor: Mapping[str, float] = field(default_factory=lambda: dict(CFG.PACE_FLOOR))
    default_pace_floor: float = CFG.DEFAULT_PACE_FLOOR
    interior_retries: int = CFG.INTERIOR_RETRIES
    scan_limit: int = CFG.SCAN_EXHAUSTIVE_LIMIT
    scan_window: int = CFG.SCAN_WINDOW
    pair_candidates: int = CFG.PAIR_FIRST_CANDIDATES
    first_letter_bias: float = CFG.FIRST_LETTER_BIAS
    shape_probability: float = CFG.SHAPE_PROBABILITY
    check_every: int = CFG.CHECK_EVERY
    yield_seconds: float = CFG.YIELD_SECONDS

    def __post_init__(self) -> None:
        if not self.bands:
            raise ValueError("SearchSettings: bands must not be empty")
        for _, (lo, hi) in self.bands:
            if not 1 <= lo <= hi:
                raise ValueError(f"SearchSettings: bad word-count span ({lo}, {hi})")
        for name in ("check_every", "interior_retries", "scan_window"):
            if getattr(self, name) <= 0:
                raise ValueError(f"SearchSettings: {name} must be positive")
        for name in ("scan_limit", "pair_candidates", "yield_seconds"):
            if getattr(self, name) < 0:
                raise ValueError(f"SearchSettings: {name} must not be negative")
        for name in ("first_letter_bias", "shape_probability"):
            if not 0.0 <= getattr(self, name) <= 1.0:
                raise ValueError(f"SearchSettings: {name} must be within [0, 1]")


def word_count_range(target: TargetVector, settings: SearchSettings) -> Tuple[int, int]:
    """[min, max] phrase length for the band holding the mean enabled target."""
    active = target.active
    mean = sum(target.values[i] for i in active) / len(active)
    for bound, span in settings.bands:
        if bound is None or mean < bound:
            return span
    return settings.bands[-1][1]


class _Composer:
    """Builds one candidate phrase per call to attempt(). Holds no state between attempts."""

    def __init__(self, index: WordIndex, target: TargetVector,
                 settings: SearchSettings, rng: random.Random) -> None:
        self.index = index
        self.target = target
        self.settings = settings
        self.rng = rng
        self.active = target.active
        self.records = index.records
        self.floors = [
            (i, settings.pace_floor.get(index.schemes[i].name, settings.default_pace_floor))
            for i in self.active
        ]
        self.span = word_count_range(target, settings)

    # ---- helpers ----

    def _choice(self, pool: Sequence[WordRecord]) -> WordRecord:
        return pool[self.rng.randrange(len(pool))]

    def _initial_pool(self) -> Bucket:
        """With a fixed probability, narrow the pool to words starting with a random letter."""
        if self.rng.random() < self.settings.first_letter_bias:
            pool = self.index.by_initial.get(self.rng.choice(ascii_lowercase))
            if pool:
                return pool
        return self.records

    def _pick_interior(self, pool: Sequence[WordRecord], cum: List[int], k: int, n: int) -> WordRecord:
        """
        Word k of n (1-based, k < n). Accept only words that keep every enabled
        scheme at or under target and at or above its floor of the ideal pace.
        """
        values = self.target.values
        for _ in range(self.settings.interior_retries):
            rec = self._choice(pool)
            for i, floor in self.floors:
                new = cum[i] + rec.weights[i]
                if new > values[i] or new < floor * values[i] * k / n:
                    break
            else:
                return rec
        # relaxed: only "does not exceed"
        for _ in range(self.settings.interior_retries):
            rec = self._choice(self.records)
            if all(cum[i] + rec.weights[i] <= values[i] for i in self.active):
                return rec
        return self._choice(self.records)

    def _scan(self, bucket: Bucket, residual: Sequence[int]) -> Optional[WordRecord]:
        n = len(bucket)
        if n <= self.settings.scan_limit:
            window: Sequence[WordRecord] = bucket
        else:
            start = self.rng.randrange(n)
            window = bucket[start:start + self.settings.scan_window]
            short = self.settings.scan_window - len(window)
            if short > 0:
                window = window + bucket[:short]
        for rec in window:
            if all(rec.weights[i] == residual[i] for i in self.active):
                return rec
        return None

    def _close_single(self, residual: Sequence[int]) -> Optional[WordRecord]:
        """One word whose weights equal every enabled residual."""
        smallest: Bucket = ()
        for i in self.active:
            if residual[i] < 0:
                return None
            b = self.index.bucket(i, residual[i])
            if not b:
                return None  # an exact match must sit in every enabled bucket
            if not smallest or len(b) < len(smallest):
                smallest = b
        return self._scan(smallest, residual)

    def _close_pair(self, residual: Sequence[int]) -> Optional[Tuple[WordRecord, WordRecord]]:
        """
        Two closing words. First words come from the buckets of the enabled
        scheme with the smallest residual, restricted to values that still
        leave room; the second word is an exact single-word close.
        """
        anchor = min(self.active, key=lambda i: residual[i])
        limit = residual[anchor]
        if limit < 0:
            return None
        keys = self.index.keys[anchor]
        hi = bisect.bisect_right(keys, limit)
        if hi == 0:
            return None
        for _ in range(self.settings.pair_candidates):
            group = self.index.bucket(anchor, keys[self.rng.randrange(hi)])
            first = self._choice(group)
            rest = [r - w for r, w in zip(residual, first.weights)]
            if any(rest[i] < 0 for i in self.active):
                continue
            second = self._close_single(rest)
            if second is not None:
                return first, second
        return None

    # ---- one attempt ----

    def attempt(self) -> Tuple[Phrase, bool]:
        n = self.rng.randint(*self.span)
        shape = None
        if n >= 2 and self.rng.random() < self.settings.shape_probability:
            shapes = PHRASE_SHAPES.get(n)
            if shapes:
                shape = self.rng.choice(shapes)

        words: List[str] = []
        cum = [0] * len(self.index.schemes)

        def add(rec: WordRecord) -> None:
            words.append(rec.text)
            for i, w in enumerate(rec.weights):
                cum[i] += w

        for k in range(1, n):
            pool: Sequence[WordRecord] = self.records
            if shape is not None:
                pool = self.index.roles.get(SLOT_ROLE[shape[k - 1]]) or self.records
            if k == 1 and pool is self.records:
                pool = self._initial_pool()
            add(self._pick_interior(pool, cum, k, n))

        residual = [t - c for t, c in zip(self.target.values, cum)]
        last = self._close_single(residual)
        if last is not None:
            add(last)
            return Phrase(tuple(words), tuple(cum)), True

        pair = self._close_pair(residual)
        if pair is not None:
            add(pair[0])
            add(pair[1])
            return Phrase(tuple(words), tuple(cum)), True

        # no exact close: finish the phrase for distance bookkeeping
        add(self._choice(self._initial_pool() if not words else self.records))
        return Phrase(tuple(words), tuple(cum)), False


async def search(target: TargetVector,
                 index: WordIndex,
                 max_attempts: int = CFG.MAX_ATTEMPTS,
                 timeout_ms: int = CFG.TIMEOUT_MS,
                 *,
                 settings: Optional[SearchSettings] = None,
                 rng: Optional[random.Random] = None) -> SearchOutcome:
    """
    Search for a word sequence whose weights sum exactly to every enabled
    target component.

    Every settings.check_every attempts the coroutine sleeps briefly so other
    tasks on the loop run, then checks the wall clock against timeout_ms.
    Nothing is awaited mid-attempt. The index is only read.

    Returns Matched on an exact hit, TimedOut or Exhausted carrying the closest
    phrase seen otherwise, and EmptyCorpus at once when the index is empty.
    """
    if max_attempts <= 0:
        raise ValueError("max_attempts must be positive")
    if len(target.values) != len(index.schemes):
        raise ValueError(
            f"target has {len(target.values)} components, index has {len(index.schemes)} schemes"
        )
    if index.empty:
        log.warning("Search requested on an empty corpus")
        return EmptyCorpus()

    settings = settings or SearchSettings()
    composer = _Composer(index, target, settings, rng or random.Random())
    log.info("Search start: target=%s enabled=%s words=%d span=%s",
             target.values, target.enabled, len(index), composer.span)

    started = time.monotonic()
    best: Optional[Approximation] = None
    for attempt in range(1, max_attempts + 1):
        phrase, matched = composer.attempt()
        if matched:
            log.info("Match after %d attempts: %r", attempt, phrase.text)
            return Matched(phrase=phrase, attempts=attempt)

        d = target.distance(phrase.weights)
        if best is None or d < best.distance:
            best = Approximation(phrase=phrase, distance=d)

        if attempt % settings.check_every == 0:
            await asyncio.sleep(settings.yield_seconds)
            elapsed_ms = (time.monotonic() - started) * 1000.0
            log.debug("%d attempts, %.0f ms; closest %r (distance %d)",
                      attempt, elapsed_ms, best.phrase.text, best.distance)
            if elapsed_ms >= timeout_ms:
                log.info("Search timed out after %d attempts", attempt)
                return TimedOut(best=best, attempts=attempt)

    log.info("No match after %d attempts; closest %r (distance %d)",
             max_attempts, best.phrase.text if best else None, best.distance if best else -1)
    return Exhausted(best=best, attempts=max_attempts)


def search_sync(target: TargetVector,
                index: WordIndex,
                max_attempts: int = CFG.MAX_ATTEMPTS,
                timeout_ms: int = CFG.TIMEOUT_MS,
                **kwargs) -> SearchOutcome:
    """Run search() to completion on a fresh event loop."""
    return asyncio.run(search(target, index, max_attempts, timeout_ms, **kwargs))
