# gematria/engine.py
from __future__ import annotations

import logging
import os
import random
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Union

from . import config as CFG
from .anagram import decompose
from .index import WordIndex, build as build_index
from .loader import default_words, load_words
from .models import AnagramOutcome, SearchOutcome, TargetVector
from .normalize import Weight, compute_weight
from .schemes import DEFAULT_SCHEMES, Scheme
from .search import SearchSettings, search, search_sync

log = logging.getLogger(__name__)

Targets = Union[TargetVector, Mapping[str, int]]


class Engine:
    """
    Thin orchestration layer that glues together:
      - the corpus provider (explicit words, word files under roots, or the built-in list),
      - the word index (index.build), rebuilt only when the corpus instance changes,
      - the composition search (search.search) and the anagram decomposer.

    Public API (used by CLI/Flask):
      * build(words=..., roots=...): load corpus -> build index
      * weigh(text):                 per-scheme totals and breakdowns
      * search(targets) / generate(targets): async / sync phrase search
      * decompose(letters):          anagram over the indexed words
      * shutdown():                  drop the index
    """

    # ------------- lifecycle -------------

    def __init__(self, schemes: Sequence[Scheme] = DEFAULT_SCHEMES) -> None:
        self.schemes = tuple(schemes)
        self.index: Optional[WordIndex] = None
        self._corpus: Optional[Sequence[str]] = None

    # /* ~~~ Load a corpus and (re)build the index when it changed ~~~ */
    def build(
        self,
        words: Optional[Sequence[str]] = None,
        *,
        roots: Optional[Iterable[str]] = None,
        schemes: Optional[Sequence[Scheme]] = None,
        verbose: bool = False,
    ) -> WordIndex:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["GEMATRIA_VERBOSE"] = "1"

        if schemes is not None and tuple(schemes) != self.schemes:
            self.schemes = tuple(schemes)
            self._corpus = None  # scheme change invalidates the index

        if words is None:
            roots = list(roots or [])
            if roots:
                log.info("Loading corpus from %s", roots)
                words = load_words(roots)
                if not words:
                    log.warning("No usable words found under %s", roots)
            else:
                log.info("Using built-in word list")
                words = default_words()

        # same corpus instance -> keep the current index
        if self.index is not None and words is self._corpus:
            log.info("Corpus unchanged; reusing index (%d words)", len(self.index))
            return self.index

        idx = build_index(words, self.schemes)
        # commit both together; searches never see a half-built index
        self.index, self._corpus = idx, words
        log.info("Engine build() complete: words=%d", len(idx))
        return idx

    # ------------- queries -------------

    def weigh(self, text: str) -> Dict[str, Weight]:
        """Per-scheme weight of arbitrary text. Works without a corpus."""
        return {s.name: compute_weight(text, s) for s in self.schemes}

    def target(self, targets: Targets) -> TargetVector:
        if isinstance(targets, TargetVector):
            return targets
        return TargetVector.from_mapping(self.schemes, targets)

    # /* ~~~ Search for a phrase hitting the targets (async; yields to the loop) ~~~ */
    async def search(
        self,
        targets: Targets,
        *,
        max_attempts: int = CFG.MAX_ATTEMPTS,
        timeout_ms: int = CFG.TIMEOUT_MS,
        settings: Optional[SearchSettings] = None,
        rng: Optional[random.Random] = None,
    ) -> SearchOutcome:
        idx = self._require_index()
        return await search(self.target(targets), idx, max_attempts, timeout_ms,
                            settings=settings, rng=rng)

    def generate(
        self,
        targets: Targets,
        *,
        max_attempts: int = CFG.MAX_ATTEMPTS,
        timeout_ms: int = CFG.TIMEOUT_MS,
        settings: Optional[SearchSettings] = None,
        rng: Optional[random.Random] = None,
    ) -> SearchOutcome:
        """Blocking variant of search() for callers without an event loop."""
        idx = self._require_index()
        return search_sync(self.target(targets), idx, max_attempts, timeout_ms,
                           settings=settings, rng=rng)

    def decompose(
        self,
        letters: str,
        *,
        max_attempts: int = CFG.ANAGRAM_ATTEMPTS,
        rng: Optional[random.Random] = None,
    ) -> AnagramOutcome:
        idx = self._require_index()
        return decompose(letters, idx.records, max_attempts, rng=rng)

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.index = None
        self._corpus = None
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require_index(self) -> WordIndex:
        if self.index is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        return self.index

    @property
    def words(self) -> List[str]:
        return [r.text for r in self._require_index().records]
