"""
Index module for the gematria engine.

This module precomputes every corpus word's weight vector and builds, per
scheme, an inverted index from weight value to the words carrying that value.
The search engine uses these buckets to find closing words by exact lookup
instead of scanning the corpus.
"""

from __future__ import annotations
import logging
from collections import defaultdict
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Tuple

from .categories import ROLES, classify
from .models import WordRecord
from .normalize import weight_vector
from .schemes import DEFAULT_SCHEMES, Scheme

log = logging.getLogger(__name__)

Bucket = Tuple[WordRecord, ...]


@dataclass(frozen=True)
class WordIndex:
    """
    Immutable corpus index. Replaced wholesale when the corpus changes.

    Attributes
    ----------
    schemes : Tuple[Scheme, ...]
        Scheme order shared by every weight vector in the index.
    records : Tuple[WordRecord, ...]
        One record per corpus entry, in corpus order.
    buckets : Tuple[Mapping[int, Bucket], ...]
        For each scheme, weight value -> records with that weight. Every record
        sits in exactly one bucket per scheme.
    keys : Tuple[Tuple[int, ...], ...]
        For each scheme, the bucket keys in ascending order.
    by_initial : Mapping[str, Bucket]
        Records grouped by first letter.
    roles : Mapping[str, Bucket]
        Records per grammatical role (see categories.classify).
    """
    schemes: Tuple[Scheme, ...]
    records: Tuple[WordRecord, ...]
    buckets: Tuple[Mapping[int, Bucket], ...] = field(repr=False)
    keys: Tuple[Tuple[int, ...], ...] = field(repr=False)
    by_initial: Mapping[str, Bucket] = field(repr=False)
    roles: Mapping[str, Bucket] = field(repr=False)

    @property
    def empty(self) -> bool:
        return not self.records

    def __len__(self) -> int:
        return len(self.records)

    def bucket(self, scheme_pos: int, value: int) -> Bucket:
        return self.buckets[scheme_pos].get(value, ())


def build(words: Sequence[str], schemes: Sequence[Scheme] = DEFAULT_SCHEMES) -> WordIndex:
    """
    Build a WordIndex from a word list.

    Each word's weight vector is computed once (one pass per scheme over its
    letters) and the record is appended to one bucket per scheme, keyed by that
    scheme's total. The same corpus always yields the same bucket contents.

    Args:
        words: Corpus words, normally lowercase alphabetic strings.
        schemes: Weighting schemes, in the order used by target vectors.

    Returns:
        WordIndex: the finished, read-only index. Empty when words is empty.

    Example:
        >>> from gematria.schemes import SIMPLE
        >>> idx = build(["cab", "abc"], [SIMPLE])
        >>> sorted(r.text for r in idx.bucket(0, 6))
        ['abc', 'cab']
    """
    schemes = tuple(schemes)
    records: List[WordRecord] = [WordRecord(text=w, weights=weight_vector(w, schemes)) for w in words]

    per_scheme: List[Dict[int, List[WordRecord]]] = [defaultdict(list) for _ in schemes]
    initials: Dict[str, List[WordRecord]] = defaultdict(list)
    for rec in records:
        for pos, value in enumerate(rec.weights):
            per_scheme[pos][value].append(rec)
        if rec.text:
            initials[rec.text[0]].append(rec)

    buckets = tuple(MappingProxyType({v: tuple(recs) for v, recs in b.items()}) for b in per_scheme)
    keys = tuple(tuple(sorted(b)) for b in buckets)

    # role pools keep corpus order; duplicates of a word stay duplicated
    cats = classify(r.text for r in records)
    roles: Dict[str, Bucket] = {}
    for role in ROLES:
        members = set(getattr(cats, role))
        roles[role] = tuple(r for r in records if r.text in members)

    log.info("Built word index: words=%d schemes=%s", len(records), [s.name for s in schemes])
    return WordIndex(
        schemes=schemes,
        records=tuple(records),
        buckets=buckets,
        keys=keys,
        by_initial=MappingProxyType({ch: tuple(recs) for ch, recs in initials.items()}),
        roles=MappingProxyType(roles),
    )
