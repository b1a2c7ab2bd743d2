# src/gematria/models.py
"""
Data models for the gematria engine.

These classes carry no search logic; they give loading, indexing, searching
and decomposing a shared, predictable vocabulary:

- WordRecord: one corpus word with its precomputed weight vector.
- TargetVector: the per-scheme values a search must hit, plus enable flags.
- Phrase / Approximation: what a search hands back.
- Matched / TimedOut / Exhausted / EmptyCorpus: search outcomes.
- Decomposition / EmptyInput: anagram outcomes.

Outcomes are plain values. A search that finds nothing returns a NoMatch
subclass carrying the closest phrase it saw; nothing here is raised.
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence, Tuple, Union

from .schemes import Scheme

WeightVector = Tuple[int, ...]


@dataclass(frozen=True, slots=True)
class WordRecord:
    """
    A corpus word and its weight under every indexed scheme.

    Attributes
    ----------
    text : str
        The word as supplied by the corpus provider.
    weights : WeightVector
        One total per scheme, in the index's scheme order.
    """
    text: str
    weights: WeightVector


@dataclass(frozen=True, slots=True)
class TargetVector:
    """
    Values a phrase must sum to, one per scheme. Disabled components are
    ignored by matching and by the distance metric; their value is unused.
    """
    values: WeightVector
    enabled: Tuple[bool, ...]

    def __post_init__(self) -> None:
        values = tuple(int(v) for v in self.values)
        enabled = tuple(bool(e) for e in self.enabled)
        if len(values) != len(enabled):
            raise ValueError("TargetVector: values and enabled must have the same length")
        if not any(enabled):
            raise ValueError("TargetVector: at least one scheme must be enabled")
        if any(v < 0 for v, on in zip(values, enabled) if on):
            raise ValueError("TargetVector: enabled target values must be non-negative")
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "enabled", enabled)

    @classmethod
    def from_mapping(cls, schemes: Sequence[Scheme], targets: Mapping[str, int]) -> "TargetVector":
        """Enable exactly the schemes named in targets."""
        names = [s.name for s in schemes]
        unknown = set(targets) - set(names)
        if unknown:
            raise ValueError(f"unknown scheme(s) {sorted(unknown)}; index has {names}")
        return cls(
            values=tuple(int(targets.get(n, 0)) for n in names),
            enabled=tuple(n in targets for n in names),
        )

    @property
    def active(self) -> Tuple[int, ...]:
        """Positions of the enabled schemes."""
        return tuple(i for i, on in enumerate(self.enabled) if on)

    def distance(self, weights: Sequence[int]) -> int:
        """Sum of absolute per-scheme differences over enabled schemes only."""
        return sum(abs(weights[i] - self.values[i]) for i in self.active)

    def matches(self, weights: Sequence[int]) -> bool:
        return all(weights[i] == self.values[i] for i in self.active)


@dataclass(frozen=True, slots=True)
class Phrase:
    """An ordered word sequence and the sum of its words' weight vectors."""
    words: Tuple[str, ...]
    weights: WeightVector

    @property
    def text(self) -> str:
        return " ".join(self.words)


@dataclass(frozen=True, slots=True)
class Approximation:
    phrase: Phrase
    distance: int


# ---------- search outcomes ----------

@dataclass(frozen=True, slots=True)
class Matched:
    phrase: Phrase
    attempts: int = 0


@dataclass(frozen=True, slots=True)
class NoMatch:
    """Search ended without an exact hit; best is the closest attempt seen."""
    best: Optional[Approximation]
    attempts: int = 0


@dataclass(frozen=True, slots=True)
class TimedOut(NoMatch):
    pass


@dataclass(frozen=True, slots=True)
class Exhausted(NoMatch):
    pass


@dataclass(frozen=True, slots=True)
class EmptyCorpus:
    """The index holds no words; search refuses to loop."""
    attempts: int = 0


SearchOutcome = Union[Matched, TimedOut, Exhausted, EmptyCorpus]


# ---------- anagram outcomes ----------

@dataclass(frozen=True, slots=True)
class Decomposition:
    """
    Best decomposition found. leftover == 0 means every input letter was used;
    remaining holds the letters that were not.
    """
    phrase: Tuple[str, ...]
    leftover: int
    remaining: Counter = field(default_factory=Counter, compare=False)

    @property
    def complete(self) -> bool:
        return self.leftover == 0


@dataclass(frozen=True, slots=True)
class EmptyInput:
    """Anagram requested on zero letters."""


AnagramOutcome = Union[Decomposition, EmptyInput]


def outcome_to_dict(outcome: Union[SearchOutcome, AnagramOutcome], schemes: Sequence[Scheme] = ()) -> dict:
    """JSON-ready view of an outcome. Weight vectors are keyed by scheme name when schemes are given."""
    names = [s.name for s in schemes]

    def phrase(p: Phrase) -> dict:
        weights = dict(zip(names, p.weights)) if names else list(p.weights)
        return {"phrase": p.text, "words": list(p.words), "weights": weights}

    if isinstance(outcome, Matched):
        return {"status": "matched", "attempts": outcome.attempts, **phrase(outcome.phrase)}
    if isinstance(outcome, NoMatch):
        status = "timed_out" if isinstance(outcome, TimedOut) else "exhausted"
        best = None
        if outcome.best is not None:
            best = {**phrase(outcome.best.phrase), "distance": outcome.best.distance}
        return {"status": status, "attempts": outcome.attempts, "best": best}
    if isinstance(outcome, EmptyCorpus):
        return {"status": "empty_corpus"}
    if isinstance(outcome, Decomposition):
        return {
            "status": "complete" if outcome.complete else "partial",
            "phrase": " ".join(outcome.phrase),
            "words": list(outcome.phrase),
            "leftover": outcome.leftover,
            "remaining": "".join(sorted(outcome.remaining.elements())),
        }
    if isinstance(outcome, EmptyInput):
        return {"status": "empty_input"}
    raise TypeError(f"not an outcome: {outcome!r}")
