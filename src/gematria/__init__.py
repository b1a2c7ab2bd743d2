"""
Gematria Engine Module

This module computes letter-weight sums of text under several gematria schemes
and searches a word corpus for short phrases whose sums hit chosen targets in
every selected scheme at once. It can also split a fixed set of letters into
dictionary words.

The module keeps its concerns apart:
- Scheme tables and the weight calculator
- Corpus loading and the weight-bucket index
- Phrase search and anagram decomposition
- Data models for records, targets and outcomes
- Configuration constants

Main Entry Points:
    Engine: build a corpus index, then weigh / search / generate / decompose
    compute_weight(text, scheme): total and per-letter breakdown
    build(words, schemes): build a WordIndex
    search(target, index, ...): async phrase search

Example Usage:
    from gematria import Engine

    eng = Engine()
    eng.build()                      # built-in word list
    outcome = eng.generate({"simple": 74, "english": 444})
    print(outcome)
"""

# src/gematria/__init__.py
from .anagram import decompose
from .engine import Engine
from .index import WordIndex, build
from .models import (
    Approximation, Decomposition, EmptyCorpus, EmptyInput, Exhausted, Matched,
    NoMatch, Phrase, TargetVector, TimedOut, WordRecord,
)
from .normalize import Weight, compute_weight, format_breakdown, weight_vector
from .schemes import AIQ_BEKAR, DEFAULT_SCHEMES, ENGLISH, HEBREW, SIMPLE, Scheme, get_scheme
from .search import SearchSettings, search, search_sync

__version__ = "1.0.0"
__all__ = [
    "Engine", "WordIndex", "build", "search", "search_sync", "decompose",
    "compute_weight", "weight_vector", "format_breakdown", "Weight",
    "Scheme", "get_scheme", "HEBREW", "ENGLISH", "SIMPLE", "AIQ_BEKAR", "DEFAULT_SCHEMES",
    "SearchSettings", "TargetVector", "WordRecord", "Phrase", "Approximation",
    "Matched", "NoMatch", "TimedOut", "Exhausted", "EmptyCorpus",
    "Decomposition", "EmptyInput",
]
