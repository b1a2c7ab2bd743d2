from __future__ import annotations
import functools
import logging
import os
from typing import Iterable, List, Tuple

from . import config as CFG
from .wordlist import builtin_words

log = logging.getLogger(__name__)


def _iter_word_files(roots: Iterable[str]) -> Iterable[str]:
    """Yield word-list files (by extension) recursively under each root. A file root is yielded as is."""
    exts = tuple(e.lower() for e in CFG.INCLUDE_EXTS)
    for root in roots:
        root = os.path.abspath(root)
        if os.path.isfile(root):
            yield root
            continue
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames.sort()
            for fn in sorted(filenames):
                if fn.lower().endswith(exts):
                    yield os.path.join(dirpath, fn)


def filter_words(words: Iterable[str],
                 min_len: int = CFG.MIN_WORD_LEN,
                 max_len: int = CFG.MAX_WORD_LEN) -> List[str]:
    """
    Lowercase, keep purely alphabetic a-z tokens within [min_len, max_len],
    drop duplicates (first occurrence wins).
    """
    seen: set[str] = set()
    out: List[str] = []
    for raw in words:
        w = raw.strip().lower()
        if not (min_len <= len(w) <= max_len):
            continue
        if not (w.isascii() and w.isalpha()):
            continue
        if w in seen:
            continue
        seen.add(w)
        out.append(w)
    return out


def load_words(roots: List[str],
               min_len: int = CFG.MIN_WORD_LEN,
               max_len: int = CFG.MAX_WORD_LEN) -> List[str]:
    """
    Scan roots for word-list files and return the filtered corpus.
    Every whitespace-separated token is a candidate; unreadable files are skipped.
    """
    tokens: List[str] = []
    file_count = 0
    for path in _iter_word_files(roots):
        try:
            with open(path, "r", encoding="utf-8", errors="ignore") as f:
                for line in f:
                    tokens.extend(line.split())
        except OSError as exc:
            log.warning("Skipping unreadable word file %s: %s", path, exc)
            continue
        file_count += 1
        if CFG.VERBOSE and file_count % CFG.PROGRESS_EVERY_FILES == 0:
            log.info("[scanned] files=%d tokens=%d", file_count, len(tokens))

    words = filter_words(tokens, min_len=min_len, max_len=max_len)
    log.info("Loaded %d words from %d files under %s", len(words), file_count, roots)
    return words


@functools.lru_cache(maxsize=1)
def default_words() -> Tuple[str, ...]:
    """The built-in curated list, filtered like any other corpus. One shared instance."""
    return tuple(filter_words(builtin_words()))
