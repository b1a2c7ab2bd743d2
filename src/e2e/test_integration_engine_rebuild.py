import asyncio
import random
from pathlib import Path

import pytest
from gematria.engine import Engine
from gematria.models import Decomposition, EmptyCorpus, Matched
from gematria.schemes import SIMPLE


def _seed(tmp: Path) -> str:
    root = tmp / "Words"; root.mkdir()
    (root / "w.txt").write_text("cab abc\ncat\n", encoding="utf-8")
    return str(root)


@pytest.mark.e2e
def test_rebuild_only_on_new_corpus_instance():
    eng = Engine()
    try:
        words = ["cab", "abc"]
        first = eng.build(words)
        assert eng.build(words) is first
        second = eng.build(list(words))
        assert second is not first
        assert eng.index is second
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_builtin_corpus_is_the_default():
    eng = Engine()
    try:
        idx = eng.build()
        assert len(idx) > 500
        assert "wisdom" in eng.words
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_build_from_roots_and_search(tmp_path: Path):
    eng = Engine()
    try:
        eng.build(roots=[_seed(tmp_path)])
        assert sorted(eng.words) == ["abc", "cab", "cat"]
        out = eng.generate({"simple": 24}, max_attempts=1000, rng=random.Random(3))
        assert isinstance(out, Matched)
        assert out.phrase.words == ("cat",)
        assert eng.weigh(out.phrase.text)["simple"].total == 24
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_async_search_and_decompose():
    eng = Engine(schemes=[SIMPLE])
    try:
        eng.build(["cab", "abc", "cat"])
        out = asyncio.run(eng.search({"simple": 6}, max_attempts=1000, rng=random.Random(9)))
        assert isinstance(out, Matched)
        dec = eng.decompose("tac")
        assert isinstance(dec, Decomposition) and dec.phrase == ("cat",)
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_empty_corpus_outcome():
    eng = Engine()
    eng.build([])
    assert isinstance(eng.generate({"hebrew": 111}), EmptyCorpus)


@pytest.mark.e2e
def test_weigh_works_without_corpus_but_search_does_not():
    eng = Engine()
    assert eng.weigh("cab")["simple"].total == 6
    with pytest.raises(RuntimeError):
        eng.generate({"simple": 6})
    with pytest.raises(RuntimeError):
        eng.decompose("cat")


@pytest.mark.e2e
def test_builtin_corpus_builds_once():
    eng = Engine()
    try:
        first = eng.build()
        assert eng.build() is first
        assert Engine().build() is not first
    finally:
        eng.shutdown()
