import random
from collections import Counter

import pytest
from gematria.anagram import decompose
from gematria.index import build
from gematria.models import Decomposition, EmptyInput
from gematria.schemes import DEFAULT_SCHEMES


@pytest.mark.e2e
def test_cat_from_cat():
    out = decompose({"c", "a", "t"}, ["cat"], max_attempts=1000)
    assert out == Decomposition(phrase=("cat",), leftover=0)
    assert out.complete


@pytest.mark.e2e
def test_accepts_word_records_and_multiset_input():
    idx = build(["cat"], DEFAULT_SCHEMES)
    out = decompose(Counter("tac"), idx.records)
    assert isinstance(out, Decomposition)
    assert out.phrase == ("cat",) and out.leftover == 0


@pytest.mark.e2e
def test_successful_result_uses_exactly_the_input_letters():
    corpus = ["listen", "silent", "enlist", "tin", "lens", "net", "tinsel"]
    letters = "Silent, Listen!"
    out = decompose(letters, corpus, max_attempts=1000, rng=random.Random(4))
    assert isinstance(out, Decomposition) and out.complete
    assert Counter("".join(out.phrase)) == Counter("silentlisten")


@pytest.mark.e2e
def test_returns_fewest_leftover_when_nothing_is_exact():
    out = decompose("catx", ["cat", "act", "at"], max_attempts=50, rng=random.Random(0))
    assert isinstance(out, Decomposition)
    assert out.leftover == 1
    assert out.remaining == Counter({"x": 1})
    assert Counter("".join(out.phrase)) + out.remaining == Counter("catx")


@pytest.mark.e2e
def test_empty_input():
    assert isinstance(decompose("", ["cat"]), EmptyInput)
    assert isinstance(decompose("123 !", ["cat"]), EmptyInput)


@pytest.mark.e2e
def test_nothing_consumable_leaves_everything():
    out = decompose("zzz", ["cat", "dog"])
    assert isinstance(out, Decomposition)
    assert out.phrase == () and out.leftover == 3
