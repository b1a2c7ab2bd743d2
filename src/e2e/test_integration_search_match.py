import random

import pytest
from gematria.index import build
from gematria.models import Matched, TargetVector
from gematria.normalize import weight_vector
from gematria.schemes import AIQ_BEKAR, DEFAULT_SCHEMES, ENGLISH, HEBREW, SIMPLE, Scheme
from gematria.search import SearchSettings, search_sync, word_count_range

SIMPLE_FIRST = (SIMPLE, ENGLISH, HEBREW, AIQ_BEKAR)
SMALL = ["king", "queen", "stone", "river", "cat", "moon", "light", "dove"]


def _sums(words, schemes):
    vecs = [weight_vector(w, schemes) for w in words]
    return tuple(sum(col) for col in zip(*vecs))


@pytest.mark.e2e
def test_single_word_match_on_simple_scheme():
    idx = build(["cab", "abc"], SIMPLE_FIRST)
    target = TargetVector(values=(6, 0, 0, 0), enabled=(True, False, False, False))
    out = search_sync(target, idx, max_attempts=1000, rng=random.Random(1))
    assert isinstance(out, Matched)
    assert len(out.phrase.words) == 1
    assert out.phrase.words[0] in {"cab", "abc"}
    assert out.phrase.weights[0] == 6


@pytest.mark.e2e
def test_disabled_schemes_are_not_checked():
    idx = build(["cat", "act", "dog"], DEFAULT_SCHEMES)
    # hebrew value is nonsense but disabled
    target = TargetVector(values=(999_999, 0, 24, 0), enabled=(False, False, True, False))
    out = search_sync(target, idx, max_attempts=2000, rng=random.Random(7))
    assert isinstance(out, Matched)
    assert _sums(out.phrase.words, DEFAULT_SCHEMES)[2] == 24


@pytest.mark.e2e
@pytest.mark.parametrize("seed", [3, 11, 29])
def test_matched_phrase_hits_every_enabled_target(seed):
    rng = random.Random(seed)
    idx = build(SMALL, DEFAULT_SCHEMES)
    pair = rng.sample(SMALL, 2)
    target = TargetVector(values=_sums(pair, DEFAULT_SCHEMES), enabled=(True, True, True, True))
    out = search_sync(target, idx, max_attempts=20_000, rng=rng)
    assert isinstance(out, Matched)
    assert _sums(out.phrase.words, DEFAULT_SCHEMES) == target.values
    assert out.phrase.weights == target.values
    assert out.attempts >= 1


@pytest.mark.e2e
def test_word_count_bands_grow_with_target():
    settings = SearchSettings()
    spans = [
        word_count_range(TargetVector(values=(v,), enabled=(True,)), settings)
        for v in (5, 150, 500, 1500, 50_000)
    ]
    assert spans == sorted(spans)
    assert all(lo >= 1 and lo <= hi for lo, hi in spans)


@pytest.mark.e2e
def test_bands_follow_mean_of_enabled_values_only():
    settings = SearchSettings(bands=((10, (1, 1)), (None, (4, 4))))
    t = TargetVector(values=(5, 10_000), enabled=(True, False))
    assert word_count_range(t, settings) == (1, 1)


@pytest.mark.e2e
def test_bad_targets_are_rejected():
    idx = build(["cab"], [SIMPLE])
    with pytest.raises(ValueError):
        TargetVector(values=(1, 2), enabled=(True,))
    with pytest.raises(ValueError):
        TargetVector(values=(1,), enabled=(False,))
    with pytest.raises(ValueError):
        TargetVector(values=(-3,), enabled=(True,))
    with pytest.raises(ValueError):
        search_sync(TargetVector(values=(6, 6), enabled=(True, True)), idx)
    with pytest.raises(ValueError):
        search_sync(TargetVector(values=(6,), enabled=(True,)), idx, max_attempts=0)


@pytest.mark.e2e
def test_target_from_scheme_names():
    t = TargetVector.from_mapping(DEFAULT_SCHEMES, {"simple": 74, "english": 444})
    assert t.values == (0, 444, 74, 0)
    assert t.enabled == (False, True, True, False)
    with pytest.raises(ValueError):
        TargetVector.from_mapping(DEFAULT_SCHEMES, {"ordinal": 1})


ONE_WORD = ((None, (1, 1)),)


@pytest.mark.e2e
def test_two_word_closing_when_no_single_word_fits():
    idx = build(["cab", "dog"], [SIMPLE])
    settings = SearchSettings(bands=ONE_WORD, shape_probability=0)
    out = search_sync(TargetVector(values=(32,), enabled=(True,)), idx,
                      max_attempts=10, settings=settings, rng=random.Random(4))
    assert isinstance(out, Matched)
    assert sorted(out.phrase.words) == ["cab", "dog"]
    assert out.phrase.weights == (32,)
    assert out.attempts == 1


@pytest.mark.e2e
def test_large_bucket_is_scanned_through_a_window():
    # one scheme counts a's, the other b's; only "ab" has one of each
    count_a, count_b = Scheme("count_a", {"a": 1}), Scheme("count_b", {"b": 1})
    fill = "cdefghijklmnopqrstuvwxyz"
    words = ["a" + x + y for x in fill for y in fill] + ["ab"] + ["b" + x + y for x in fill for y in fill]
    idx = build(words, [count_a, count_b])
    settings = SearchSettings(bands=ONE_WORD, pair_candidates=0)
    assert min(len(idx.bucket(0, 1)), len(idx.bucket(1, 1))) > settings.scan_limit

    out = search_sync(TargetVector(values=(1, 1), enabled=(True, True)), idx,
                      max_attempts=200, settings=settings, rng=random.Random(8))
    assert isinstance(out, Matched)
    assert out.phrase.words == ("ab",)


@pytest.mark.e2e
def test_search_settings_reject_bad_knobs():
    for bad in ({"check_every": 0}, {"interior_retries": 0}, {"scan_window": 0},
                {"pair_candidates": -1}, {"shape_probability": 1.5}, {"bands": ()},
                {"bands": ((None, (3, 2)),)}):
        with pytest.raises(ValueError):
            SearchSettings(**bad)
