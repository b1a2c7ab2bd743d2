import pytest
from gematria.index import build
from gematria.loader import default_words
from gematria.schemes import DEFAULT_SCHEMES, SIMPLE


def _bucket_texts(idx):
    return [
        {v: sorted(r.text for r in recs) for v, recs in b.items()}
        for b in idx.buckets
    ]


@pytest.mark.e2e
def test_cab_and_abc_share_a_bucket():
    idx = build(["cab", "abc"], [SIMPLE])
    assert sorted(r.text for r in idx.bucket(0, 6)) == ["abc", "cab"]
    assert idx.keys == ((6,),)
    assert all(r.weights == (6,) for r in idx.records)


@pytest.mark.e2e
def test_buckets_are_complete_and_exclusive():
    words = default_words()
    idx = build(words, DEFAULT_SCHEMES)
    assert len(idx) == len(words)
    for pos in range(len(DEFAULT_SCHEMES)):
        seen = 0
        for value, recs in idx.buckets[pos].items():
            assert all(r.weights[pos] == value for r in recs)
            seen += len(recs)
        assert seen == len(idx.records)
        assert list(idx.keys[pos]) == sorted(idx.buckets[pos])


@pytest.mark.e2e
def test_rebuild_is_idempotent():
    words = default_words()
    a = build(words, DEFAULT_SCHEMES)
    b = build(list(reversed(words)), DEFAULT_SCHEMES)
    assert _bucket_texts(a) == _bucket_texts(b)


@pytest.mark.e2e
def test_initial_and_role_pools():
    idx = build(["the", "king", "knight", "run", "zebra"], DEFAULT_SCHEMES)
    assert sorted(r.text for r in idx.by_initial["k"]) == ["king", "knight"]
    assert [r.text for r in idx.roles["articles"]] == ["the"]
    assert [r.text for r in idx.roles["nouns"]] == ["king"]
    assert [r.text for r in idx.roles["verbs"]] == ["run"]
    assert idx.roles["adjectives"] == ()


@pytest.mark.e2e
def test_empty_corpus_gives_empty_index():
    idx = build([], DEFAULT_SCHEMES)
    assert idx.empty and len(idx) == 0
    assert idx.bucket(0, 10) == ()


@pytest.mark.e2e
def test_index_tables_are_read_only():
    idx = build(["cab", "the"], DEFAULT_SCHEMES)
    with pytest.raises(TypeError):
        idx.buckets[0][999] = ()
    with pytest.raises(TypeError):
        idx.by_initial["z"] = ()
    with pytest.raises(TypeError):
        idx.roles["nouns"] = ()
