from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple

ARTICLES = ("the", "a", "an")
CONJUNCTIONS = ("and", "or", "but", "if", "when", "because", "while", "though")
PREPOSITIONS = (
    "in", "on", "at", "to", "for", "with", "from", "by", "of", "about",
    "into", "through", "after", "before", "over", "under",
)
PRONOUNS = (
    "i", "you", "he", "she", "it", "we", "they", "me", "him", "her", "us",
    "them", "my", "your", "his", "its", "our", "their",
)
NOUNS = (
    "man", "woman", "child", "person", "people", "house", "home", "tree", "water",
    "fire", "sun", "moon", "star", "heart", "soul", "life", "death", "love", "time",
    "world", "king", "queen", "angel", "god", "heaven", "earth", "light", "dark",
    "power", "peace", "war", "hope", "faith", "truth", "wisdom", "book", "word",
    "voice", "hand", "eye", "mind", "body", "spirit",
)
VERBS = (
    "is", "are", "was", "were", "be", "been", "have", "has", "had", "do", "does",
    "did", "will", "would", "could", "should", "may", "might", "can", "run", "walk",
    "see", "look", "think", "know", "make", "come", "go", "say", "speak", "live",
    "die", "love", "hate", "want", "need", "give", "take", "find", "lose", "open",
    "close", "rise", "fall", "grow", "change",
)
ADJECTIVES = (
    "good", "bad", "great", "small", "big", "old", "new", "young", "long", "short",
    "high", "low", "hot", "cold", "dark", "bright", "happy", "sad", "strong", "weak",
    "true", "false", "holy", "sacred", "divine", "eternal", "ancient", "modern",
    "beautiful", "perfect", "pure", "wise", "brave", "kind", "free", "wild",
)

# Grammatical shapes an attempt may follow, keyed by phrase length.
# Only the non-final slots are honored; the closing word is chosen by weight.
PHRASE_SHAPES: dict[int, Tuple[Tuple[str, ...], ...]] = {
    2: (
        ("adjective", "noun"),
        ("noun", "verb"),
        ("article", "noun"),
    ),
    3: (
        ("noun", "verb", "noun"),
        ("article", "noun", "verb"),
        ("adjective", "noun", "verb"),
        ("article", "adjective", "noun"),
        ("noun", "conjunction", "noun"),
    ),
    4: (
        ("adjective", "noun", "preposition", "noun"),
    ),
    5: (
        ("article", "noun", "verb", "article", "noun"),
        ("noun", "verb", "preposition", "article", "noun"),
        ("adjective", "noun", "verb", "adjective", "noun"),
    ),
}

ROLES = ("articles", "conjunctions", "prepositions", "pronouns", "nouns", "verbs", "adjectives")

# shape slot -> Categories field
SLOT_ROLE = {
    "article": "articles",
    "conjunction": "conjunctions",
    "preposition": "prepositions",
    "pronoun": "pronouns",
    "noun": "nouns",
    "verb": "verbs",
    "adjective": "adjectives",
}


@dataclass(frozen=True)
class Categories:
    """Corpus words that appear in each curated role list. A word may sit in several roles."""
    articles: Tuple[str, ...] = ()
    conjunctions: Tuple[str, ...] = ()
    prepositions: Tuple[str, ...] = ()
    pronouns: Tuple[str, ...] = ()
    nouns: Tuple[str, ...] = ()
    verbs: Tuple[str, ...] = ()
    adjectives: Tuple[str, ...] = ()


def classify(words: Iterable[str]) -> Categories:
    present = set(words)

    def keep(role: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(w for w in role if w in present)

    return Categories(
        articles=keep(ARTICLES),
        conjunctions=keep(CONJUNCTIONS),
        prepositions=keep(PREPOSITIONS),
        pronouns=keep(PRONOUNS),
        nouns=keep(NOUNS),
        verbs=keep(VERBS),
        adjectives=keep(ADJECTIVES),
    )
