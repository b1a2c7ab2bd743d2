from __future__ import annotations
import os

# /* ~~~ search defaults ~~~ */
MAX_ATTEMPTS: int = 500_000
TIMEOUT_MS: int = 30_000

# mean enabled target -> [min, max] words per attempt; last band is open-ended
WORD_COUNT_BANDS: tuple[tuple[int | None, tuple[int, int]], ...] = (
    (100, (1, 2)),
    (300, (1, 3)),
    (800, (2, 4)),
    (2000, (2, 5)),
    (None, (3, 6)),
)

# fraction of the ideal running pace an interior word must reach, per scheme
PACE_FLOOR: dict[str, float] = {
    "hebrew": 0.3,
    "english": 0.5,
    "simple": 0.5,
    "aiq_bekar": 0.3,
}
DEFAULT_PACE_FLOOR: float = 0.5

INTERIOR_RETRIES: int = 100

# closing-word bucket scan: full scan up to this size, else a window of the same size
SCAN_EXHAUSTIVE_LIMIT: int = 500
SCAN_WINDOW: int = 500

# first words tried by the two-word closing step
PAIR_FIRST_CANDIDATES: int = 40

# probability of honoring a random initial letter for the first word
FIRST_LETTER_BIAS: float = 0.5

# probability that an attempt follows a grammatical phrase shape
SHAPE_PROBABILITY: float = 0.7

# timeout check / cooperative yield cadence (attempts) and yield delay (seconds)
CHECK_EVERY: int = 10_000
YIELD_SECONDS: float = 0.001

# /* ~~~ anagram decomposer ~~~ */
ANAGRAM_ATTEMPTS: int = 1000
ANAGRAM_LENGTH_EXPONENT: float = 1.5

# /* ~~~ corpus provider ~~~ */
MIN_WORD_LEN: int = 2
MAX_WORD_LEN: int = 12
INCLUDE_EXTS = [".txt"]
PROGRESS_EVERY_FILES: int = 500

VERBOSE = os.environ.get("GEMATRIA_VERBOSE") == "1"
