from __future__ import annotations
from dataclasses import dataclass, field
from string import ascii_lowercase
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True, eq=False)
class Scheme:
    """One letter -> integer weighting table. Letters missing from the table weigh 0."""
    name: str
    values: Mapping[str, int] = field(repr=False)

    def __post_init__(self) -> None:
        table = {ch: int(v) for ch, v in dict(self.values).items()}
        for ch, v in table.items():
            if len(ch) != 1 or ch not in ascii_lowercase or v < 0:
                raise ValueError(f"scheme {self.name!r}: bad entry {ch!r}={v}")
        object.__setattr__(self, "values", MappingProxyType(table))

    def __getitem__(self, ch: str) -> int:
        return self.values.get(ch, 0)

    def __hash__(self) -> int:
        return hash((self.name, tuple(sorted(self.values.items()))))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scheme):
            return NotImplemented
        return self.name == other.name and dict(self.values) == dict(other.values)


def _positional(step: int = 1) -> dict[str, int]:
    return {ch: (i + 1) * step for i, ch in enumerate(ascii_lowercase)}


HEBREW = Scheme("hebrew", {
    "a": 1, "b": 2, "c": 3, "d": 4, "e": 5, "f": 6, "g": 7, "h": 8, "i": 9,
    "j": 600, "k": 10, "l": 20, "m": 30, "n": 40, "o": 50, "p": 60, "q": 70,
    "r": 80, "s": 90, "t": 100, "u": 200, "v": 700, "w": 900, "x": 300,
    "y": 400, "z": 500,
})

ENGLISH = Scheme("english", _positional(6))

SIMPLE = Scheme("simple", _positional(1))

AIQ_BEKAR = Scheme("aiq_bekar", {
    "a": 1, "b": 20, "c": 13, "d": 6, "e": 8, "f": 17, "g": 19, "h": 3, "i": 5,
    "j": 14, "k": 16, "l": 9, "m": 11, "n": 22, "o": 15, "p": 7, "q": 18,
    "r": 21, "s": 4, "t": 13, "u": 6, "v": 8, "w": 17, "x": 19, "y": 3, "z": 5,
})

# Primary, Secondary, Tertiary, Quaternary
DEFAULT_SCHEMES: tuple[Scheme, ...] = (HEBREW, ENGLISH, SIMPLE, AIQ_BEKAR)

_BY_NAME = {s.name: s for s in DEFAULT_SCHEMES}


def get_scheme(name: str) -> Scheme:
    try:
        return _BY_NAME[name.strip().lower()]
    except KeyError:
        raise ValueError(f"unknown scheme {name!r}; expected one of {sorted(_BY_NAME)}") from None
