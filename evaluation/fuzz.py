"""Deterministic candidate-line fuzzing utilities.

The helpers in this module synthesise password-like lines used to exercise the
mask and substitution invariants.  Lines are assembled from short words, digit
runs and punctuation, then perturbed with a few edits that commonly trip up
mask handling:

* a literal ``?`` next to a class letter (``"?u"``, ``"?d"``)
* non-ASCII letters that pass through masks unchanged
* case flips and leetspeak digits
* repeated chunks so substitution finds more than one occurrence

All edits are driven by a :class:`random.Random` seeded via
:func:`rng_from_seed`.  Given the same seed and options the output is fully
deterministic.
"""

from __future__ import annotations

import random
import string
from dataclasses import dataclass
from typing import Iterable

_WORDS = ["pass", "word", "dragon", "summer", "Monkey", "love", "admin", "qwerty", "Jello"]
_SPECIALS = "!@#$%^&*?_-. "
_NON_ASCII = ["é", "ß", "ü", "ñ", "ø", "€"]
_LEET = {"a": "4", "e": "3", "i": "1", "o": "0", "s": "5"}


@dataclass(slots=True, frozen=True)
class FuzzOptions:
    """Configuration for :func:`candidate_line`.

    Attributes mirror the probabilities for each edit.  ``max_variants``
    controls how many lines :func:`variants` yields.
    """

    max_variants: int = 50
    max_parts: int = 4
    sentinel_prob: float = 0.15
    non_ascii_prob: float = 0.1
    case_flip_prob: float = 0.2
    leet_prob: float = 0.15
    repeat_prob: float = 0.25
    ascii_only: bool = False


def rng_from_seed(seed: int) -> random.Random:
    """Return a deterministic :class:`~random.Random` seeded with ``seed``."""

    return random.Random(seed)


def _part(rng: random.Random) -> str:
    kind = rng.randrange(3)
    if kind == 0:
        return rng.choice(_WORDS)
    if kind == 1:
        return "".join(rng.choice(string.digits) for _ in range(rng.randint(1, 4)))
    return "".join(rng.choice(_SPECIALS) for _ in range(rng.randint(1, 2)))


def _flip_case(text: str, rng: random.Random, prob: float) -> str:
    return "".join(ch.swapcase() if rng.random() < prob else ch for ch in text)


def _leet(text: str, rng: random.Random, prob: float) -> str:
    return "".join(_LEET[ch] if ch in _LEET and rng.random() < prob else ch for ch in text)


def _insert_sentinel(text: str, rng: random.Random) -> str:
    idx = rng.randint(0, len(text))
    return text[:idx] + "?" + rng.choice("uldsb") + text[idx:]


def _insert_non_ascii(text: str, rng: random.Random) -> str:
    idx = rng.randint(0, len(text))
    return text[:idx] + rng.choice(_NON_ASCII) + text[idx:]


def candidate_line(*, seed: int, opts: FuzzOptions) -> str:
    """Return a synthetic candidate line for ``seed`` and ``opts``."""

    rng = rng_from_seed(seed)
    parts = [_part(rng) for _ in range(rng.randint(1, opts.max_parts))]
    if len(parts) > 1 and rng.random() < opts.repeat_prob:
        parts.append(rng.choice(parts))
    line = "".join(parts)
    line = _flip_case(line, rng, opts.case_flip_prob)
    line = _leet(line, rng, opts.leet_prob)
    if rng.random() < opts.sentinel_prob:
        line = _insert_sentinel(line, rng)
    if not opts.ascii_only and rng.random() < opts.non_ascii_prob:
        line = _insert_non_ascii(line, rng)
    return line


def variants(*, base_seed: int, opts: FuzzOptions) -> Iterable[str]:
    """Yield deterministic candidate lines."""

    for i in range(opts.max_variants):
        yield candidate_line(seed=base_seed + i, opts=opts)
