"""Random number generators used by the benchmark problems.

The seeded generators are deterministic and reproduce the classic
BBOB-2009 sequences, so problem instances are identical across runs.
"""

from __future__ import annotations

import math
import random as _random

MAX_DIMENSION = 20000
DEFAULT_PROBLEM_ID = 0
DEFAULT_INSTANCE = 1
DEFAULT_DIMENSION = 4
DEFAULT_SEED = 1000

RND_MULTIPLIER = 16807
RND_MODULUS = 2147483647
RND_MODULUS_DIV = 127773
RND_MOD_MULTIPLIER = 2836

SHORT_LAG = 273
LONG_LAG = 607

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SEED_TABLE_SIZE = 32
_WARMUP_STEPS = 40
_INDEX_DIVISOR = 67108865.0
_NORMALISER = 2.147483647e9
_TINY = 1e-99

_generator = _random.Random()


def lcg_rand(seed: int) -> int:
    """Advance the Park-Miller linear congruential generator by one step."""
    seed_mod = math.floor(seed / RND_MODULUS_DIV)
    seed = RND_MULTIPLIER * (seed - seed_mod * RND_MODULUS_DIV) - RND_MOD_MULTIPLIER * seed_mod
    if seed < 0:
        seed += RND_MODULUS
    return seed


def bit(p: float = 0.5) -> int:
    """Return 0 or 1, drawn from a Bernoulli distribution with mean ``p``."""
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"probability must lie in [0, 1], got {p}")
    return int(_generator.random() < p)


def integer(low: int = INT_MIN, high: int = INT_MAX) -> int:
    """Return a uniform random integer in the closed range [low, high]."""
    if low > high:
        raise ValueError(f"empty range [{low}, {high}]")
    return _generator.randint(low, high)


def integers(n: int, low: int = INT_MIN, high: int = INT_MAX) -> list[int]:
    """Return ``n`` uniform random integers in [low, high]."""
    return [integer(low, high) for _ in range(n)]


def bit_string(n: int, p: float = 0.5) -> list[int]:
    """Return ``n`` random bits, each 1 with probability ``p``."""
    return [bit(p) for _ in range(n)]


def _seed_table(seed: int) -> tuple[int, list[int]]:
    table = [0] * _SEED_TABLE_SIZE
    for i in reversed(range(_WARMUP_STEPS)):
        seed = lcg_rand(seed)
        if i < _SEED_TABLE_SIZE:
            table[i] = seed
    return seed, table


def _scale(value: float, lb: float, ub: float) -> float:
    if value == 0.0:
        value = _TINY
    return value * (ub - lb) + lb


def uniform(n: int, seed: int, lb: float = 0.0, ub: float = 1.0) -> list[float]:
    """Return ``n`` seeded uniform numbers scaled to [lb, ub]."""
    seed, table = _seed_table(seed)
    result = []
    for _ in range(n):
        rand_value = lcg_rand(seed)
        index = math.floor(seed / _INDEX_DIVISOR)
        seed = table[index]
        table[index] = rand_value
        result.append(_scale(seed / _NORMALISER, lb, ub))
    return result


def _box_muller(u: list[float], n: int, lb: float, ub: float) -> list[float]:
    return [
        _scale(math.sqrt(-2.0 * math.log(a)) * math.cos(2.0 * math.pi * b), lb, ub)
        for a, b in zip(u[:n], u[n:])
    ]


def normal(n: int, seed: int, lb: float = 0.0, ub: float = 1.0) -> list[float]:
    """Return ``n`` seeded Gaussian numbers, scaled by (ub - lb) and shifted by lb."""
    u = uniform(2 * n, max(1, abs(seed)))
    return _box_muller(u, n, lb, ub)


def bbob2009_uniform(n: int, seed: int, lb: float = 0.0, ub: float = 1.0) -> list[float]:
    """Return ``n`` uniform numbers following the BBOB-2009 generator."""
    seed, table = _seed_table(max(1, abs(seed)))
    random_number = table[0]
    result = []
    for _ in range(n):
        index = math.floor(random_number / _INDEX_DIVISOR)
        seed = lcg_rand(seed)
        random_number = table[index]
        table[index] = seed
        result.append(_scale(random_number / _NORMALISER, lb, ub))
    return result


def bbob2009_normal(n: int, seed: int, lb: float = 0.0, ub: float = 1.0) -> list[float]:
    """Return ``n`` Gaussian numbers following the BBOB-2009 generator."""
    if 2 * n >= 6000:
        raise ValueError(f"at most 2999 normal numbers can be drawn, got {n}")
    u = bbob2009_uniform(2 * n, seed)
    return _box_muller(u, n, lb, ub)