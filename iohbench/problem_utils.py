"""Problem data structures and the transformations of the W-model.

Holds the solution, bound, metadata and state records shared by the
benchmark problems, together with the dummy, neutrality, epistasis and
ruggedness layers used to derive pseudo-Boolean problem variants.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Sequence, TypeVar

from .rng import uniform

T = TypeVar("T")


class OptimizationType(Enum):
    """Whether smaller or larger objective values are better."""

    MINIMIZATION = "minimization"
    MAXIMIZATION = "maximization"


def _better(a: float, b: float, optimization_type: OptimizationType) -> bool:
    if optimization_type is OptimizationType.MINIMIZATION:
        return a < b
    return a > b


@dataclass
class Solution(Generic[T]):
    """A point in the search space with its objective value."""

    x: list = field(default_factory=list)
    y: float = math.nan

    def as_double(self) -> "Solution[float]":
        """Return a copy whose variables are floats."""
        return Solution([float(v) for v in self.x], self.y)

    def copy(self) -> "Solution[T]":
        return Solution(list(self.x), self.y)

    def __str__(self) -> str:
        return f"x: {self.x} y: {self.y}"


@dataclass
class Constraint(Generic[T]):
    """Per-variable box bounds."""

    ub: list = field(default_factory=lambda: [math.inf])
    lb: list = field(default_factory=lambda: [-math.inf])

    @classmethod
    def filled(cls, size: int = 1, upper: float = math.inf,
               lower: float = -math.inf) -> "Constraint":
        """Build bounds with the same limits for each of ``size`` variables."""
        return cls([upper] * size, [lower] * size)

    def check_size(self, size: int) -> None:
        """Broadcast single bounds to ``size`` variables and verify the dimension."""
        if len(self.ub) == len(self.lb) == 1:
            self.ub = self.ub * size
            self.lb = self.lb * size
        if len(self.ub) != size or len(self.ub) != len(self.lb):
            raise ValueError("Bound dimension is wrong")

    def check(self, x: Sequence) -> bool:
        """Return whether every variable lies within its bounds."""
        return all(low <= value <= high for value, low, high in zip(x, self.lb, self.ub))

    def __str__(self) -> str:
        parts = "".join(
            f"{i}: ({low}, {high}) " for i, (low, high) in enumerate(zip(self.lb, self.ub))
        )
        return f"[ {parts}]"


@dataclass
class MetaData:
    """Identifying information about a problem."""

    problem_id: int
    instance: int
    name: str
    n_variables: int
    optimization_type: OptimizationType = OptimizationType.MINIMIZATION
    initial_objective_value: float = field(init=False)

    def __post_init__(self) -> None:
        self.initial_objective_value = (
            math.inf if self.optimization_type is OptimizationType.MINIMIZATION else -math.inf
        )

    def __str__(self) -> str:
        text = self.name
        if self.problem_id != 0:
            text += f" id: {self.problem_id}"
        if self.instance != 0:
            text += f" instance: {self.instance}"
        return (f"{text} optimization_type: {self.optimization_type.value}"
                f" n_variables: {self.n_variables}")


class State(Generic[T]):
    """Evaluation bookkeeping of a problem during a run."""

    def __init__(self, initial: Solution | None = None) -> None:
        self._initial = initial if initial is not None else Solution()
        self.current_internal: Solution = Solution()
        self.current: Solution = Solution()
        self.reset()

    def reset(self) -> None:
        """Forget all evaluations and restore the initial best solution."""
        self.evaluations = 0
        self.current_best = self._initial.copy()
        self.current_best_internal = self._initial.copy()
        self.optimum_found = False

    def update(self, meta_data: MetaData, objective: Solution) -> None:
        """Count an evaluation and record ``current`` if it improves on the best."""
        self.evaluations += 1
        if _better(self.current.y, self.current_best.y, meta_data.optimization_type):
            self.current_best_internal = self.current_internal.copy()
            self.current_best = self.current.copy()
            if objective.y == self.current.y:
                self.optimum_found = True

    def __str__(self) -> str:
        return (f"evaluations: {self.evaluations}"
                f" optimum_found: {str(self.optimum_found).lower()}"
                f" current_best: {self.current_best}")


def dummy(n_variables: int, select_rate: float, seed: int) -> list[int]:
    """Select ``floor(n_variables * select_rate)`` distinct indices, in ascending order."""
    select_num = math.floor(n_variables * select_rate)
    random_numbers = uniform(select_num, seed)
    position = list(range(n_variables))
    for i, number in enumerate(random_numbers):
        random_index = math.floor(number * 1e4 / 1e4 * n_variables)
        position[i], position[random_index] = position[random_index], position[i]
    return sorted(position[:select_num])


def neutrality(x: Sequence[int], mu: int) -> list[int]:
    """Reduce each block of ``mu`` bits to its majority value."""
    result = []
    cum_sum = 0
    for i, value in enumerate(x):
        cum_sum += value
        if (i + 1) % mu == 0 and i != 0:
            result.append(1 if cum_sum >= mu / 2.0 else 0)
            cum_sum = 0
    return result


def _c_mod(a: int, b: int) -> int:
    return int(math.fmod(a, b))


def _epistasis_block(block: Sequence[int]) -> list[int]:
    v = len(block)
    out = []
    for i in range(v):
        excluded = _c_mod(v - i - 2, 4)
        result = -1
        for j, value in enumerate(block):
            if v - j - 1 != excluded:
                result = value if result == -1 else int(result != value)
        out.append(result)
    return out


def epistasis(variables: Sequence[int], v: int) -> list[int]:
    """Apply the epistasis transformation on consecutive blocks of size ``v``."""
    if v < 1:
        raise ValueError(f"block size must be positive, got {v}")
    result = []
    for h in range(0, len(variables), v):
        result.extend(_epistasis_block(variables[h:h + v]))
    return result


def ruggedness1(y: float, number_of_variables: int) -> float:
    """First ruggedness transformation of an objective value."""
    s = float(number_of_variables)
    if y == s:
        return math.ceil(y / 2.0) + 1.0
    if y < s and number_of_variables % 2 == 0:
        return math.floor(y / 2.0) + 1.0
    if y < s:
        return math.ceil(y / 2.0) + 1.0
    return y


def ruggedness2(y: float, number_of_variables: int) -> float:
    """Second ruggedness transformation of an objective value."""
    tempy = int(y + 0.5)
    if tempy >= number_of_variables:
        return y
    if (tempy % 2 == 0) == (number_of_variables % 2 == 0):
        return y + 1.0
    return y - 1.0 if y - 1.0 > 0 else 0.0


def ruggedness3(number_of_variables: int) -> list[float]:
    """Lookup table mapping raw fitness values to the third ruggedness variant."""
    n = number_of_variables
    table = [0.0] * (n + 1)
    for j in range(1, n // 5 + 1):
        for k in range(5):
            table[n - 5 * j + k] = float(n - 5 * j + (4 - k))
    remainder = n - n // 5 * 5
    for k in range(remainder):
        table[k] = float(remainder - 1 - k)
    table[n] = float(n)
    return table


def layer_neutrality_compute(x: Sequence[int], mu: int) -> list[int]:
    """W-model neutrality layer: majority vote over each full block of ``mu`` bits."""
    if mu < 1:
        raise ValueError(f"block size must be positive, got {mu}")
    threshold = (mu >> 1) + (mu & 1)
    full = len(x) // mu * mu
    return [
        1 if sum(1 for bit in x[start:start + mu] if bit == 1) >= threshold else 0
        for start in range(0, full, mu)
    ]


def _base_epistasis(x: Sequence[int], start: int, nu: int, out: list[int]) -> None:
    end = start + nu - 1
    flip = x[start]
    skip = start
    for i in range(end, start - 1, -1):
        result = flip
        for j in range(end, start, -1):
            if j != skip:
                result ^= x[j]
        out[i] = result
        skip -= 1
        if skip < start:
            skip = end


def epistasis_compute(x: Sequence[int], nu: int) -> list[int]:
    """W-model epistasis on blocks of ``nu`` bits; a shorter last block is handled alone."""
    if nu < 1:
        raise ValueError(f"block size must be positive, got {nu}")
    length = len(x)
    out = [0] * length
    i = 0
    while i <= length - nu:
        _base_epistasis(x, i, nu, out)
        i += nu
    if i < length:
        _base_epistasis(x, i, length - i, out)
    return out


def layer_epistasis_compute(x: Sequence[int], block_size: int) -> list[int]:
    """W-model epistasis layer."""
    return epistasis_compute(x, block_size)


def max_gamma(q: int) -> int:
    """Largest ruggedness parameter for objective range ``q``."""
    return (q * (q - 1)) >> 1


def ruggedness_raw(gamma: int, q: int) -> list[int]:
    """W-model ruggedness permutation of the objective values 0..q."""
    r = [0] * (q + 1)
    maximum = max_gamma(q)
    if gamma <= 0:
        start = 0
    else:
        start = q - 1 - int(0.5 + math.sqrt(0.25 + ((maximum - gamma) << 1)))
    k = 0
    j = 1
    while j <= start:
        if j & 1:
            r[j] = q - k
        else:
            k += 1
            r[j] = k
        j += 1
    while j <= q:
        k += 1
        r[j] = q - k if start & 1 else k
        j += 1
    upper = gamma - maximum + (((q - start - 1) * (q - start)) >> 1)
    j -= 1
    for _ in range(upper):
        j -= 1
        if j > 0:
            r[j], r[q] = r[q], r[j]
    return [q - r[q - i] for i in range(q + 1)]


def ruggedness_translate(gamma: int, q: int) -> int:
    """Map a ruggedness level to the W-model's ordered ruggedness parameter."""
    if gamma <= 0:
        return 0
    g = gamma
    maximum = max_gamma(q)
    last_upper = (q >> 1) * ((q + 1) >> 1)
    if g <= last_upper:
        j = abs(int((q + 2) * 0.5 - math.sqrt(q * q * 0.25 + 1 - g)))
        k = g - (q + 2) * j + j * j + q
        return k + 1 + (((q + 2) * j - j * j - q - 1) << 1) - (j - 1)
    j = abs(int((q % 2 + 1) * 0.5 + math.sqrt((1 - q % 2) * 0.25 + g - 1 - last_upper)))
    k = g - ((j - q % 2) * (j - 1) + 1 + last_upper)
    return maximum - k - (2 * j * j - j) - q % 2 * (-2 * j + 1)