"""Pseudo-Boolean optimisation problems.

Each problem is called with a bit vector of length ``n_variables`` and
returns its objective value. The problems are maximised.
"""

from __future__ import annotations

import math
from typing import Sequence

from .problem_utils import (
    MetaData,
    OptimizationType,
    Solution,
    State,
    dummy,
    epistasis,
    ruggedness2,
    ruggedness3,
)
from .rng import DEFAULT_DIMENSION, DEFAULT_INSTANCE

__all__ = [
    "OneMax",
    "OneMaxDummy1",
    "OneMaxEpistasis",
    "OneMaxRuggedness2",
    "LeadingOnesEpistasis",
    "LeadingOnesRuggedness3",
    "LABS",
    "IsingRing",
]


def _leading_ones(bits: Sequence[int]) -> int:
    count = 0
    for value in bits:
        if value != 1:
            break
        count += 1
    return count


class _PBOProblem:
    """Shared bookkeeping of the pseudo-Boolean problems.

    Subclasses provide ``_evaluate`` computing the raw objective value.
    """

    problem_id = 0
    name = ""

    def __init__(self, instance: int = DEFAULT_INSTANCE,
                 n_variables: int = DEFAULT_DIMENSION) -> None:
        if n_variables < 1:
            raise ValueError(f"n_variables must be positive, got {n_variables}")
        self.meta_data = MetaData(
            self.problem_id, instance, self.name, n_variables, OptimizationType.MAXIMIZATION
        )
        self.objective: Solution = Solution([1] * n_variables, math.nan)
        self.state: State = State(Solution([], self.meta_data.initial_objective_value))

    @property
    def n_variables(self) -> int:
        return self.meta_data.n_variables

    def _evaluate_and_record(self, x: Sequence[int]) -> float:
        bits = [int(v) for v in x]
        if len(bits) != self.n_variables:
            raise ValueError(
                f"expected {self.n_variables} variables, got {len(bits)}"
            )
        y = float(self._evaluate(bits))  # type: ignore[attr-defined]
        self.state.current_internal = Solution(list(bits), y)
        self.state.current = Solution(list(bits), y)
        self.state.update(self.meta_data, self.objective)
        return y

    def reset(self) -> None:
        """Forget all evaluations."""
        self.state.reset()

    def __str__(self) -> str:
        return str(self.meta_data)


class OneMax(_PBOProblem):
    """Number of ones in the bit string."""

    problem_id = 1
    name = "OneMax"

    def __init__(self, instance: int = DEFAULT_INSTANCE,
                 n_variables: int = DEFAULT_DIMENSION) -> None:
        super().__init__(instance, n_variables)
        self.objective.x = [1] * n_variables
        self.objective.y = self._evaluate(self.objective.x)

    def _evaluate(self, x: list[int]) -> float:
        return float(sum(x))

    def __call__(self, x: Sequence[int]) -> float:
        """Evaluate ``x`` and record it in the problem state."""
        return self._evaluate_and_record(x)


class OneMaxDummy1(_PBOProblem):
    """OneMax counted over a fixed random half of the variables."""

    problem_id = 4
    name = "OneMaxDummy1"

    def __init__(self, instance: int = DEFAULT_INSTANCE,
                 n_variables: int = DEFAULT_DIMENSION) -> None:
        super().__init__(instance, n_variables)
        self.info = dummy(n_variables, 0.5, 10000)
        self.objective.x = [1] * n_variables
        self.objective.y = self._evaluate(self.objective.x)

    def _evaluate(self, x: list[int]) -> float:
        return float(sum(x[i] for i in self.info))

    def __call__(self, x: Sequence[int]) -> float:
        """Evaluate ``x`` and record it in the problem state."""
        return self._evaluate_and_record(x)


class OneMaxEpistasis(_PBOProblem):
    """OneMax after the epistasis transformation with blocks of four."""

    problem_id = 7
    name = "OneMaxEpistasis"

    def __init__(self, instance: int = DEFAULT_INSTANCE,
                 n_variables: int = DEFAULT_DIMENSION) -> None:
        super().__init__(instance, n_variables)
        self.objective.y = self._evaluate(self.objective.x)

    def _evaluate(self, x: list[int]) -> float:
        return float(sum(epistasis(x, 4)))

    def __call__(self, x: Sequence[int]) -> float:
        """Evaluate ``x`` and record it in the problem state."""
        return self._evaluate_and_record(x)


class OneMaxRuggedness2(_PBOProblem):
    """OneMax with the second ruggedness transformation."""

    problem_id = 9
    name = "OneMaxRuggedness2"

    def __init__(self, instance: int = DEFAULT_INSTANCE,
                 n_variables: int = DEFAULT_DIMENSION) -> None:
        super().__init__(instance, n_variables)
        self.objective.x = [1] * n_variables
        self.objective.y = self._evaluate(self.objective.x)

    def _evaluate(self, x: list[int]) -> float:
        return ruggedness2(float(sum(x)), self.n_variables)

    def __call__(self, x: Sequence[int]) -> float:
        """Evaluate ``x`` and record it in the problem state."""
        return self._evaluate_and_record(x)


class LeadingOnesEpistasis(_PBOProblem):
    """LeadingOnes after the epistasis transformation with blocks of four."""

    problem_id = 14
    name = "LeadingOnesEpistasis"

    def __init__(self, instance: int = DEFAULT_INSTANCE,
                 n_variables: int = DEFAULT_DIMENSION) -> None:
        super().__init__(instance, n_variables)
        self.objective.y = float(n_variables)

    def _evaluate(self, x: list[int]) -> float:
        return float(_leading_ones(epistasis(x, 4)))

    def __call__(self, x: Sequence[int]) -> float:
        """Evaluate ``x`` and record it in the problem state."""
        return self._evaluate_and_record(x)


class LeadingOnesRuggedness3(_PBOProblem):
    """LeadingOnes with the third ruggedness transformation."""

    problem_id = 17
    name = "LeadingOnesRuggedness3"

    def __init__(self, instance: int = DEFAULT_INSTANCE,
                 n_variables: int = DEFAULT_DIMENSION) -> None:
        super().__init__(instance, n_variables)
        self.info = ruggedness3(n_variables)
        self.objective.x = [1] * n_variables
        self.objective.y = self._evaluate(self.objective.x)

    def _evaluate(self, x: list[int]) -> float:
        return self.info[_leading_ones(x)]

    def __call__(self, x: Sequence[int]) -> float:
        """Evaluate ``x`` and record it in the problem state."""
        return self._evaluate_and_record(x)


class LABS(_PBOProblem):
    """Low autocorrelation binary sequences: merit factor of the sequence."""

    problem_id = 18
    name = "LABS"

    @staticmethod
    def _correlation(x: list[int], k: int) -> int:
        return sum((a * 2 - 1) * (b * 2 - 1) for a, b in zip(x, x[k:]))

    def _evaluate(self, x: list[int]) -> float:
        n = self.n_variables
        energy = float(sum(self._correlation(x, k) ** 2 for k in range(1, n)))
        if energy == 0.0:
            return math.inf
        return n * n / 2.0 / energy

    def __call__(self, x: Sequence[int]) -> float:
        """Evaluate ``x`` and record it in the problem state."""
        return self._evaluate_and_record(x)


class IsingRing(_PBOProblem):
    """One-dimensional Ising model on a ring."""

    problem_id = 19
    name = "IsingRing"

    def __init__(self, instance: int = DEFAULT_INSTANCE,
                 n_variables: int = DEFAULT_DIMENSION) -> None:
        super().__init__(instance, n_variables)
        self.objective.x = [1] * n_variables
        self.objective.y = self._evaluate(self.objective.x)

    def _evaluate(self, x: list[int]) -> float:
        return float(sum(
            x[i] * x[i - 1] + (1 - x[i]) * (1 - x[i - 1]) for i in range(len(x))
        ))

    def __call__(self, x: Sequence[int]) -> float:
        """Evaluate ``x`` and record it in the problem state."""
        return self._evaluate_and_record(x)