"""Empirical cumulative distribution (attainment) logging.

The ECDF logger discretises the error/evaluations plane into buckets and
records, for every run, which (error target, evaluation target) pairs
were attained.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .problem_utils import MetaData, OptimizationType, Solution

__all__ = [
    "Range",
    "LinearRange",
    "LogRange",
    "LogInfo",
    "ECDF",
    "ECDFSum",
    "AttainmentMatrix",
    "AttainmentSuite",
    "format_attainment",
]

_log = logging.getLogger(__name__)

AttainmentMatrix = List[List[bool]]
# problem id -> dimension -> instance -> run -> matrix
AttainmentSuite = Dict[int, Dict[int, Dict[int, Dict[int, AttainmentMatrix]]]]


@dataclass
class Range(ABC):
    """A closed interval [min, max] split into ``size`` buckets."""

    min: float
    max: float
    size: int

    @property
    def length(self) -> float:
        return self.max - self.min

    @property
    def step(self) -> float:
        return self.length / self.size

    @abstractmethod
    def index(self, x: float) -> int:
        """Return the bucket index of ``x``."""


class LinearRange(Range):
    """Buckets of equal width."""

    def index(self, x: float) -> int:
        return math.floor((x - self.min) / self.length * self.size)


class LogRange(Range):
    """Buckets of equal width on a base-10 logarithmic scale."""

    def index(self, x: float) -> int:
        return math.floor(
            math.log10(1 + (x - self.min)) / math.log10(1 + self.length) * self.size
        )


@dataclass
class LogInfo:
    """What a problem reports to a logger after one evaluation."""

    evaluations: int
    transformed_y_best: float
    objective: Solution = field(default_factory=Solution)


@dataclass
class _Current:
    pb: int = 0
    dim: int = 0
    ins: int = 0
    run: int = 0
    has_opt: bool = False
    is_tracked: bool = False
    opt: float = math.nan
    max_min: OptimizationType = OptimizationType.MINIMIZATION


class ECDF:
    """Stores discretised error/evaluations attainment matrices per run.

    A matrix is kept for each (problem, dimension, instance, run). A true
    cell means that the error target of its row was attained within the
    evaluation target of its column. The default axes are logarithmic.
    """

    def __init__(self, error_min: float, error_max: float, error_buckets: int,
                 evals_min: int, evals_max: int, evals_buckets: int) -> None:
        self._setup(LogRange(error_min, error_max, error_buckets),
                    LogRange(evals_min, evals_max, evals_buckets))

    @classmethod
    def from_ranges(cls, error_range: Range, eval_range: Range) -> "ECDF":
        """Build a logger on explicitly given axes, e.g. linear or semi-log."""
        obj = cls.__new__(cls)
        obj._setup(error_range, eval_range)
        return obj

    def _setup(self, error_range: Range, eval_range: Range) -> None:
        self._range_error = error_range
        self._range_evals = eval_range
        self._current = _Current()
        self._suite: AttainmentSuite = {}

    @property
    def error_range(self) -> Range:
        return self._range_error

    @property
    def eval_range(self) -> Range:
        return self._range_evals

    @property
    def data(self) -> AttainmentSuite:
        """All attainment matrices computed so far."""
        return self._suite

    def _empty(self) -> AttainmentMatrix:
        return [[False] * self._range_evals.size for _ in range(self._range_error.size)]

    def track_suite(self, name: str) -> None:
        """Start a new suite, discarding all collected data."""
        self._suite.clear()

    def track_problem(self, problem: MetaData) -> None:
        """Start a new run on ``problem``."""
        cur = self._current
        cur.pb = problem.problem_id
        cur.dim = problem.n_variables
        cur.ins = problem.instance
        cur.max_min = problem.optimization_type
        cur.is_tracked = False
        runs = (self._suite.setdefault(cur.pb, {})
                .setdefault(cur.dim, {})
                .setdefault(cur.ins, {}))
        cur.run = 1 + len(runs)

    def log(self, log_info: LogInfo) -> None:
        """Record the last evaluation of the tracked problem."""
        cur = self._current
        if not cur.is_tracked:
            cur.is_tracked = True
            cur.has_opt = not math.isnan(log_info.objective.y)
            if cur.has_opt:
                _log.info("Problem has known optimal, will compute the ECDF of the error.")
                cur.opt = log_info.objective.y
            else:
                _log.info("Problem has no known optimal, will compute the absolute ECDF.")
            self._init_ecdf()

        if cur.has_opt:
            err = abs(cur.opt - log_info.transformed_y_best)
        else:
            err = log_info.transformed_y_best

        er, ev = self._range_error, self._range_evals
        evaluations = log_info.evaluations
        if (evaluations < ev.min or ev.max < evaluations
                or err < er.min or er.max < err):
            _log.warning(
                "target out of domain. value:%s [%s,%s], evals:%s [%s,%s]"
                " This measure is discarded!",
                err, er.min, er.max, evaluations, ev.min, ev.max,
            )
            return

        self._fill_up(er.index(err), ev.index(float(evaluations)))

    def flush(self) -> AttainmentSuite:
        """Nothing is buffered, so this returns the data collected so far."""
        return self._suite

    def at(self, problem_id: int, instance_id: int, dim_id: int, run: int) -> AttainmentMatrix:
        """Return one attainment matrix."""
        try:
            return self._suite[problem_id][dim_id][instance_id][run]
        except KeyError:
            raise KeyError(
                f"no attainment matrix for problem {problem_id}, instance {instance_id},"
                f" dimension {dim_id}, run {run}"
            ) from None

    def size(self) -> Tuple[int, int, int, int]:
        """Numbers of problems, and of dimensions, instances and runs of the first entries."""
        problems = len(self._suite)
        if not problems:
            return (0, 0, 0, 0)
        dims = next(iter(self._suite.values()))
        if not dims:
            return (problems, 0, 0, 0)
        instances = next(iter(dims.values()))
        if not instances:
            return (problems, len(dims), 0, 0)
        runs = next(iter(instances.values()))
        return (problems, len(dims), len(instances), len(runs))

    def _init_ecdf(self) -> None:
        cur = self._current
        runs = (self._suite.setdefault(cur.pb, {})
                .setdefault(cur.dim, {})
                .setdefault(cur.ins, {}))
        runs[cur.run] = self._empty()

    def _current_ecdf(self) -> AttainmentMatrix:
        cur = self._current
        return self._suite[cur.pb][cur.dim][cur.ins][cur.run]

    def _fill_up(self, i_error: int, j_evals: int) -> None:
        mat = self._current_ecdf()
        ibound = self._range_error.size
        jbound = self._range_evals.size
        cur = self._current

        if cur.has_opt or cur.max_min is OptimizationType.MINIMIZATION:
            for i in range(i_error, ibound):
                column = j_evals if jbound == 0 else min(j_evals, jbound - 1)
                if mat[i][column]:
                    break
                for j in range(j_evals, jbound):
                    if mat[i][j]:
                        jbound = j
                        break
                    mat[i][j] = True
        else:
            for i in range(i_error, 0, -1):
                row = mat[i - 1]
                if j_evals < len(row) and row[j_evals]:
                    continue
                for j in range(j_evals, jbound):
                    if row[j]:
                        jbound = j
                        break
                    row[j] = True


class ECDFSum:
    """Counts the attained cells over all matrices of an attainment suite."""

    def __call__(self, attainment: AttainmentSuite) -> int:
        return sum(
            sum(row)
            for dims in attainment.values()
            for instances in dims.values()
            for runs in instances.values()
            for matrix in runs.values()
            for row in matrix
        )


def format_attainment(matrix: AttainmentMatrix) -> str:
    """Render a matrix as rows of space-separated 0/1 values."""
    return "".join(
        "".join(f"{int(cell)} " for cell in row) + "\n" for row in matrix
    )