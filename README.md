# iohbench

Building blocks for benchmarking iterative optimization heuristics on
pseudo-Boolean problems.

## Modules

- `iohbench.rng`: seeded, deterministic generators. `lcg_rand` advances a
  Park-Miller linear congruential generator; `uniform` and `normal` produce
  reproducible sequences from a seed, and `bbob2009_uniform` and
  `bbob2009_normal` follow the BBOB-2009 scheme (`bbob2009_normal` raises
  `ValueError` for 3000 or more numbers). `bit`, `integer`, `integers` and
  `bit_string` draw unseeded random bits and integers.
- `iohbench.files`: `UniqueFolder` creates a directory under a root, trying
  `name`, `name-1`, `name-2`, ... until one is free. `BufferedFileStream` is an
  append-mode text file that buffers writes in memory and writes them out on
  `flush`, on `close` (also when used as a context manager) or once the buffer
  passes 65534 characters. `open_file` opens an existing file for reading and
  raises `FileNotFoundError` if it is missing.
- `iohbench.problem_utils`: the `Solution`, `Constraint`, `MetaData` and `State`
  records and the `OptimizationType` enum, plus the W-model transformations:
  `dummy`, `neutrality`, `epistasis`, `ruggedness1`, `ruggedness2`,
  `ruggedness3`, `layer_neutrality_compute`, `epistasis_compute`,
  `layer_epistasis_compute`, `max_gamma`, `ruggedness_raw` and
  `ruggedness_translate`.
- `iohbench.pbo`: maximised pseudo-Boolean problems `OneMax`, `OneMaxDummy1`,
  `OneMaxEpistasis`, `OneMaxRuggedness2`, `LeadingOnesEpistasis`,
  `LeadingOnesRuggedness3`, `LABS` and `IsingRing`. Each is built as
  `Problem(instance, n_variables)` and called with a bit list of length
  `n_variables`; a call returns the objective value and records it in
  `problem.state` (evaluation count, best solution, whether the optimum was
  found). `reset()` clears that state. A list of the wrong length raises
  `ValueError`.
- `iohbench.ecdf`: the `ECDF` logger keeps one boolean attainment matrix per
  (problem, dimension, instance, run) over discretised error and evaluation
  targets. Its default axes are `LogRange`s; `ECDF.from_ranges` accepts any
  `Range`, such as `LinearRange`. `ECDFSum` counts the attained cells of a
  whole suite and `format_attainment` renders one matrix as text.

## Installation

```
pip install .
```

## Example

```python
from iohbench.ecdf import ECDF, ECDFSum, LogInfo, format_attainment
from iohbench.pbo import OneMax
from iohbench.rng import uniform

problem = OneMax(1, 10)
print(problem([1, 0, 1, 1, 0, 0, 1, 1, 1, 0]))   # 6.0

logger = ECDF(0.0, 10.0, 5, 0, 100, 5)
logger.track_problem(problem.meta_data)
for evaluation, x in enumerate([[0] * 10, [1] * 5 + [0] * 5, [1] * 10], start=1):
    problem(x)
    logger.log(LogInfo(evaluation, problem.state.current_best.y, problem.objective))

print(format_attainment(logger.at(1, 1, 10, 1)))
print(ECDFSum()(logger.data))

print(uniform(3, 1000))
```

Every seeded generator in `iohbench.rng` returns the same sequence for the same
seed, so problem instances derived from them (for example the variable
selection of `OneMaxDummy1`) are reproducible.

## What is not included

The package has no benchmark suites that iterate over problems, instances and
dimensions, no experiment runner, no real-valued (BBOB) problems and no loggers
that write result files; the `ECDF` logger keeps its data in memory only. There
is no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```