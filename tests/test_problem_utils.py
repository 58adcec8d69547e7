import math

import pytest

from iohbench.problem_utils import (
    Constraint,
    MetaData,
    OptimizationType,
    Solution,
    State,
    dummy,
    epistasis,
    epistasis_compute,
    layer_epistasis_compute,
    layer_neutrality_compute,
    max_gamma,
    neutrality,
    ruggedness1,
    ruggedness2,
    ruggedness3,
    ruggedness_raw,
    ruggedness_translate,
)


def test_solution_defaults_to_nan_and_as_double_converts():
    assert math.isnan(Solution().y)
    s = Solution([1, 0, 1], 2.0)
    d = s.as_double()
    assert d.x == [1.0, 0.0, 1.0]
    assert all(isinstance(v, float) for v in d.x)
    assert d.y == 2.0


def test_constraint_check_size_broadcasts_single_bounds():
    c = Constraint([5.0], [-5.0])
    c.check_size(3)
    assert c.ub == [5.0, 5.0, 5.0]
    assert c.lb == [-5.0, -5.0, -5.0]


def test_constraint_check_size_rejects_wrong_dimension():
    c = Constraint([1.0, 2.0], [0.0, 0.0])
    with pytest.raises(ValueError):
        c.check_size(3)


def test_constraint_check_bounds():
    c = Constraint.filled(3, 1.0, -1.0)
    assert c.check([0.0, 0.5, -1.0])
    assert not c.check([0.0, 2.0, 0.0])


def test_metadata_initial_objective_value():
    assert MetaData(1, 1, "OneMax", 4).initial_objective_value == math.inf
    m = MetaData(1, 1, "OneMax", 4, OptimizationType.MAXIMIZATION)
    assert m.initial_objective_value == -math.inf


def test_metadata_str():
    m = MetaData(1, 2, "OneMax", 4, OptimizationType.MAXIMIZATION)
    assert str(m) == "OneMax id: 1 instance: 2 optimization_type: maximization n_variables: 4"
    assert str(MetaData(0, 0, "P", 3)) == "P optimization_type: minimization n_variables: 3"


def test_state_update_and_reset():
    meta = MetaData(1, 1, "P", 2, OptimizationType.MAXIMIZATION)
    state = State(Solution([0, 0], -math.inf))
    state.current = Solution([1, 0], 1.0)
    state.current_internal = Solution([1, 0], 1.0)
    state.update(meta, Solution([1, 1], 2.0))
    assert state.evaluations == 1
    assert state.current_best.y == 1.0
    assert not state.optimum_found

    state.current = Solution([1, 1], 2.0)
    state.update(meta, Solution([1, 1], 2.0))
    assert state.evaluations == 2
    assert state.current_best.x == [1, 1]
    assert state.optimum_found

    state.reset()
    assert state.evaluations == 0
    assert state.current_best.y == -math.inf
    assert not state.optimum_found


def test_state_ignores_worse_solution():
    meta = MetaData(1, 1, "P", 2)
    state = State(Solution([0, 0], 3.0))
    state.current = Solution([1, 1], 5.0)
    state.update(meta, Solution([0, 0], 0.0))
    assert state.current_best.y == 3.0
    assert state.evaluations == 1


@pytest.mark.parametrize("n, rate", [(10, 0.5), (17, 0.9), (100, 0.3)])
def test_dummy_selects_sorted_distinct_indices(n, rate):
    selected = dummy(n, rate, 10000)
    assert len(selected) == math.floor(n * rate)
    assert selected == sorted(set(selected))
    assert all(0 <= i < n for i in selected)
    assert dummy(n, rate, 10000) == selected


def test_neutrality_majority():
    assert neutrality([1] * 9, 3) == [1, 1, 1]
    assert neutrality([0] * 9, 3) == [0, 0, 0]
    assert neutrality([1, 1, 0, 0, 0, 1], 3) == [1, 0]


def test_epistasis_rejects_bad_block():
    with pytest.raises(ValueError):
        epistasis([1, 0], 0)


def test_ruggedness1_monotone_for_even_length():
    n = 10
    values = [ruggedness1(float(y), n) for y in range(n + 1)]
    assert values == sorted(values)
    assert values[-1] == max(values)


def test_ruggedness2_keeps_optimum_and_stays_nonnegative():
    for n in (7, 8):
        assert ruggedness2(float(n), n) == float(n)
        assert all(ruggedness2(float(y), n) >= 0 for y in range(n + 1))


@pytest.mark.parametrize("n", [5, 7, 10, 13])
def test_ruggedness3_is_permutation(n):
    table = ruggedness3(n)
    assert len(table) == n + 1
    assert table[n] == float(n)
    assert sorted(table) == [float(i) for i in range(n + 1)]


def test_layer_neutrality_compute():
    assert layer_neutrality_compute([1] * 10, 3) == [1, 1, 1]
    assert layer_neutrality_compute([1, 0, 0, 1, 1, 0], 3) == [0, 1]


def test_epistasis_compute_properties():
    assert epistasis_compute([0] * 9, 4) == [0] * 9
    x = [1, 0, 1, 1, 0, 0, 1, 0, 1]
    out = epistasis_compute(x, 4)
    assert len(out) == len(x)
    assert set(out) <= {0, 1}
    assert layer_epistasis_compute(x, 4) == out


def test_max_gamma():
    assert max_gamma(5) == 10


@pytest.mark.parametrize("q", [4, 5, 8])
def test_ruggedness_raw_is_permutation(q):
    assert ruggedness_raw(0, q) == list(range(q + 1))
    for gamma in range(max_gamma(q) + 1):
        r = ruggedness_raw(gamma, q)
        assert sorted(r) == list(range(q + 1))
        assert r[q] == q


def test_ruggedness_translate():
    assert ruggedness_translate(0, 6) == 0
    assert ruggedness_translate(-3, 6) == 0
    q = 4
    translated = sorted(ruggedness_translate(g, q) for g in range(1, max_gamma(q) + 1))
    assert translated == list(range(1, max_gamma(q) + 1))