import pytest

from iohbench import rng


def test_lcg_first_step_is_multiplier():
    assert rng.lcg_rand(1) == rng.RND_MULTIPLIER


def test_lcg_known_second_step():
    assert rng.lcg_rand(rng.lcg_rand(1)) == 282475249


@pytest.mark.parametrize("seed", [1, 7, 1000, 123456789, 2147483646])
def test_lcg_stays_in_range(seed):
    value = rng.lcg_rand(seed)
    assert 0 < value < rng.RND_MODULUS


def test_uniform_is_deterministic_and_in_unit_interval():
    first = rng.uniform(50, 1000)
    second = rng.uniform(50, 1000)
    assert first == second
    assert len(first) == 50
    assert all(0.0 < v <= 1.0 for v in first)


def test_uniform_differs_between_seeds():
    assert rng.uniform(10, 1) != rng.uniform(10, 2)


def test_uniform_bounds_scale_values():
    base = rng.uniform(20, 42)
    scaled = rng.uniform(20, 42, 2.0, 5.0)
    assert scaled == pytest.approx([v * 3.0 + 2.0 for v in base])
    assert all(2.0 <= v <= 5.0 for v in scaled)


def test_uniform_prefix_is_stable():
    assert rng.uniform(5, 99) == rng.uniform(10, 99)[:5]


def test_normal_ignores_seed_sign_and_zero():
    assert rng.normal(8, -5) == rng.normal(8, 5)
    assert rng.normal(8, 0) == rng.normal(8, 1)
    assert len(rng.normal(8, 3)) == 8


def test_normal_is_not_constant():
    values = rng.normal(100, 17)
    assert min(values) < 0.0 < max(values)


def test_bbob2009_uniform_seed_handling():
    assert rng.bbob2009_uniform(16, -12) == rng.bbob2009_uniform(16, 12)
    assert rng.bbob2009_uniform(16, 0) == rng.bbob2009_uniform(16, 1)
    values = rng.bbob2009_uniform(200, 3)
    assert all(0.0 < v <= 1.0 for v in values)


def test_bbob2009_uniform_bounds():
    values = rng.bbob2009_uniform(100, 9, -5.0, 5.0)
    assert all(-5.0 <= v <= 5.0 for v in values)


def test_bbob2009_normal_deterministic():
    assert rng.bbob2009_normal(10, 4) == rng.bbob2009_normal(10, 4)
    assert len(rng.bbob2009_normal(10, 4)) == 10


def test_bbob2009_normal_rejects_large_n():
    with pytest.raises(ValueError):
        rng.bbob2009_normal(3000, 1)


def test_bit_extremes():
    assert rng.bit(0.0) == 0
    assert rng.bit(1.0) == 1
    assert rng.bit_string(10, 1.0) == [1] * 10
    assert rng.bit_string(10, 0.0) == [0] * 10


def test_bit_rejects_bad_probability():
    with pytest.raises(ValueError):
        rng.bit(1.5)


def test_integer_ranges():
    assert rng.integer(3, 3) == 3
    values = rng.integers(100, -4, 4)
    assert len(values) == 100
    assert all(-4 <= v <= 4 for v in values)


def test_integer_rejects_empty_range():
    with pytest.raises(ValueError):
        rng.integer(5, 1)