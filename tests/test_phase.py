# -*- coding: utf-8 -*-

import itertools
from fractions import Fraction

import numpy as np
import pytest

from pauli_strings.phase import (
    Phase,
    convert_coeff,
    one,
    phase_from_factors,
    promote_type,
)


@pytest.mark.parametrize("i_count, minus_count, expected", [
    (0, 0, 1),
    (1, 0, 1j),
    (2, 0, -1),
    (3, 0, -1j),
    (4, 0, 1),
    (0, 1, -1),
    (1, 1, -1j),
    (2, 1, 1),
    (0, 2, 1),
    (5, 3, -1j),
])
def test_phase_from_factors(i_count, minus_count, expected):
    assert phase_from_factors(i_count, minus_count) == Phase(expected)
    assert complex(phase_from_factors(i_count, minus_count)) == expected


@pytest.mark.parametrize("trial", range(20))
def test_reduction_composes(rng, trial):
    i1, m1, i2, m2 = (int(k) for k in rng.integers(0, 50, size=4))
    combined = phase_from_factors(i1, m1) * phase_from_factors(i2, m2)
    assert combined == phase_from_factors(i1 + i2, m1 + m2)
    assert combined == phase_from_factors(i2, m2) * phase_from_factors(i1, m1)


def test_group_table():
    for a, b in itertools.product(range(4), repeat=2):
        p = Phase.from_turns(a) * Phase.from_turns(b)
        assert isinstance(p, Phase)
        assert p.turns == (a + b) % 4
        assert complex(p) == pytest.approx(1j**a * 1j**b)


def test_constructor_rejects_non_units():
    with pytest.raises(ValueError):
        Phase(2)
    with pytest.raises(ValueError):
        Phase(0.5j)


def test_phase_is_immutable():
    p = Phase(1j)
    with pytest.raises(AttributeError):
        p._turns = 0


@pytest.mark.parametrize("value", [1, 1j, -1, -1j])
def test_inverse_and_neg(value):
    p = Phase(value)
    assert p * p.inverse() == Phase(1)
    assert p.conjugate() == Phase(complex(value).conjugate())
    assert -p == Phase(-value)
    assert p ** 4 == Phase(1)
    assert p ** -1 == p.inverse()


def test_equality_with_numbers():
    assert Phase(1) == 1
    assert Phase(-1j) == -1j
    assert Phase(-1) != 1
    assert Phase(1j) == Phase(Phase(1j))
    assert len({Phase(1), 1, 1 + 0j}) == 1


@pytest.mark.parametrize("value, coeff, expected", [
    (1j, 2, 2j),
    (-1j, 3, -3j),
    (1j, 2.5, 2.5j),
    (1j, 1j, -1 + 0j),
    (-1j, 1 + 2j, 2 - 1j),
])
def test_quarter_turns_promote_to_complex(value, coeff, expected):
    left = Phase(value) * coeff
    right = coeff * Phase(value)
    assert isinstance(left, complex) and isinstance(right, complex)
    assert left == expected
    assert right == expected


BIG = 2**60 + 1

@pytest.mark.parametrize("coeff", [BIG, -BIG, Fraction(BIG, 3), 2.5, 1 + 2j])
def test_sign_phases_keep_coefficient_exact(coeff):
    for out in (Phase(1) * coeff, coeff * Phase(1)):
        assert out == coeff
        assert type(out) is type(coeff)
    for out in (Phase(-1) * coeff, coeff * Phase(-1)):
        assert out == -coeff
        assert type(out) is type(coeff)


def test_numpy_scalars_defer_to_phase():
    out = np.float64(2.0) * Phase(1j)
    assert isinstance(out, complex)
    assert out == 2j
    assert Phase(-1) * np.complex128(1 + 1j) == -1 - 1j


def test_non_numeric_coefficients_use_plain_unit():
    arr = np.array([1.0, 2.0])
    assert np.array_equal(Phase(-1) * arr, -arr)
    assert np.array_equal(Phase(1j) * arr, 1j * arr)


def test_str_and_repr():
    assert [str(Phase.from_turns(k)) for k in range(4)] == ["1", "i", "-1", "-i"]
    assert repr(Phase(-1j)) == "Phase(-1j)"


def test_one():
    assert one() == Phase(1)
    assert isinstance(one(Phase), Phase)
    assert one(float) == 1.0 and isinstance(one(float), float)
    assert one(complex) == 1 + 0j


@pytest.mark.parametrize("types, expected", [
    ((int, int), int),
    ((int, float), float),
    ((Fraction, int), Fraction),
    ((Fraction, float), float),
    ((float, complex), complex),
    ((Phase, Phase), Phase),
    ((Phase, int), complex),
    ((float, Phase, int), complex),
])
def test_promote_type(types, expected):
    assert promote_type(*types) is expected


def test_promote_type_rejects_non_numbers():
    with pytest.raises(TypeError):
        promote_type(int, str)


def test_convert_coeff():
    assert convert_coeff(3, float) == 3.0 and type(convert_coeff(3, float)) is float
    assert convert_coeff(Phase(1j), complex) == 1j
    assert convert_coeff(-1, Phase) == Phase(-1)
    x = Fraction(1, 3)
    assert convert_coeff(x, Fraction) is x
