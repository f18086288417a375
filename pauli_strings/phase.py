# -*- coding: utf-8 -*-

# pauli_strings/phase.py
"""
The phase ring {1, i, -1, -i}.

A phase is stored as a number of quarter turns modulo 4. Products of Pauli
strings accumulate raw counts of ``i`` factors and ``-1`` factors and reduce
them once with :func:`phase_from_factors`.
"""

from __future__ import annotations
import numbers
from typing import Any

__all__ = [
    "Phase",
    "phase_from_factors",
    "one",
    "is_numeric_type",
    "promote_type",
    "convert_coeff",
]

# Complex value of each quarter-turn index
_UNITS = (1, 1j, -1, -1j)
_LABELS = ("1", "i", "-1", "-i")
_REPRS = ("1", "1j", "-1", "-1j")


class Phase:
    """
    An element of the cyclic group {1, i, -1, -i}.

    Parameters
    ----------
    value : Phase | complex
        One of ``1``, ``1j``, ``-1``, ``-1j`` or another ``Phase``.

    Notes
    -----
    Multiplying a ``Phase`` by another ``Phase`` gives a ``Phase``. The phases
    ``1`` and ``-1`` act on any coefficient as ``c`` and ``-c``, keeping its
    type exactly. ``i`` and ``-i`` turn a real or complex number into a
    ``complex`` by swapping components. Other coefficient types (symbolic
    expressions, for instance) are multiplied by the plain unit ``1j`` or
    ``-1j``.
    """

    __slots__ = ("_turns",)

    # Make numpy scalars defer to __rmul__ instead of broadcasting
    __array_ufunc__ = None

    def __init__(self, value: Any = 1):
        if isinstance(value, Phase):
            turns = value._turns
        else:
            for turns, unit in enumerate(_UNITS):
                if value == unit:
                    break
            else:
                raise ValueError(f"{value!r} is not one of 1, 1j, -1, -1j")
        object.__setattr__(self, "_turns", turns)

    def __setattr__(self, name, value):
        raise AttributeError("Phase is immutable")

    @classmethod
    def from_turns(cls, turns: int) -> "Phase":
        """Phase ``i**turns``."""
        p = object.__new__(cls)
        object.__setattr__(p, "_turns", turns % 4)
        return p

    @classmethod
    def from_factors(cls, i_count: int, minus_count: int) -> "Phase":
        """Reduce ``i**i_count * (-1)**minus_count`` to a single phase."""
        return cls.from_turns(i_count + 2 * minus_count)

    @property
    def turns(self) -> int:
        """Quarter-turn index in ``0..3``."""
        return self._turns

    @property
    def value(self) -> complex:
        return complex(_UNITS[self._turns])

    def conjugate(self) -> "Phase":
        return Phase.from_turns(-self._turns)

    inverse = conjugate

    # -------- products --------

    def _act(self, c):
        """Scalar action of this phase on a coefficient ``c``."""
        if isinstance(c, Phase):
            return Phase.from_turns(self._turns + c._turns)
        t = self._turns
        if t == 0:
            return c
        if t == 2:
            return -c
        sign = 1 if t == 1 else -1
        if isinstance(c, numbers.Real):
            return complex(0, sign * c)
        if isinstance(c, numbers.Complex):
            return complex(-sign * c.imag, sign * c.real)
        return _UNITS[t] * c

    def __mul__(self, other):
        return self._act(other)

    # The ring is commutative and acts centrally on coefficients
    __rmul__ = __mul__

    def __neg__(self) -> "Phase":
        return Phase.from_turns(self._turns + 2)

    def __pos__(self) -> "Phase":
        return self

    def __pow__(self, k: int) -> "Phase":
        if not isinstance(k, numbers.Integral):
            return NotImplemented
        return Phase.from_turns(self._turns * int(k))

    # -------- comparisons and conversions --------

    def __eq__(self, other) -> bool:
        if isinstance(other, Phase):
            return self._turns == other._turns
        if isinstance(other, numbers.Number):
            return bool(complex(_UNITS[self._turns]) == other)
        return NotImplemented

    def __hash__(self) -> int:
        # Equal numbers must hash alike: hash(Phase(1)) == hash(1)
        return hash(_UNITS[self._turns])

    def __complex__(self) -> complex:
        return self.value

    def __str__(self) -> str:
        return _LABELS[self._turns]

    def __repr__(self) -> str:
        return f"Phase({_REPRS[self._turns]})"

    def __reduce__(self):
        return (Phase.from_turns, (self._turns,))


def phase_from_factors(i_count: int, minus_count: int) -> Phase:
    """
    Reduce accumulated phase factors to one element of {1, i, -1, -i}.

    Parameters
    ----------
    i_count : int
        Number of ``i`` factors.
    minus_count : int
        Number of ``-1`` factors; each counts as two quarter turns.

    Returns
    -------
    Phase
        ``i**((i_count + 2*minus_count) % 4)``

    Examples
    --------
    >>> phase_from_factors(2, 1)
    Phase(1)
    >>> phase_from_factors(1, 1)
    Phase(-1j)
    """
    return Phase.from_factors(i_count, minus_count)


def one(coeff_type: type = Phase):
    """Multiplicative identity of ``coeff_type``."""
    if coeff_type is Phase:
        return Phase(1)
    return coeff_type(1)


# Numeric tower used to pick a common coefficient type
_TOWER = (
    (numbers.Integral, 1),
    (numbers.Rational, 2),
    (numbers.Real, 3),
    (numbers.Complex, 4),
)


def _rank(coeff_type: type):
    if issubclass(coeff_type, Phase):
        return 0
    for abc, rank in _TOWER:
        if issubclass(coeff_type, abc):
            return rank
    return None


def is_numeric_type(coeff_type: type) -> bool:
    """True for ``Phase`` and the Python/numpy number types."""
    return _rank(coeff_type) is not None


def promote_type(*coeff_types: type) -> type:
    """
    Smallest coefficient type able to hold values of all ``coeff_types``.

    Among numbers the wider type of the numeric tower wins
    (``int`` < ``Fraction`` < ``float`` < ``complex``). ``Phase`` together
    with any number promotes to ``complex``.

    Raises
    ------
    TypeError
        If one of the types is not numeric.

    Examples
    --------
    >>> promote_type(int, float)
    <class 'float'>
    >>> promote_type(Phase, int)
    <class 'complex'>
    """
    result = coeff_types[0]
    for t in coeff_types[1:]:
        if t is result:
            continue
        r_result, r_t = _rank(result), _rank(t)
        if r_result is None or r_t is None:
            raise TypeError(
                f"No common coefficient type for {result.__name__} and {t.__name__}")
        if r_result == 0 or r_t == 0:
            result = complex
        elif r_t > r_result:
            result = t
    return result


def convert_coeff(c, coeff_type: type):
    """Convert ``c`` to ``coeff_type``; ``c`` must fit exactly."""
    if type(c) is coeff_type:
        return c
    if coeff_type is Phase:
        return Phase(c)
    return coeff_type(c)
