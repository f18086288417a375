# -*- coding: utf-8 -*-

# pauli_strings/random_paulis.py
"""
Random Pauli strings, terms and operators.

Every generator takes an optional ``rng``: a ``numpy.random.Generator``, a
seed, or ``None`` for the process-wide default generator. Symbols are drawn
independently and uniformly from ``"IXYZ"``.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Optional, Union

import numpy as np

from .algebra import PAULI_SYMBOLS
from .errors import UsageError
from .pauli_op import PauliOp
from .pauli_term import PauliTerm
from .phase import Phase, one

__all__ = [
    "default_rng",
    "set_default_rng",
    "register_coeff_sampler",
    "rand_coeff",
    "rand_pauli_string",
    "rand_pauli_term",
    "rand_pauli_op",
]

RngLike = Union[np.random.Generator, int, None]

_DEFAULT_RNG: Optional[np.random.Generator] = None

# coefficient type -> sampler(rng)
_COEFF_SAMPLERS: Dict[type, Callable[[np.random.Generator], Any]] = {}


def default_rng() -> np.random.Generator:
    """Process-wide generator used when no ``rng`` is passed."""
    global _DEFAULT_RNG
    if _DEFAULT_RNG is None:
        _DEFAULT_RNG = np.random.default_rng()
    return _DEFAULT_RNG


def set_default_rng(rng: RngLike) -> np.random.Generator:
    """Replace the process-wide generator; returns the new one."""
    global _DEFAULT_RNG
    _DEFAULT_RNG = np.random.default_rng(rng)
    return _DEFAULT_RNG


def _resolve_rng(rng: RngLike) -> np.random.Generator:
    if rng is None:
        return default_rng()
    return np.random.default_rng(rng)


def register_coeff_sampler(coeff_type: type):
    """
    Decorator registering how to draw a random coefficient of ``coeff_type``.

    Example
    -------
    @register_coeff_sampler(float)
    def _rand_float(rng: np.random.Generator) -> float:
        return float(rng.random())
    """
    def decorator(func):
        _COEFF_SAMPLERS[coeff_type] = func
        return func
    return decorator


@register_coeff_sampler(Phase)
def _rand_phase(rng: np.random.Generator) -> Phase:
    return Phase.from_turns(int(rng.integers(4)))


@register_coeff_sampler(float)
def _rand_float(rng: np.random.Generator) -> float:
    return float(rng.random())


@register_coeff_sampler(complex)
def _rand_complex(rng: np.random.Generator) -> complex:
    re, im = rng.random(2)
    return complex(re, im)


def rand_coeff(coeff_type: type = Phase, rng: RngLike = None):
    """
    Draw a random coefficient of ``coeff_type``.

    Raises
    ------
    UsageError
        If no sampler is registered for ``coeff_type``.
    """
    try:
        sampler = _COEFF_SAMPLERS[coeff_type]
    except KeyError:
        raise UsageError(
            f"No random sampler for coefficients of type {coeff_type.__name__}") from None
    return sampler(_resolve_rng(rng))


def _rand_symbols(rng: np.random.Generator, n: int) -> str:
    return "".join(PAULI_SYMBOLS[k] for k in rng.integers(0, 4, size=n))


def rand_pauli_string(n: int,
                      kind: type = str,
                      *,
                      coeff: bool = False,
                      coeff_type: type = Phase,
                      rng: RngLike = None):
    """
    Generate a uniformly random Pauli string of length ``n``.

    Parameters
    ----------
    n : int
        Number of qubits
    kind : type
        ``str`` for a bare string or ``PauliTerm`` for a term
    coeff : bool
        Draw a random coefficient instead of the identity. Only valid
        for ``kind=PauliTerm``.
    coeff_type : type
        Coefficient type of a generated term
    rng : Generator | int | None
        Randomness source; the default generator when ``None``

    Returns
    -------
    str | PauliTerm

    Raises
    ------
    UsageError
        ``coeff=True`` with ``kind=str``, or an unsupported ``kind``.

    Examples
    --------
    >>> s = rand_pauli_string(3, rng=7)
    >>> len(s)
    3
    >>> all(c in "IXYZ" for c in s)
    True
    """
    if kind is str:
        if coeff:
            raise UsageError("Pauli string of type `str` has no coefficient")
        return _rand_symbols(_resolve_rng(rng), n)
    if kind is PauliTerm:
        return rand_pauli_term(n, coeff_type, coeff=coeff, rng=rng)
    raise UsageError(f"Cannot generate a random Pauli string of kind {kind!r}")


def rand_pauli_term(n: int,
                    coeff_type: type = Phase,
                    *,
                    coeff: bool = False,
                    rng: RngLike = None) -> PauliTerm:
    """Random ``n``-qubit term, with a random coefficient if ``coeff``."""
    rng = _resolve_rng(rng)
    pstring = _rand_symbols(rng, n)
    if not coeff:
        return PauliTerm(pstring, one(coeff_type), n)
    return PauliTerm(pstring, rand_coeff(coeff_type, rng), n)


def rand_pauli_op(n: int,
                  num_terms: int,
                  coeff_type: type = Phase,
                  *,
                  coeff: bool = False,
                  rng: RngLike = None) -> PauliOp:
    """Random operator with ``num_terms`` independent ``n``-qubit terms."""
    rng = _resolve_rng(rng)
    return PauliOp([rand_pauli_term(n, coeff_type, coeff=coeff, rng=rng)
                    for _ in range(num_terms)])
