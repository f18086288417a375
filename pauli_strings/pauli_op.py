# -*- coding: utf-8 -*-

# pauli_strings/pauli_op.py
from __future__ import annotations
from typing import Any, Iterable, Iterator, Optional, Sequence, Tuple, Union

import numpy as np
from qiskit.quantum_info import SparsePauliOp

from .errors import LengthMismatchError
from .pauli_term import PauliTerm
from .phase import convert_coeff, is_numeric_type, promote_type
from .utils import pauli_terms_to_matrix


def _promote_coeffs(items):
    """Bring numeric coefficients of all terms to one common type."""
    coeff_types = [type(t.coeff) for t in items]
    if len(set(coeff_types)) == 1 or not all(map(is_numeric_type, coeff_types)):
        return items
    T = promote_type(*coeff_types)
    return [t if type(t.coeff) is T
            else PauliTerm(t.pstring, convert_coeff(t.coeff, T), t.n)
            for t in items]


class PauliOp:
    """
    A sum of Pauli terms over the same number of qubits.

    Terms are kept in the order they were given. Nothing is ever merged:
    two terms with the same string stay two terms.

    Parameters
    ----------
    terms : PauliTerm | str | Iterable[PauliTerm | str]
        A single term or string, or a sequence of them.
    coeffs : Any | Sequence[Any], optional
        Coefficients matching ``terms`` element by element. For a single
        string, a single coefficient. Omitted coefficients default to
        ``Phase(1)``.

    Raises
    ------
    LengthMismatchError
        If the terms act on different numbers of qubits, or ``coeffs`` and
        ``terms`` have different lengths.
    ValueError
        If no terms are given.

    Notes
    -----
    Numeric coefficients of different types are promoted to one common type
    (see :func:`promote_type`), so ``PauliOp(["X", "Y"], [1, 2.0])`` holds two
    ``float`` coefficients. Non-numeric coefficients are kept as given.

    Examples
    --------
    >>> PauliOp(["XX", "ZZ"], [0.5, -0.5])
    PauliOp([0.5*XX, -0.5*ZZ])
    """

    __slots__ = ("_terms", "_n")

    def __init__(self,
                 terms: Union[PauliTerm, str, Iterable[Union[PauliTerm, str]]],
                 coeffs: Optional[Union[Any, Sequence[Any]]] = None):
        if isinstance(terms, PauliTerm):
            items = [terms]
        elif isinstance(terms, str):
            items = [PauliTerm(terms) if coeffs is None else PauliTerm(terms, coeffs)]
        else:
            pstrings = list(terms)
            if coeffs is None:
                items = [p if isinstance(p, PauliTerm) else PauliTerm(p)
                         for p in pstrings]
            else:
                coeffs = list(coeffs)
                if len(coeffs) != len(pstrings):
                    raise LengthMismatchError(
                        f"{len(pstrings)} Pauli strings but {len(coeffs)} coefficients")
                items = [PauliTerm(p, c) for p, c in zip(pstrings, coeffs)]

        if not items:
            raise ValueError("PauliOp needs at least one term")
        n = items[0].n
        for t in items:
            if t.n != n:
                raise LengthMismatchError(
                    f"All terms must act on {n} qubits, got a {t.n}-qubit term")
        self._terms: Tuple[PauliTerm, ...] = tuple(_promote_coeffs(items))
        self._n = n

    @property
    def terms(self) -> Tuple[PauliTerm, ...]:
        return self._terms

    @property
    def n(self) -> int:
        """Number of qubits."""
        return self._n

    @property
    def coeff_type(self) -> type:
        """Type shared by the numeric coefficients of all terms."""
        return type(self._terms[0].coeff)

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[PauliTerm]:
        return iter(self._terms)

    def __getitem__(self, ind):
        return self._terms[ind]

    def copy(self) -> "PauliOp":
        """New operator with its own term sequence; the immutable terms are shared."""
        return PauliOp(list(self._terms))

    def __eq__(self, other) -> bool:
        if not isinstance(other, PauliOp):
            return NotImplemented
        if self._n != other._n or len(self._terms) != len(other._terms):
            return False
        return all(a == b for a, b in zip(self._terms, other._terms))

    def __hash__(self) -> int:
        return hash((self._n, self._terms))

    def __mul__(self, other):
        if not isinstance(other, PauliOp):
            return NotImplemented
        if self._n != other._n:
            raise LengthMismatchError(
                f"Cannot multiply {self._n}-qubit and {other._n}-qubit operators")
        # TODO: combine terms with equal strings
        return PauliOp([a * b for a in self._terms for b in other._terms])

    def to_matrix(self) -> np.ndarray:
        """Dense matrix of the sum of terms."""
        return pauli_terms_to_matrix(self._terms, self._n)

    def to_sparse_pauli_op(self) -> SparsePauliOp:
        """Convert to a qiskit ``SparsePauliOp`` without simplifying."""
        return SparsePauliOp.from_list(
            [(t.pstring, complex(t.coeff)) for t in self._terms])

    def __repr__(self) -> str:
        return f"PauliOp([{', '.join(repr(t) for t in self._terms)}])"
