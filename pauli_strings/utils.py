# -*- coding: utf-8 -*-

# pauli_strings/utils.py
from __future__ import annotations
import warnings
import numpy as np
from typing import Iterable
from qiskit.quantum_info import Pauli

__all__ = [
    "DENSE_QUBIT_WARNING",
    "pauli_terms_to_matrix",
]

# Qubit count above which building dense matrices emits a RuntimeWarning
DENSE_QUBIT_WARNING = 12


def pauli_terms_to_matrix(terms: Iterable, n: int) -> np.ndarray:
    """
    Reconstruct sum(alpha_j * P_j) from Pauli terms.

    Parameters
    ----------
    terms : Iterable
        Objects with ``pstring`` and ``coeff`` attributes, e.g. ``PauliTerm``.
        A single term is accepted as well.
    n : int
        Number of qubits

    Returns
    -------
    np.ndarray
        Dense ``2**n x 2**n`` complex matrix. Symbol ``k`` of each string acts
        on the ``k``-th tensor factor from the left.
    """
    if hasattr(terms, "pstring"):
        terms = [terms]
    if n > DENSE_QUBIT_WARNING:
        warnings.warn(
            f"Building a dense matrix for {n} qubits ({2**n} x {2**n})",
            RuntimeWarning,
            stacklevel=2,
        )

    total_matrix = np.zeros((2**n, 2**n), dtype=complex)
    for term in terms:
        total_matrix += complex(term.coeff) * Pauli(term.pstring).to_matrix()
    return total_matrix
