# -*- coding: utf-8 -*-

# pauli_strings/embedding.py
"""
Embedding of Pauli strings, terms and operators into larger registers.

Positions are 1-based: ``embed("X", [2], 3) == "IXI"``.
"""

from __future__ import annotations
import numbers
from functools import singledispatch
from typing import Optional, Sequence

from .errors import InvalidIndexError, LengthMismatchError
from .pauli_op import PauliOp
from .pauli_term import PauliTerm

__all__ = ["embed"]


def _embed_string(pstring: str, indices: Sequence[int], num_qubits: int) -> str:
    lenpauli = len(pstring)
    indices = list(indices)
    if len(indices) != lenpauli:
        raise InvalidIndexError(
            f"Pauli string length {lenpauli} and index list length {len(indices)} differ.")
    if num_qubits < lenpauli:
        raise LengthMismatchError(
            f"num qubits {num_qubits} is less than length of Pauli string {lenpauli}")
    if not all(isinstance(i, numbers.Integral) and not isinstance(i, bool)
               for i in indices):
        raise InvalidIndexError("Index list contains a non-integer index.")
    if len(set(indices)) != len(indices):
        raise InvalidIndexError("Index list contains duplicate indices.")
    if any(i < 1 for i in indices):
        raise InvalidIndexError("An index is less than one.")
    if any(i > num_qubits for i in indices):
        raise InvalidIndexError("An index is greater than num_qubits.")

    out = ["I"] * num_qubits
    for pos, p in zip(indices, pstring):
        out[pos - 1] = p
    return "".join(out)


@singledispatch
def embed(pauli, indices: Sequence[int], num_qubits: Optional[int] = None):
    """
    Place a Pauli string on chosen qubits of a larger all-identity register.

    Parameters
    ----------
    pauli : str | PauliTerm | PauliOp
        Object to embed
    indices : Sequence[int]
        1-based target position for each qubit of ``pauli``
    num_qubits : int, optional
        Size of the target register; defaults to the size of ``pauli``

    Returns
    -------
    str | PauliTerm | PauliOp
        Same kind as ``pauli``; coefficients are kept.

    Raises
    ------
    InvalidIndexError
        Wrong number of indices, duplicates, or an index outside
        ``1..num_qubits``.
    LengthMismatchError
        ``num_qubits`` is smaller than the source.
    """
    raise TypeError(f"Cannot embed object of type {type(pauli).__name__}")


@embed.register
def _(pauli: str, indices, num_qubits=None) -> str:
    if num_qubits is None:
        num_qubits = len(pauli)
    return _embed_string(pauli, indices, num_qubits)


@embed.register
def _(pauli: PauliTerm, indices, num_qubits=None) -> PauliTerm:
    if num_qubits is None:
        num_qubits = pauli.n
    return PauliTerm(_embed_string(pauli.pstring, indices, num_qubits),
                     pauli.coeff, num_qubits)


@embed.register
def _(pauli: PauliOp, indices, num_qubits=None) -> PauliOp:
    if num_qubits is None:
        num_qubits = pauli.n
    return PauliOp([embed(t, indices, num_qubits) for t in pauli.terms])
