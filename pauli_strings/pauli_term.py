# -*- coding: utf-8 -*-

# pauli_strings/pauli_term.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np
from qiskit.quantum_info import Pauli

from .algebra import PAULI_SYMBOLS, mul_strings
from .errors import InvalidSymbolError, LengthMismatchError
from .phase import Phase, one
from .utils import pauli_terms_to_matrix

_VALID = frozenset(PAULI_SYMBOLS)


@dataclass(frozen=True, slots=True)
class PauliTerm:
    """
    A single weighted Pauli string on ``n`` qubits.

    Attributes
    ----------
    pstring : str
        Symbols from ``"IXYZ"``, one per qubit
    coeff : Any
        Coefficient; ``Phase(1)`` by default. Any numeric type that can be
        multiplied by a :class:`Phase` works.
    n : int
        Number of qubits. Defaults to ``len(pstring)``; when given explicitly
        it must agree with the string.

    Notes
    -----
    Terms are immutable. The product of two terms has coefficient
    ``phase * (coeff1 * coeff2)``, so its type follows the promotion rule of
    :class:`Phase`: ``Phase`` stays ``Phase``, numbers become ``complex``.
    """
    pstring: str
    coeff:   Any = Phase(1)
    n:       Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.pstring, str):
            raise TypeError(
                f"Pauli string must be str, got {type(self.pstring).__name__}")
        length = len(self.pstring)
        if self.n is None:
            object.__setattr__(self, "n", length)
        elif self.n != length:
            raise LengthMismatchError(
                f"Length of string {length} is not {self.n}")
        for pos, ch in enumerate(self.pstring):
            if ch not in _VALID:
                raise InvalidSymbolError(
                    f"Unrecognized character {ch!r} at position {pos} in Pauli string")

    @classmethod
    def unit(cls, pstring: str, coeff_type: type = Phase,
             n: Optional[int] = None) -> "PauliTerm":
        """Term with the multiplicative identity of ``coeff_type`` as coefficient."""
        return cls(pstring, one(coeff_type), n)

    def __len__(self) -> int:
        return self.n

    def __mul__(self, other):
        if not isinstance(other, PauliTerm):
            return NotImplemented
        if self.n != other.n:
            raise LengthMismatchError(
                f"Cannot multiply {self.n}-qubit and {other.n}-qubit terms")
        phase, pstring = mul_strings(self.pstring, other.pstring)
        return PauliTerm(pstring, phase * (self.coeff * other.coeff), self.n)

    def to_label(self) -> str:
        return self.pstring

    def weight(self) -> int:
        """
        Compute the weight of the Pauli term.

        The weight is the number of non-identity Pauli operators
        in the term, i.e., the number of qubits on which the operator
        acts non-trivially.
        """
        return self.n - self.pstring.count("I")

    def to_qiskit(self) -> Pauli:
        """The string as a qiskit ``Pauli`` with phase +1."""
        return Pauli(self.pstring)

    def to_matrix(self) -> np.ndarray:
        """Dense matrix ``coeff * P``."""
        return pauli_terms_to_matrix([self], self.n)

    def __repr__(self) -> str:
        """
        String in the format 'c*P' where c is the coefficient
        and P is the Pauli label, e.g. ``-i*XZ``.
        """
        return f"{self.coeff!s}*{self.pstring}"
