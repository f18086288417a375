# -*- coding: utf-8 -*-

# pauli_strings/__init__.py
"""
Pauli Strings Package

Multi-qubit Pauli operators written as strings of ``I``, ``X``, ``Y``, ``Z``,
with exact phase tracking under multiplication.
"""

from .errors       import (
    PauliStringError,
    InvalidSymbolError,
    LengthMismatchError,
    InvalidIndexError,
    UsageError,
    InternalInvariantError,
)
from .phase        import (
    Phase,
    phase_from_factors,
    one,
    promote_type,
)
from .algebra      import PAULI_SYMBOLS, mul_symbols, mul_strings
from .pauli_term   import PauliTerm
from .pauli_op     import PauliOp
from .embedding    import embed
from .random_paulis import (
    default_rng,
    set_default_rng,
    register_coeff_sampler,
    rand_coeff,
    rand_pauli_string,
    rand_pauli_term,
    rand_pauli_op,
)
from .utils        import pauli_terms_to_matrix

__all__ = [
    "PauliStringError",
    "InvalidSymbolError",
    "LengthMismatchError",
    "InvalidIndexError",
    "UsageError",
    "InternalInvariantError",
    "Phase",
    "phase_from_factors",
    "one",
    "promote_type",
    "PAULI_SYMBOLS",
    "mul_symbols",
    "mul_strings",
    "PauliTerm",
    "PauliOp",
    "embed",
    "default_rng",
    "set_default_rng",
    "register_coeff_sampler",
    "rand_coeff",
    "rand_pauli_string",
    "rand_pauli_term",
    "rand_pauli_op",
    "pauli_terms_to_matrix",
]

# Version
__version__ = "0.1.0"
