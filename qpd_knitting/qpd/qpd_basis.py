# This code is a Qiskit project.

# (C) Copyright IBM 2024.

# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Class containing the local terms into which a cut is decomposed."""
from __future__ import annotations

from collections.abc import Sequence

from qiskit.circuit import Instruction


class QPDBasis:
    """Quasiprobability decomposition of a cut.

    Each term of the decomposition is a tuple with one sequence of
    single-qubit operations per side of the cut, together with a real
    coefficient.  For a gate cut the sides are the two qubits of the gate; for
    a wire cut they are the end of the severed wire (state preparation) and
    the start of its continuation (basis change before measurement).

    The ideal operation equals the coefficient-weighted sum of its terms.
    """

    def __init__(
        self,
        maps: Sequence[tuple[Sequence[Instruction], ...]],
        coeffs: Sequence[float],
    ):
        """Assign member variables.

        Args:
            maps: A sequence of tuples, one per term, describing the local operations
                applied on each side of the cut for that term.
            coeffs: Coefficients of the terms.  Each coefficient can be any real
                number.

        Raises:
            ValueError: ``maps`` is empty, its tuples differ in length or act on more than
                two sides, or ``coeffs`` has a different length than ``maps``.
        """
        self._set_maps(maps)
        self.coeffs = coeffs

    @property
    def maps(self) -> Sequence[tuple[Sequence[Instruction], ...]]:
        """Get the local operations of each term."""
        return self._maps

    def _set_maps(self, maps: Sequence[tuple[Sequence[Instruction], ...]]) -> None:
        if len(maps) == 0:
            raise ValueError("Number of maps passed to QPDBasis must be nonzero.")
        num_sides = len(maps[0])
        if num_sides > 2:
            raise ValueError("QPDBasis supports at most two sides.")
        for i, term in enumerate(maps):
            if len(term) != num_sides:
                raise ValueError(
                    "All maps passed to QPDBasis must act on the same number of "
                    f"sides. (Index {i} contains a {len(term)}-tuple but should "
                    f"contain a {num_sides}-tuple.)"
                )
        self._maps = maps

    @property
    def num_terms(self) -> int:
        """Get the number of terms in the decomposition."""
        return len(self._maps)

    @property
    def coeffs(self) -> Sequence[float]:
        """Quasiprobability decomposition coefficients."""
        return self._coeffs

    @coeffs.setter
    def coeffs(self, coeffs: Sequence[float]) -> None:
        if len(coeffs) != len(self.maps):
            raise ValueError("Coefficients must be same length as maps.")
        self._coeffs = tuple(float(c) for c in coeffs)

    def __eq__(self, other):
        """Check equivalence for QPDBasis class."""
        if other.__class__ is not self.__class__:
            return False
        return self.maps == other.maps and self.coeffs == other.coeffs
