# This code is a Qiskit project.

# (C) Copyright IBM 2024.

# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Value types describing where and how a circuit is cut."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from qiskit.circuit import QuantumCircuit


class WireCut(NamedTuple):
    """Location of a wire cut.

    The cut severs qubit ``qubit`` immediately after the instruction at index
    ``position - 1`` of the circuit's data, i.e., ``position`` is the number of
    instructions that come before the cut.
    """

    position: int
    qubit: int


class CutType(Enum):
    """Kind of cut recorded in a :class:`CutInfo`."""

    #: A qubit's timeline was severed
    WIRE_CUT = 1

    #: A two-qubit gate was replaced by a sum of local operations
    GATE_CUT = 2


class CutInfo(NamedTuple):
    """Provenance of a single cut, used when aggregating fragment results."""

    subcircuit_index: int
    qubit_in_subcircuit: int
    cut_type: CutType


class CutCircuit(NamedTuple):
    """The result of cutting a circuit into fragments."""

    subcircuits: list[QuantumCircuit]
    cut_info: list[CutInfo]
    reconstruction_overhead: float


@dataclass
class DeviceConstraints:
    """Specify the constraints (qubits per subcircuit) that must be respected."""

    qubits_per_subcircuit: int

    def __post_init__(self):
        """Post-init method for data class."""
        if self.qubits_per_subcircuit < 1:
            raise ValueError(
                "qubits_per_subcircuit must be a positive definite integer."
            )

    def get_qpu_width(self) -> int:
        """Return the number of qubits per subcircuit."""
        return self.qubits_per_subcircuit


@dataclass(frozen=True)
class ForgingConfig:
    r"""Schmidt decomposition of a bipartite state used for entanglement forging.

    The state is :math:`\sum_k \lambda_k |\phi_k\rangle_A |\chi_k\rangle_B`,
    where :math:`|\phi_k\rangle_A` (:math:`|\chi_k\rangle_B`) is prepared by
    flipping the qubits of ``system_a_qubits`` (``system_b_qubits``) selected
    by the bits of ``bitstrings_a[k]`` (``bitstrings_b[k]``) and then applying
    the subsystem ansatz.  Bit ``i`` of a bitstring refers to the ``i``-th
    qubit of the subsystem's qubit list.

    Only indices ``k`` below :attr:`num_terms` are used.  If one of the three
    sequences is longer than the others, its excess entries are ignored.
    """

    system_a_qubits: Sequence[int]
    system_b_qubits: Sequence[int]
    schmidt_coefficients: Sequence[float]
    bitstrings_a: Sequence[int]
    bitstrings_b: Sequence[int]

    def __post_init__(self):
        """Freeze the sequences and check the qubit lists and bitstrings."""
        for field_name in (
            "system_a_qubits",
            "system_b_qubits",
            "schmidt_coefficients",
            "bitstrings_a",
            "bitstrings_b",
        ):
            object.__setattr__(self, field_name, tuple(getattr(self, field_name)))
        for label, qubits in (
            ("system_a_qubits", self.system_a_qubits),
            ("system_b_qubits", self.system_b_qubits),
        ):
            if any(q < 0 for q in qubits):
                raise ValueError(f"{label} contains a negative qubit index.")
            if len(set(qubits)) != len(qubits):
                raise ValueError(f"{label} contains duplicate qubit indices.")
        for label, bitstrings in (
            ("bitstrings_a", self.bitstrings_a),
            ("bitstrings_b", self.bitstrings_b),
        ):
            if any(b < 0 for b in bitstrings):
                raise ValueError(f"{label} contains a negative bitstring.")

    @property
    def num_terms(self) -> int:
        """Number of Schmidt terms that can be forged."""
        return min(
            len(self.schmidt_coefficients),
            len(self.bitstrings_a),
            len(self.bitstrings_b),
        )
