# This code is a Qiskit project.

# (C) Copyright IBM 2024.

# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Functions for cutting two-qubit gates into sums of local operations."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from qiskit.circuit import CircuitInstruction, Qubit, QuantumCircuit
from qiskit.circuit.library.standard_gates import CXGate, CZGate, SwapGate

from .cut_types import CutCircuit, CutInfo, CutType
from .cutting_reconstruction import estimate_cutting_overhead
from .qpd import QPDBasis, generate_exact_weights, qpdbasis_from_instruction
from .utils.iteration import strict_zip


logger = logging.getLogger(__name__)

#: Names of the two-qubit gates that :func:`cut_two_qubit_gate` decomposes.
GATE_CUT_NAMES = frozenset({"cx", "cz", "swap"})

GateCutTerm = tuple[list[CircuitInstruction], float]


def _locate_terms(
    basis: QPDBasis, qubits: Sequence[Qubit | int]
) -> list[GateCutTerm]:
    """Place each term of ``basis`` on ``qubits``, one side per qubit."""
    terms = []
    for maps, coeff in strict_zip(basis.maps, basis.coeffs):
        operations = [
            CircuitInstruction(operation, qubits=(qubit,))
            for qubit, side in strict_zip(qubits, maps)
            for operation in side
        ]
        terms.append((operations, coeff))
    return terms


def cut_cnot(control: Qubit | int, target: Qubit | int) -> list[GateCutTerm]:
    """Decompose a CNOT into four weighted tensor products of Paulis.

    The qubits may be given as :class:`~qiskit.circuit.Qubit` objects or as
    circuit indices; the terms are located on them as given.

    Returns:
        ``[([], 0.5), ([Z(c), Z(t)], 0.5), ([X(c), X(t)], 0.5), ([Y(c), Y(t)], -0.5)]``
    """
    return _locate_terms(qpdbasis_from_instruction(CXGate()), (control, target))


def cut_cz(qubit0: Qubit | int, qubit1: Qubit | int) -> list[GateCutTerm]:
    """Decompose a CZ gate into four weighted Pauli-Z terms."""
    return _locate_terms(qpdbasis_from_instruction(CZGate()), (qubit0, qubit1))


def cut_swap(qubit0: Qubit | int, qubit1: Qubit | int) -> list[GateCutTerm]:
    """Decompose a SWAP gate into four weighted tensor products of Paulis."""
    return _locate_terms(qpdbasis_from_instruction(SwapGate()), (qubit0, qubit1))


def cut_two_qubit_gate(instruction: CircuitInstruction, /) -> list[GateCutTerm]:
    """Decompose a gate into a weighted sum of local operations.

    Instructions whose operation is named ``cx``, ``cz`` or ``swap`` are
    decomposed into four terms located on the instruction's qubits.  Any other
    instruction cannot be decomposed and is returned unchanged as the single
    term ``([instruction], 1.0)``.
    """
    if is_gate_cuttable(instruction):
        return _locate_terms(
            qpdbasis_from_instruction(instruction.operation), instruction.qubits
        )
    logger.debug(
        "No gate-cut decomposition for (%s); keeping it as-is",
        instruction.operation.name,
    )
    return [([instruction], 1.0)]


def is_gate_cuttable(instruction: CircuitInstruction, /) -> bool:
    """Return whether :func:`cut_two_qubit_gate` decomposes ``instruction``."""
    return (
        instruction.operation.name in GATE_CUT_NAMES
        and len(instruction.qubits) == 2
    )


def cut_gates(
    circuit: QuantumCircuit, gate_ids: Sequence[int]
) -> tuple[list[tuple[QuantumCircuit, float]], CutCircuit]:
    """Expand the circuit over every combination of gate-cut terms.

    Each gate in ``gate_ids`` that :func:`cut_two_qubit_gate` can decompose is
    replaced by the local operations of one of its terms.  One circuit is
    returned for each combination of terms (:math:`4^m` circuits for
    :math:`m` decomposable gates), weighted by the product of the chosen
    coefficients.  Gates that cannot be decomposed are left in place.

    Args:
        circuit: The circuit containing gates to be cut
        gate_ids: The indices in ``circuit.data`` of the gates to cut

    Returns:
        A list of ``(circuit, weight)`` pairs, ordered by configuration index,
        and a :class:`.CutCircuit` summary holding a copy of ``circuit``, one
        :attr:`.CutType.GATE_CUT` record per decomposed gate and the sampling
        overhead of the decomposed gates

    Raises:
        ValueError: A gate index is out of range or repeated.
    """
    _validate_gate_ids(circuit, gate_ids)

    cut_ids = [i for i in gate_ids if is_gate_cuttable(circuit.data[i])]
    skipped = len(gate_ids) - len(cut_ids)
    if skipped:
        logger.info("%d requested gate cuts cannot be decomposed", skipped)
    bases = [qpdbasis_from_instruction(circuit.data[i].operation) for i in cut_ids]
    located = {
        i: _locate_terms(basis, circuit.data[i].qubits)
        for i, basis in strict_zip(cut_ids, bases)
    }

    experiments = []
    for map_ids, weight in generate_exact_weights(bases):
        replacements = {
            i: located[i][map_id][0] for i, map_id in strict_zip(cut_ids, map_ids)
        }
        expanded = circuit.copy_empty_like()
        for i, instruction in enumerate(circuit.data):
            for inst in replacements.get(i, (instruction,)):
                expanded.append(inst)
        experiments.append((expanded, weight))

    cut_info = [
        CutInfo(
            subcircuit_index=0,
            qubit_in_subcircuit=circuit.find_bit(circuit.data[i].qubits[0]).index,
            cut_type=CutType.GATE_CUT,
        )
        for i in cut_ids
    ]
    summary = CutCircuit(
        subcircuits=[circuit.copy()],
        cut_info=cut_info,
        reconstruction_overhead=estimate_cutting_overhead(0, len(cut_ids)),
    )
    return experiments, summary


def _validate_gate_ids(circuit: QuantumCircuit, gate_ids: Sequence[int]) -> None:
    if len(set(gate_ids)) != len(gate_ids):
        raise ValueError("Each gate may be cut at most once.")
    for gate_id in gate_ids:
        if not 0 <= gate_id < len(circuit.data):
            raise ValueError(
                f"Gate index ({gate_id}) is out of range for a circuit with "
                f"{len(circuit.data)} instructions."
            )
