# This code is a Qiskit project.

# (C) Copyright IBM 2024.

# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Functions for manipulating quantum circuits."""

from __future__ import annotations

from collections.abc import Iterable

from qiskit.circuit import QuantumCircuit, CircuitInstruction


def touched_qubit_indices(circuit: QuantumCircuit, /) -> list[int]:
    """Return the indices of the qubits acted on by the circuit, in order of first use.

    Barriers do not count as acting on a qubit.

    >>> qc = QuantumCircuit(4)
    >>> _ = qc.cx(2, 0)
    >>> _ = qc.barrier()
    >>> _ = qc.h(1)
    >>> touched_qubit_indices(qc)
    [2, 0, 1]
    """
    touched: dict[int, None] = {}
    for instruction in circuit.data:
        if instruction.operation.name == "barrier":
            continue
        for qubit in instruction.qubits:
            touched.setdefault(circuit.find_bit(qubit).index, None)
    return list(touched)


def instruction_qubit_indices(
    circuit: QuantumCircuit, instruction: CircuitInstruction, /
) -> list[int]:
    """Return the circuit indices of the qubits an instruction acts on."""
    return [circuit.find_bit(qubit).index for qubit in instruction.qubits]


def circuit_from_instructions(
    template: QuantumCircuit,
    instructions: Iterable[CircuitInstruction],
) -> QuantumCircuit:
    """Create a new circuit on the registers of ``template`` holding ``instructions``.

    The returned circuit shares no instruction storage with ``template``, so
    appending to one never affects the other.
    """
    circuit = template.copy_empty_like()
    for instruction in instructions:
        circuit.append(instruction)
    return circuit
