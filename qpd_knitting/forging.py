# This code is a Qiskit project.

# (C) Copyright IBM 2024.

# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Generation of entanglement forging circuits from a Schmidt decomposition."""

from __future__ import annotations

from collections.abc import Callable, Sequence
import logging

from qiskit import QuantumCircuit

from .cut_types import ForgingConfig
from .utils.iteration import ordered_map


logger = logging.getLogger(__name__)

#: Maps a Schmidt index to the ansatz circuit of one subsystem
AnsatzGenerator = Callable[[int], QuantumCircuit]


def prepare_bitstring(
    qubits: Sequence[int],
    bitstring: int,
    num_qubits: int | None = None,
    name: str | None = None,
) -> QuantumCircuit:
    """Prepare the computational basis state given by a bitstring.

    An X gate is applied to ``qubits[i]`` for every bit ``i`` set in
    ``bitstring``.  Bits at or beyond ``len(qubits)`` are ignored.

    >>> qc = prepare_bitstring([0, 1, 2, 3], 0b1010)
    >>> [qc.find_bit(inst.qubits[0]).index for inst in qc.data]
    [1, 3]

    Args:
        qubits: The circuit qubits of the subsystem, least significant bit first
        bitstring: The basis state, as an integer
        num_qubits: The width of the circuit.  Defaults to ``max(qubits) + 1``.
        name: The name of the circuit

    Returns:
        The prepared circuit

    Raises:
        ValueError: ``bitstring`` is negative.
    """
    if bitstring < 0:
        raise ValueError(f"Bitstring ({bitstring}) must be non-negative.")
    if num_qubits is None:
        num_qubits = max(qubits, default=-1) + 1
    qcirc = QuantumCircuit(num_qubits, name=name)
    for i, qubit in enumerate(qubits):
        if (bitstring >> i) & 1:
            qcirc.x(qubit)
    return qcirc


def _subsystem_circuit(
    qubits: Sequence[int], bitstring: int, ansatz: QuantumCircuit
) -> QuantumCircuit:
    num_qubits = max(max(qubits, default=-1) + 1, ansatz.num_qubits)
    qcirc = prepare_bitstring(qubits, bitstring, num_qubits)
    qcirc.compose(ansatz, qubits=range(ansatz.num_qubits), inplace=True)
    return qcirc


def entanglement_forging(
    ansatz_a: AnsatzGenerator,
    ansatz_b: AnsatzGenerator,
    config: ForgingConfig,
    *,
    max_workers: int | None = None,
) -> list[tuple[QuantumCircuit, QuantumCircuit, float]]:
    r"""Generate one pair of subsystem circuits per Schmidt term.

    For a bipartite state
    :math:`|\psi\rangle = \sum_k \lambda_k |\phi_k\rangle_A |\chi_k\rangle_B`,
    the subsystems are prepared separately, avoiding any entangling
    operation between A and B.  The circuit of subsystem A for term ``k``
    prepares ``config.bitstrings_a[k]`` on ``config.system_a_qubits`` and
    then applies ``ansatz_a(k)``; likewise for B.

    Terms are generated for ``k < config.num_terms``; any sequence of the
    configuration longer than that is truncated without error.

    Args:
        ansatz_a: Returns the ansatz circuit of subsystem A for a Schmidt index.
            Qubit ``i`` of the returned circuit is circuit qubit ``i``.
        ansatz_b: Same as ``ansatz_a``, for subsystem B
        config: The Schmidt decomposition
        max_workers: If given, build the terms in a thread pool of this size

    Returns:
        A list of ``(circuit_a, circuit_b, weight)`` tuples, where the weight
        of term ``k`` is :math:`\lambda_k^2`
    """
    num_terms = config.num_terms
    if num_terms < len(config.schmidt_coefficients):
        logger.info(
            "Using %d of %d Schmidt coefficients",
            num_terms,
            len(config.schmidt_coefficients),
        )

    def build(k: int) -> tuple[QuantumCircuit, QuantumCircuit, float]:
        circuit_a = _subsystem_circuit(
            config.system_a_qubits, config.bitstrings_a[k], ansatz_a(k)
        )
        circuit_b = _subsystem_circuit(
            config.system_b_qubits, config.bitstrings_b[k], ansatz_b(k)
        )
        return circuit_a, circuit_b, float(config.schmidt_coefficients[k]) ** 2

    return ordered_map(build, range(num_terms), max_workers=max_workers)
