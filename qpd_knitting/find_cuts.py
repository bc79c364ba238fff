# This code is a Qiskit project.

# (C) Copyright IBM 2024.

# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Greedy placement of wire cuts so that every fragment fits on a device."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from typing import Any
import logging

from rustworkx import PyGraph, connected_components  # type: ignore[attr-defined]
from qiskit.circuit import QuantumCircuit

from .cut_types import DeviceConstraints, WireCut
from .cutting_reconstruction import estimate_cutting_overhead
from .utils.transforms import instruction_qubit_indices, touched_qubit_indices


logger = logging.getLogger(__name__)


def find_optimal_cuts(
    circuit: QuantumCircuit, max_fragment_qubits: int
) -> list[WireCut]:
    """Propose wire cuts so that each fragment acts on at most ``max_fragment_qubits`` qubits.

    If the circuit already acts on few enough qubits, no cuts are returned.
    No cuts are returned either when the circuit acts on more qubits than
    the budget but already falls apart into components that each fit; in
    that case the circuit is not scanned and no cut is proposed, even though
    a plain single pass would have proposed cuts at its multi-qubit
    instructions.

    Otherwise the circuit is scanned once, in order.  After every
    instruction acting on two or more qubits, a cut is proposed on the
    second of those qubits, and the search stops as soon as the estimated
    fragments (see :func:`estimate_fragment_qubits`) all fit.

    This is a greedy heuristic: it does not backtrack and does not minimize
    the number of cuts.  If the budget still cannot be met once the scan is
    complete, all the proposed cuts are returned anyway and a warning is
    logged; use :func:`cuts_satisfy_budget` to check the result.

    Args:
        circuit: The circuit to cut
        max_fragment_qubits: The number of qubits available per fragment

    Returns:
        The proposed cuts, in circuit order

    Raises:
        ValueError: ``max_fragment_qubits`` is less than 1.
    """
    if max_fragment_qubits < 1:
        raise ValueError(
            f"max_fragment_qubits must be at least 1 (got {max_fragment_qubits})."
        )
    cuts: list[WireCut] = []
    if len(touched_qubit_indices(circuit)) <= max_fragment_qubits:
        return cuts
    if cuts_satisfy_budget(circuit, cuts, max_fragment_qubits):
        # Already separated into small enough components
        return cuts

    satisfied = False
    for i, instruction in enumerate(circuit.data):
        if instruction.operation.name == "barrier" or len(instruction.qubits) < 2:
            continue
        qubits = instruction_qubit_indices(circuit, instruction)
        cuts.append(WireCut(position=i + 1, qubit=qubits[1]))
        profile = estimate_fragment_qubits(circuit, cuts)
        logger.debug("Proposed cut %s; fragment qubits %s", cuts[-1], profile)
        if all(width <= max_fragment_qubits for width in profile):
            satisfied = True
            break

    if satisfied:
        logger.info("Found %d wire cuts", len(cuts))
    else:
        logger.warning(
            "%d wire cuts do not bring every fragment within %d qubits",
            len(cuts),
            max_fragment_qubits,
        )
    return cuts


def estimate_fragment_qubits(
    circuit: QuantumCircuit, cuts: Sequence[WireCut]
) -> list[int]:
    """Estimate the number of qubits needed by each fragment of a cut circuit.

    Each qubit's timeline is split into segments at the cuts on that qubit.
    Instructions on several qubits join the segments they act on into a
    common fragment, and each segment needs its own qubit.  Cuts that do not
    separate two uses of a qubit have no effect, and idle qubits belong to no
    fragment.

    >>> qc = QuantumCircuit(3)
    >>> _ = qc.cx(0, 1)
    >>> _ = qc.cx(1, 2)
    >>> estimate_fragment_qubits(qc, [])
    [3]
    >>> estimate_fragment_qubits(qc, [WireCut(position=1, qubit=1)])
    [2, 2]

    Returns:
        The width of each fragment, ordered by the first instruction of each
        fragment
    """
    cut_qubits_by_position: defaultdict[int, list[int]] = defaultdict(list)
    for cut in cuts:
        cut_qubits_by_position[cut.position].append(cut.qubit)

    graph: PyGraph = PyGraph()
    current_segment: dict[int, int] = {}
    for i, instruction in enumerate(circuit.data):
        # A cut at position i severs its qubit just before instruction i
        for qubit in cut_qubits_by_position.get(i, ()):
            current_segment.pop(qubit, None)
        if instruction.operation.name == "barrier":
            continue
        nodes = []
        for qubit in instruction_qubit_indices(circuit, instruction):
            if qubit not in current_segment:
                current_segment[qubit] = graph.add_node(qubit)
            nodes.append(current_segment[qubit])
        for node1, node2 in zip(nodes, nodes[1:]):
            graph.add_edge(node1, node2, None)

    fragments = connected_components(graph)
    fragments.sort(key=min)
    return [len(fragment) for fragment in fragments]


def cuts_satisfy_budget(
    circuit: QuantumCircuit, cuts: Sequence[WireCut], max_fragment_qubits: int
) -> bool:
    """Return whether every estimated fragment fits within ``max_fragment_qubits``."""
    return all(
        width <= max_fragment_qubits
        for width in estimate_fragment_qubits(circuit, cuts)
    )


def find_cuts(
    circuit: QuantumCircuit, constraints: DeviceConstraints
) -> tuple[list[WireCut], dict[str, Any]]:
    """Find wire cut locations in a circuit, given device constraints.

    Args:
        circuit: The circuit to cut
        constraints: Constraints on how the circuit may be partitioned

    Returns:
        The cuts found by :func:`find_optimal_cuts`, and a metadata dictionary:
            - cuts: The cuts, as in the first element
            - fragment_qubits: The estimated width of each fragment
            - budget_satisfied: Whether every fragment fits on the device. The
              greedy search can return ``False`` here; callers must check it.
            - sampling_overhead: The sampling overhead incurred by the cuts
    """
    qpu_width = constraints.get_qpu_width()
    cuts = find_optimal_cuts(circuit, qpu_width)
    profile = estimate_fragment_qubits(circuit, cuts)
    metadata: dict[str, Any] = {
        "cuts": list(cuts),
        "fragment_qubits": profile,
        "budget_satisfied": all(width <= qpu_width for width in profile),
        "sampling_overhead": estimate_cutting_overhead(len(cuts), 0),
    }
    return cuts, metadata
