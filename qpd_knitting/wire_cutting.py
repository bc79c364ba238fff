# This code is a Qiskit project.

# (C) Copyright IBM 2024.

# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Quasiprobability decomposition of wire cuts into pairs of fragment circuits."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from qiskit.circuit import QuantumCircuit, Instruction

from .cut_types import CutCircuit, CutInfo, CutType, WireCut
from .cutting_reconstruction import estimate_cutting_overhead
from .instructions import CutWire
from .qpd import (
    QPDBasis,
    map_ids_from_index,
    num_configurations,
    qpdbasis_from_instruction,
    weight_from_map_ids,
)
from .utils.iteration import ordered_map, strict_zip
from .utils.transforms import circuit_from_instructions, touched_qubit_indices


logger = logging.getLogger(__name__)

LocatedOperation = tuple[Instruction, int]


def cut_wires(
    circuit: QuantumCircuit,
    cuts: Sequence[WireCut],
    *,
    max_workers: int | None = None,
) -> list[tuple[QuantumCircuit, QuantumCircuit, float]]:
    r"""Generate the fragment pairs of every configuration of the given wire cuts.

    Each wire cut is replaced by a quasiprobability mixture of four terms,
    each weighted by 0.5: prepare :math:`|0\rangle` or :math:`|1\rangle` and
    measure :math:`Z`, prepare :math:`|+\rangle` and measure :math:`X`, or
    prepare :math:`|{+i}\rangle` and measure :math:`Y`.  For :math:`k` cuts
    there are :math:`4^k` configurations.  Configuration ``c`` selects term
    ``(c >> 2 * i) & 3`` for cut ``i``.

    The circuit is split once, at the position of the *first* cut in
    ``cuts``.  The prefix fragment holds the instructions before that
    position followed by the state preparations of every cut; the suffix
    fragment holds the basis changes of every cut followed by the remaining
    instructions.  With more than one cut, every configuration therefore
    shares the same two-way split.  Use :func:`cut_circuit` to slice the
    circuit at every cut position.

    Both fragments are new circuits on the registers of ``circuit``.

    Args:
        circuit: The circuit to cut
        cuts: The wire cuts, in the order in which their terms are indexed
        max_workers: If given, build the configurations in a thread pool of
            this size.  The result is the same as the serial one.

    Returns:
        A list with one ``(prefix, suffix, coefficient)`` tuple per
        configuration, in configuration-index order.  Without any cuts, the
        single configuration is ``(circuit copy, empty circuit, 1.0)``.

    Raises:
        ValueError: A cut position lies outside the circuit.
        ValueError: A cut severs a qubit that is not in the circuit or that no
            instruction acts on.
    """
    validate_wire_cuts(circuit, cuts)
    bases = _wire_cut_bases(len(cuts))
    split = cuts[0].position if cuts else len(circuit.data)
    total = num_configurations(bases)
    logger.info(
        "Cutting %d wires at position %d into %d configurations",
        len(cuts),
        split,
        total,
    )

    def build(config: int) -> tuple[QuantumCircuit, QuantumCircuit, float]:
        pre_ops, post_ops, coeff = _decompose(config, cuts, bases)
        prefix = circuit_from_instructions(circuit, circuit.data[:split])
        for operation, qubit in pre_ops:
            prefix.append(operation, [qubit])
        suffix = circuit.copy_empty_like()
        for operation, qubit in post_ops:
            suffix.append(operation, [qubit])
        for instruction in circuit.data[split:]:
            suffix.append(instruction)
        return prefix, suffix, coeff

    return ordered_map(build, range(total), max_workers=max_workers)


def decompose_configuration(
    config: int, cuts: Sequence[WireCut]
) -> tuple[list[LocatedOperation], list[LocatedOperation], float]:
    """Return the local operations and coefficient of one configuration.

    Args:
        config: The configuration index, in ``[0, 4**len(cuts))``
        cuts: The wire cuts

    Returns:
        The operations to append to the prefix fragment and to prepend to the
        suffix fragment, as ``(operation, qubit index)`` pairs ordered by cut,
        together with the configuration's coefficient.

    Raises:
        ValueError: ``config`` is out of range.
    """
    return _decompose(config, cuts, _wire_cut_bases(len(cuts)))


def _decompose(
    config: int, cuts: Sequence[WireCut], bases: Sequence[QPDBasis]
) -> tuple[list[LocatedOperation], list[LocatedOperation], float]:
    map_ids = map_ids_from_index(config, bases)
    pre_ops: list[LocatedOperation] = []
    post_ops: list[LocatedOperation] = []
    for cut, basis, map_id in strict_zip(cuts, bases, map_ids):
        preparation, measurement = basis.maps[map_id]
        pre_ops.extend((operation, cut.qubit) for operation in preparation)
        post_ops.extend((operation, cut.qubit) for operation in measurement)
    return pre_ops, post_ops, weight_from_map_ids(bases, map_ids)


def _wire_cut_bases(num_cuts: int) -> list[QPDBasis]:
    basis = qpdbasis_from_instruction(CutWire())
    return [basis] * num_cuts


def validate_wire_cuts(circuit: QuantumCircuit, cuts: Sequence[WireCut]) -> None:
    """Check that every cut lies within the circuit and severs a used qubit.

    Raises:
        ValueError: A cut position lies outside ``[0, len(circuit.data)]``.
        ValueError: A cut qubit index is not in the circuit.
        ValueError: No instruction acts on a cut qubit.
    """
    touched = set(touched_qubit_indices(circuit))
    for i, cut in enumerate(cuts):
        if not 0 <= cut.position <= len(circuit.data):
            raise ValueError(
                f"Wire cut {i} has position ({cut.position}), which lies outside "
                f"a circuit with {len(circuit.data)} instructions."
            )
        if not 0 <= cut.qubit < circuit.num_qubits:
            raise ValueError(
                f"Wire cut {i} severs qubit ({cut.qubit}), but the circuit has "
                f"{circuit.num_qubits} qubits."
            )
        if cut.qubit not in touched:
            raise ValueError(
                f"Wire cut {i} severs qubit ({cut.qubit}), which is not acted on "
                "by any instruction in the circuit."
            )


def wire_cuts_from_markers(
    circuit: QuantumCircuit, /
) -> tuple[QuantumCircuit, list[WireCut]]:
    """Remove :class:`.CutWire` markers from a circuit and return the cuts they denote.

    >>> qc = QuantumCircuit(2)
    >>> _ = qc.cx(0, 1)
    >>> _ = qc.append(CutWire(), [1])
    >>> _ = qc.h(1)
    >>> stripped, cuts = wire_cuts_from_markers(qc)
    >>> len(stripped.data), cuts
    (2, [WireCut(position=1, qubit=1)])

    Returns:
        A copy of ``circuit`` without the markers, and one :class:`.WireCut`
        per marker, in circuit order.
    """
    stripped = circuit.copy_empty_like()
    cuts = []
    for instruction in circuit.data:
        if instruction.operation.name == "cut_wire":
            qubit = circuit.find_bit(instruction.qubits[0]).index
            cuts.append(WireCut(position=len(stripped.data), qubit=qubit))
        else:
            stripped.append(instruction)
    return stripped, cuts


def cut_circuit(circuit: QuantumCircuit, cuts: Sequence[WireCut]) -> CutCircuit:
    """Slice a circuit into time-ordered subcircuits at every wire cut position.

    The cuts are sorted by position (keeping the given order among cuts at
    the same position), and ``circuit.data`` is split at each of them, giving
    ``len(cuts) + 1`` subcircuits on the registers of ``circuit``.  Cuts that
    share a position produce an empty subcircuit between them.

    >>> qc = QuantumCircuit(2)
    >>> _ = qc.cx(0, 1)
    >>> _ = qc.h(1)
    >>> _ = qc.cx(0, 1)
    >>> result = cut_circuit(qc, [WireCut(2, 1), WireCut(1, 1)])
    >>> [len(sub.data) for sub in result.subcircuits]
    [1, 1, 1]
    >>> result.reconstruction_overhead
    16.0

    Returns:
        The subcircuits, one :attr:`.CutType.WIRE_CUT` record per cut giving
        the subcircuit that ends at the cut and the qubit it severs, and the
        sampling overhead of the cuts

    Raises:
        ValueError: A cut is invalid, as in :func:`validate_wire_cuts`.
    """
    validate_wire_cuts(circuit, cuts)
    ordered = sorted(cuts, key=lambda cut: cut.position)
    boundaries = [0] + [cut.position for cut in ordered] + [len(circuit.data)]
    subcircuits = [
        circuit_from_instructions(circuit, circuit.data[start:stop])
        for start, stop in zip(boundaries, boundaries[1:])
    ]
    cut_info = [
        CutInfo(
            subcircuit_index=i,
            qubit_in_subcircuit=cut.qubit,
            cut_type=CutType.WIRE_CUT,
        )
        for i, cut in enumerate(ordered)
    ]
    logger.debug("Sliced circuit into %d subcircuits", len(subcircuits))
    return CutCircuit(
        subcircuits=subcircuits,
        cut_info=cut_info,
        reconstruction_overhead=estimate_cutting_overhead(len(cuts), 0),
    )
