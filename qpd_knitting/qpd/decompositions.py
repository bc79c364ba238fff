# This code is a Qiskit project.

# (C) Copyright IBM 2024.

# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Instruction to :class:`.QPDBasis` decompositions."""

from __future__ import annotations

from collections.abc import Callable

from qiskit.circuit import Instruction
from qiskit.circuit.library.standard_gates import (
    XGate,
    YGate,
    ZGate,
    HGate,
    SGate,
    SdgGate,
    CXGate,
    CZGate,
    SwapGate,
)

from .qpd_basis import QPDBasis
from ..instructions import CutWire


_qpdbasis_from_instruction_funcs: dict[str, Callable[[Instruction], QPDBasis]] = {}


def _register_qpdbasis_from_instruction(*args):
    def g(f):
        for name in args:
            _qpdbasis_from_instruction_funcs[name] = f
        return f

    return g


def qpdbasis_from_instruction(gate: Instruction, /) -> QPDBasis:
    """Generate a :class:`.QPDBasis` object, given a supported operation.

    The supported operations are :class:`~qiskit.circuit.library.CXGate`,
    :class:`~qiskit.circuit.library.CZGate`,
    :class:`~qiskit.circuit.library.SwapGate` and the :class:`.CutWire`
    marker.  Dispatch is on the instruction's ``name``.

    Returns:
        The newly-instantiated :class:`QPDBasis` object

    Raises:
        ValueError: Instruction not supported.
    """
    try:
        f = _qpdbasis_from_instruction_funcs[gate.name]
    except KeyError:
        raise ValueError(f"Instruction not supported: {gate.name}") from None
    return f(gate)


@_register_qpdbasis_from_instruction("cx")
def _(unused_gate: CXGate):
    # |CX>> = 1/2 (|II>> + |ZZ>> + |XX>> - |YY>>), one Pauli per qubit
    maps1, maps2, coeffs = zip(
        ([], [], 0.5),
        ([ZGate()], [ZGate()], 0.5),
        ([XGate()], [XGate()], 0.5),
        ([YGate()], [YGate()], -0.5),
    )
    return QPDBasis(list(zip(maps1, maps2)), coeffs)


@_register_qpdbasis_from_instruction("cz")
def _(unused_gate: CZGate):
    maps1, maps2, coeffs = zip(
        ([], [], 0.25),
        ([ZGate()], [], 0.25),
        ([], [ZGate()], 0.25),
        ([ZGate()], [ZGate()], -0.25),
    )
    return QPDBasis(list(zip(maps1, maps2)), coeffs)


@_register_qpdbasis_from_instruction("swap")
def _(unused_gate: SwapGate):
    maps1, maps2, coeffs = zip(
        ([], [], 0.25),
        ([XGate()], [XGate()], 0.25),
        ([YGate()], [YGate()], 0.25),
        ([ZGate()], [ZGate()], 0.25),
    )
    return QPDBasis(list(zip(maps1, maps2)), coeffs)


@_register_qpdbasis_from_instruction("cut_wire")
def _(unused_gate: CutWire):
    # The first side is appended to the fragment that ends at the cut and
    # prepares the eigenstate; the second side is prepended to the fragment
    # that continues the wire and rotates the measurement basis onto Z.
    prep_0: list[Instruction] = []
    prep_1 = [XGate()]
    prep_plus = [HGate()]
    prep_iplus = [HGate(), SGate()]

    z_measurement: list[Instruction] = []
    x_measurement = [HGate()]
    y_measurement = [SdgGate(), HGate()]

    maps1, maps2, coeffs = zip(
        (prep_0, z_measurement, 0.5),
        (prep_1, list(z_measurement), 0.5),
        (prep_plus, x_measurement, 0.5),
        (prep_iplus, y_measurement, 0.5),
    )
    return QPDBasis(list(zip(maps1, maps2)), coeffs)
