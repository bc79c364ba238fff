# This code is a Qiskit project.

# (C) Copyright IBM 2024.

# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Single-qubit instruction to denote a wire cut location."""
from __future__ import annotations

from qiskit.circuit import Instruction, QuantumCircuit


class CutWire(Instruction):
    """A marker denoting that the wire it sits on should be cut at this point.

    The marker has no effect on the state.  :func:`.wire_cuts_from_markers`
    removes every marker from a circuit and returns a :class:`.WireCut` for
    each of them, whose ``position`` is the number of non-marker instructions
    that precede the marker.

    **Circuit Symbol:**

    .. parsed-literal::

            ┌──────────┐
       q_0: ┤ Cut_wire ├
            └──────────┘
    """

    def __init__(self, label: str | None = None):
        """Create a :class:`CutWire` instruction."""
        super().__init__("cut_wire", 1, 0, [], label=label)

    def _define(self):
        """Set definition to the (empty) equivalent circuit."""
        self.definition = QuantumCircuit(1, name=self.name)
