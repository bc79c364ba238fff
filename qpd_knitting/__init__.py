# This code is a Qiskit project.

# (C) Copyright IBM 2024.

# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Quasiprobability circuit knitting.

Functions for splitting a quantum circuit into smaller fragments by cutting
wires or two-qubit gates, for forging entangled bipartite states from
separable circuits, and for knitting the fragment results back together.
"""

from __future__ import annotations
from importlib.metadata import version, PackageNotFoundError

from .cut_types import (
    CutCircuit,
    CutInfo,
    CutType,
    DeviceConstraints,
    ForgingConfig,
    WireCut,
)
from .cutting_reconstruction import (
    estimate_cutting_overhead,
    estimate_shots,
    knit_fragment_results,
    knit_results,
)
from .find_cuts import (
    cuts_satisfy_budget,
    estimate_fragment_qubits,
    find_cuts,
    find_optimal_cuts,
)
from .forging import entanglement_forging, prepare_bitstring
from .gate_cutting import (
    cut_cnot,
    cut_cz,
    cut_gates,
    cut_swap,
    cut_two_qubit_gate,
)
from .wire_cutting import (
    cut_circuit,
    cut_wires,
    decompose_configuration,
    wire_cuts_from_markers,
)

try:
    __version__ = version("qpd-knitting")
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed
    pass

__all__ = [
    "CutCircuit",
    "CutInfo",
    "CutType",
    "DeviceConstraints",
    "ForgingConfig",
    "WireCut",
    "cut_circuit",
    "cut_cnot",
    "cut_cz",
    "cut_gates",
    "cut_swap",
    "cut_two_qubit_gate",
    "cut_wires",
    "cuts_satisfy_budget",
    "decompose_configuration",
    "entanglement_forging",
    "estimate_cutting_overhead",
    "estimate_fragment_qubits",
    "estimate_shots",
    "find_cuts",
    "find_optimal_cuts",
    "knit_fragment_results",
    "knit_results",
    "prepare_bitstring",
    "wire_cuts_from_markers",
]
