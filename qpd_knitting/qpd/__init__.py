# This code is a Qiskit project.

# (C) Copyright IBM 2024.

# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Main quasiprobability decomposition functionality."""

from .qpd_basis import QPDBasis
from .weights import (
    generate_exact_weights,
    map_ids_from_index,
    num_configurations,
    weight_from_map_ids,
)
from .decompositions import qpdbasis_from_instruction

__all__ = [
    "qpdbasis_from_instruction",
    "generate_exact_weights",
    "map_ids_from_index",
    "num_configurations",
    "weight_from_map_ids",
    "QPDBasis",
]
