# This code is a Qiskit project.

# (C) Copyright IBM 2024.

# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Code for enumerating the joint terms of several quasiprobability decompositions."""

from __future__ import annotations

from collections.abc import Sequence, Iterator
import logging
import math

from .qpd_basis import QPDBasis
from ..utils.iteration import strict_zip


logger = logging.getLogger(__name__)


def num_configurations(bases: Sequence[QPDBasis], /) -> int:
    """Return the number of joint terms of ``bases``.

    This is the product of the number of terms in each basis, e.g.
    :math:`4^k` for :math:`k` wire cuts.  An empty sequence has exactly
    one (empty) configuration.
    """
    return math.prod(basis.num_terms for basis in bases)


def map_ids_from_index(index: int, bases: Sequence[QPDBasis], /) -> tuple[int, ...]:
    """Convert a configuration index into one term index per basis.

    The index is read as a mixed-radix number whose least significant digit
    belongs to the first basis.  For bases with four terms each, the term of
    basis ``i`` is therefore ``(index >> 2 * i) & 3``.

    Raises:
        ValueError: ``index`` is outside ``[0, num_configurations(bases))``.
    """
    total = num_configurations(bases)
    if not 0 <= index < total:
        raise ValueError(
            f"Configuration index ({index}) must be in the range [0, {total})."
        )
    map_ids = []
    for basis in bases:
        index, map_id = divmod(index, basis.num_terms)
        map_ids.append(map_id)
    return tuple(map_ids)


def weight_from_map_ids(bases: Sequence[QPDBasis], map_ids: Sequence[int], /) -> float:
    """Return the product of the coefficients selected by ``map_ids``."""
    weight = 1.0
    for basis, map_id in strict_zip(bases, map_ids):
        weight *= basis.coeffs[map_id]
    return weight


def generate_exact_weights(
    bases: Sequence[QPDBasis], /
) -> Iterator[tuple[tuple[int, ...], float]]:
    """Yield every joint term of ``bases`` with its exact weight.

    The terms are yielded in configuration-index order; each element is a
    tuple of the term index chosen in every basis, together with the product
    of the corresponding coefficients.
    """
    total = num_configurations(bases)
    logger.info("Enumerating %d exact weights for %d bases", total, len(bases))
    for index in range(total):
        map_ids = map_ids_from_index(index, bases)
        yield map_ids, weight_from_map_ids(bases, map_ids)
