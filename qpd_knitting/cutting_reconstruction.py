# This code is a Qiskit project.

# (C) Copyright IBM 2024.

# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Functions for reconstructing expectation values from fragment results."""

from __future__ import annotations

from collections.abc import Sequence
import math

import numpy as np


def knit_results(
    expectations: Sequence[float],
    coefficients: Sequence[float],
) -> float:
    r"""Combine per-configuration expectation values into the reconstructed value.

    The reconstructed expectation value is
    :math:`\sum_i \langle O \rangle_i \, c_i`, where :math:`c_i` is the
    coefficient of the :math:`i`-th configuration.

    Args:
        expectations: The expectation value estimated for each configuration
        coefficients: The quasiprobability coefficient of each configuration, in
            the same order as ``expectations``

    Returns:
        The reconstructed expectation value

    Raises:
        ValueError: ``expectations`` and ``coefficients`` differ in length.
    """
    if len(expectations) != len(coefficients):
        raise ValueError(
            f"The number of expectation values ({len(expectations)}) must equal "
            f"the number of coefficients ({len(coefficients)})."
        )
    return float(
        np.dot(
            np.asarray(expectations, dtype=float),
            np.asarray(coefficients, dtype=float),
        )
    )


def knit_fragment_results(
    prefix_expectations: Sequence[float],
    suffix_expectations: Sequence[float],
    coefficients: Sequence[float],
) -> float:
    """Reconstruct an expectation value from the results of fragment pairs.

    The two fragments of a configuration are executed independently, so the
    estimate for that configuration is the product of the two fragment
    estimates.  The products are then knitted with :func:`knit_results`.

    Raises:
        ValueError: The three sequences do not all have the same length.
    """
    if len(prefix_expectations) != len(suffix_expectations):
        raise ValueError(
            f"The number of prefix expectation values ({len(prefix_expectations)}) "
            "must equal the number of suffix expectation values "
            f"({len(suffix_expectations)})."
        )
    products = np.asarray(prefix_expectations, dtype=float) * np.asarray(
        suffix_expectations, dtype=float
    )
    return knit_results(products, coefficients)


def estimate_cutting_overhead(num_wire_cuts: int, num_gate_cuts: int) -> float:
    """Estimate the sampling overhead incurred by a set of cuts.

    Every wire cut multiplies the variance of the estimator by 4 and every
    gate cut by 3.

    >>> estimate_cutting_overhead(2, 1)
    48.0

    Raises:
        ValueError: A number of cuts is negative.
    """
    if num_wire_cuts < 0 or num_gate_cuts < 0:
        raise ValueError(
            f"The number of cuts must be non-negative (got {num_wire_cuts} wire "
            f"cuts and {num_gate_cuts} gate cuts)."
        )
    return 4.0**num_wire_cuts * 3.0**num_gate_cuts


def estimate_shots(target_precision: float, overhead: float) -> int:
    r"""Estimate the number of shots needed to reach a target precision.

    The variance of a quasiprobability estimator scales as
    :math:`\gamma^2 / N`, so reaching precision :math:`\epsilon` requires
    :math:`N = \lfloor (\gamma / \epsilon)^2 \rfloor` shots.

    >>> estimate_shots(0.5, 4.0)
    64

    Raises:
        ValueError: ``target_precision`` is not positive.
    """
    if target_precision <= 0:
        raise ValueError(
            f"target_precision must be positive (got {target_precision})."
        )
    return math.floor((overhead / target_precision) ** 2)
