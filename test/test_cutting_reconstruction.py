# This code is a Qiskit project.

# (C) Copyright IBM 2024.

# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Tests for knitting and overhead estimation functions."""

import unittest

import pytest
from ddt import ddt, data, unpack
from qiskit import QuantumRegister

from qpd_knitting import (
    cut_cnot,
    estimate_cutting_overhead,
    estimate_shots,
    knit_fragment_results,
    knit_results,
)


@ddt
class TestCuttingReconstruction(unittest.TestCase):
    def test_knit_results(self):
        with self.subTest("Simple example"):
            result = knit_results([0.5, -0.5, 0.3, -0.3], [0.5, 0.5, 0.5, -0.5])
            assert result == pytest.approx(0.3, abs=1e-10)
            assert isinstance(result, float)

        with self.subTest("No configurations"):
            assert knit_results([], []) == 0.0

        with self.subTest("Gate-cut weights of a constant observable"):
            qr = QuantumRegister(2)
            coeffs = [weight for _, weight in cut_cnot(qr[0], qr[1])]
            assert knit_results([1.0] * 4, coeffs) == pytest.approx(1.0)

        with self.subTest("Mismatching lengths"):
            with pytest.raises(ValueError) as e_info:
                knit_results([0.1, 0.2], [1.0])
            assert e_info.value.args[0] == (
                "The number of expectation values (2) must equal the number of "
                "coefficients (1)."
            )

    def test_knit_fragment_results(self):
        with self.subTest("Products of fragment estimates"):
            result = knit_fragment_results([1.0, 0.5], [0.8, 1.0], [0.5, 0.5])
            assert result == pytest.approx(0.65)

        with self.subTest("Mismatching fragment lengths"):
            with pytest.raises(ValueError) as e_info:
                knit_fragment_results([1.0, 0.5], [0.8], [0.5, 0.5])
            assert e_info.value.args[0] == (
                "The number of prefix expectation values (2) must equal the "
                "number of suffix expectation values (1)."
            )

        with self.subTest("Mismatching coefficient length"):
            with pytest.raises(ValueError):
                knit_fragment_results([1.0, 0.5], [0.8, 1.0], [0.5])

    @data(
        (0, 0, 1.0),
        (1, 0, 4.0),
        (2, 0, 16.0),
        (0, 1, 3.0),
        (2, 1, 48.0),
    )
    @unpack
    def test_estimate_cutting_overhead(self, num_wire_cuts, num_gate_cuts, expected):
        assert estimate_cutting_overhead(num_wire_cuts, num_gate_cuts) == expected

    @data((-1, 0), (0, -2))
    @unpack
    def test_estimate_cutting_overhead_negative(self, num_wire_cuts, num_gate_cuts):
        with pytest.raises(ValueError) as e_info:
            estimate_cutting_overhead(num_wire_cuts, num_gate_cuts)
        assert "must be non-negative" in e_info.value.args[0]

    @data(
        (0.5, 4.0, 64),
        (1.0, 16.0, 256),
        (0.3, 1.0, 11),
    )
    @unpack
    def test_estimate_shots(self, target_precision, overhead, expected):
        assert estimate_shots(target_precision, overhead) == expected

    @data(0, -0.1)
    def test_estimate_shots_invalid_precision(self, target_precision):
        with pytest.raises(ValueError) as e_info:
            estimate_shots(target_precision, 4.0)
        assert e_info.value.args[0] == (
            f"target_precision must be positive (got {target_precision})."
        )
