# This code is a Qiskit project.

# (C) Copyright IBM 2024.

# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Tests for QPDBasis class."""

import unittest

import pytest
from qiskit.circuit.library.standard_gates import HGate, XGate, ZGate

from qpd_knitting.qpd import QPDBasis


class TestQPDBasis(unittest.TestCase):
    def setUp(self):
        self.maps = [
            ([], []),
            ([XGate()], [XGate()]),
            ([HGate()], [ZGate()]),
        ]
        self.coeffs = [0.5, -0.25, 0.25]

    def test_properties(self):
        basis = QPDBasis(self.maps, self.coeffs)
        assert basis.maps is self.maps
        assert basis.num_terms == 3
        assert basis.coeffs == (0.5, -0.25, 0.25)

    def test_one_sided_maps(self):
        basis = QPDBasis([([],), ([XGate()],)], [1, -1])
        assert basis.num_terms == 2
        assert basis.coeffs == (1.0, -1.0)
        assert all(isinstance(c, float) for c in basis.coeffs)

    def test_invalid_maps(self):
        with self.subTest("Empty maps"):
            with pytest.raises(ValueError) as e_info:
                QPDBasis([], [])
            assert e_info.value.args[0] == (
                "Number of maps passed to QPDBasis must be nonzero."
            )

        with self.subTest("Too many sides"):
            with pytest.raises(ValueError) as e_info:
                QPDBasis([([], [], [])], [1.0])
            assert e_info.value.args[0] == "QPDBasis supports at most two sides."

        with self.subTest("Mismatched sides"):
            with pytest.raises(ValueError) as e_info:
                QPDBasis([([], []), ([XGate()],)], [0.5, 0.5])
            assert "Index 1 contains a 1-tuple" in e_info.value.args[0]

        with self.subTest("Coefficients of the wrong length"):
            with pytest.raises(ValueError) as e_info:
                QPDBasis(self.maps, [1.0, 2.0])
            assert e_info.value.args[0] == "Coefficients must be same length as maps."

    def test_coeffs_setter(self):
        basis = QPDBasis(self.maps, self.coeffs)
        basis.coeffs = [1.0, 1.0, -2.0]
        assert basis.coeffs == (1.0, 1.0, -2.0)
        with pytest.raises(ValueError):
            basis.coeffs = [1.0]

    def test_eq(self):
        basis = QPDBasis(self.maps, self.coeffs)
        assert basis == QPDBasis(self.maps, self.coeffs)
        assert basis != QPDBasis(self.maps, [0.5, 0.25, 0.25])
        assert basis != "not a basis"
