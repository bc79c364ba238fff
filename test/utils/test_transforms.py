# This code is a Qiskit project.

# (C) Copyright IBM 2024.

# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Tests for circuit transformation utilities."""

import unittest

from qiskit import QuantumCircuit, QuantumRegister

from qpd_knitting.utils.transforms import (
    circuit_from_instructions,
    instruction_qubit_indices,
    touched_qubit_indices,
)


class TestTransforms(unittest.TestCase):
    def test_touched_qubit_indices(self):
        with self.subTest("Empty circuit"):
            assert touched_qubit_indices(QuantumCircuit(3)) == []

        with self.subTest("Barriers are ignored"):
            qc = QuantumCircuit(3)
            qc.barrier()
            qc.h(1)
            assert touched_qubit_indices(qc) == [1]

        with self.subTest("Order of first use"):
            qc = QuantumCircuit(5)
            qc.h(4)
            qc.cx(2, 4)
            qc.swap(0, 2)
            assert touched_qubit_indices(qc) == [4, 2, 0]

    def test_instruction_qubit_indices(self):
        qr_a = QuantumRegister(2, "a")
        qr_b = QuantumRegister(2, "b")
        qc = QuantumCircuit(qr_a, qr_b)
        qc.cx(qr_b[0], qr_a[1])
        assert instruction_qubit_indices(qc, qc.data[0]) == [2, 1]

    def test_circuit_from_instructions(self):
        qr = QuantumRegister(2, "q")
        qc = QuantumCircuit(qr)
        qc.h(0)
        qc.cx(0, 1)

        with self.subTest("Keeps the registers"):
            new = circuit_from_instructions(qc, qc.data[:1])
            assert new.qregs == qc.qregs
            assert [inst.operation.name for inst in new.data] == ["h"]

        with self.subTest("No aliasing"):
            new = circuit_from_instructions(qc, qc.data)
            assert new == qc
            new.x(1)
            assert len(qc.data) == 2
            assert len(new.data) == 3

        with self.subTest("No instructions"):
            new = circuit_from_instructions(qc, [])
            assert len(new.data) == 0
            assert new.num_qubits == 2
