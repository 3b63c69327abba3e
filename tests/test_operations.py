"""
Tests for lazyacc Operation records.

These tests verify:
    - OperationKind name/symbol resolution
    - Operation immutability
    - Single fold steps
"""

import pytest
from lazyacc.operations import Operation, OperationKind


class TestOperationKind:
    """Test kind resolution."""

    def test_four_kinds(self):
        """Exactly four kinds exist."""
        assert {k.name for k in OperationKind} == {"ADD", "SUBTRACT", "MULTIPLY", "DIVIDE"}

    def test_from_name_case_insensitive(self):
        assert OperationKind.from_name("add") is OperationKind.ADD
        assert OperationKind.from_name("Divide") is OperationKind.DIVIDE
        assert OperationKind.from_name(" MULTIPLY ") is OperationKind.MULTIPLY

    def test_from_symbol(self):
        assert OperationKind.from_name("-") is OperationKind.SUBTRACT
        assert OperationKind.from_name("/") is OperationKind.DIVIDE

    def test_unknown_name(self):
        with pytest.raises(ValueError):
            OperationKind.from_name("power")


class TestOperation:
    """Test operation records."""

    def test_operation_immutable(self):
        """Operations should be immutable."""
        op = Operation(OperationKind.ADD, 5)
        with pytest.raises(AttributeError):
            op.operand = 6

    def test_value_equality(self):
        assert Operation(OperationKind.ADD, 5) == Operation(OperationKind.ADD, 5)
        assert Operation(OperationKind.ADD, 5) != Operation(OperationKind.SUBTRACT, 5)

    def test_apply_steps(self):
        assert Operation(OperationKind.ADD, 5).apply(1) == 6
        assert Operation(OperationKind.SUBTRACT, 5).apply(1) == -4
        assert Operation(OperationKind.MULTIPLY, 5).apply(2) == 10
        assert Operation(OperationKind.DIVIDE, 2).apply(5) == 2.5

    def test_divide_promotes_to_float(self):
        """Division of ints yields a float even when exact."""
        result = Operation(OperationKind.DIVIDE, 2).apply(4)
        assert result == 2.0
        assert isinstance(result, float)

    def test_str(self):
        assert str(Operation(OperationKind.MULTIPLY, 2)) == "multiply(2)"
