"""
Domain errors for lazyacc.

There is exactly one: DivisionByZero, raised while evaluating a chain.
Building a chain never fails on numeric grounds.
"""

from typing import Optional

from lazyacc.operations import Operation


class DivisionByZero(ZeroDivisionError):
    """
    Raised by evaluate() when a DIVIDE step has a zero operand.

    Raised for every numeric type, floats included: a zero divisor
    never yields inf or NaN.

    Properties:
        index: 0-based position of the failing step in the chain
        operation: The failing Operation record
    """

    def __init__(self, index: int, operation: Optional[Operation] = None):
        self.index = index
        self.operation = operation
        super().__init__(f"Division by zero at step {index + 1}: {operation}")
