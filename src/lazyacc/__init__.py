"""
lazyacc — Deferred Arithmetic Accumulator

Operations are recorded, not applied. A chain is built cheaply from a seed
and forced once by evaluate():

    >>> from lazyacc import create
    >>> create(0).add(5).subtract(2).multiply(2).divide(3).evaluate()
    2.0

ARCHITECTURAL GUARANTEE:
------------------------
Building a chain never computes anything and never fails on numeric
grounds. Division by zero surfaces only from evaluate(), as DivisionByZero.
"""

from lazyacc.accumulator import (
    Accumulator,
    add,
    create,
    divide,
    evaluate,
    multiply,
    subtract,
)
from lazyacc.errors import DivisionByZero
from lazyacc.operations import Operation, OperationKind

__version__ = "0.1.0"

__all__ = [
    "Accumulator",
    "DivisionByZero",
    "Operation",
    "OperationKind",
    "add",
    "create",
    "divide",
    "evaluate",
    "multiply",
    "subtract",
]
