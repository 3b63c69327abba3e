"""
Deferred Arithmetic Accumulator

An Accumulator holds a numeric seed and an ordered chain of pending
operations. Appending an operation records it and returns a NEW
accumulator; nothing is computed until evaluate() forces the chain.

Two phases, kept separate:
    - Build: create/add/subtract/multiply/divide (pure, O(1), never fails
      on numeric grounds, never evaluates)
    - Force: evaluate (the only place a DivisionByZero can surface)

ARCHITECTURAL RULE:
    Accumulators are immutable values.
    Appends share the prefix chain structurally; a prefix is never
    mutated, so chains forked from a common prefix stay independent.
"""

from dataclasses import dataclass, field
from numbers import Number
from typing import Iterator, Optional, Tuple

from lazyacc.errors import DivisionByZero
from lazyacc.operations import Operation, OperationKind


def _check_number(value, role: str) -> None:
    if isinstance(value, bool) or not isinstance(value, Number):
        raise TypeError(f"{role} must be a number, got {type(value).__name__}")


@dataclass(frozen=True, eq=False)
class _Link:
    """One cell of the persistent operation chain (newest cell first)."""

    operation: Operation
    previous: Optional["_Link"]
    length: int


@dataclass(frozen=True, eq=False)
class Accumulator:
    """
    Immutable seed plus pending operation chain.

    Example:
        Accumulator(0).add(5).subtract(2).multiply(2).divide(3)

    Evaluates to (((0 + 5) - 2) * 2) / 3 == 2.0.

    Properties:
        initial: The seed value, set once at construction
        operations: Tuple of Operation records, oldest first

    IMPORTANT:
        This object is immutable (frozen=True).
        Reading initial/operations never evaluates the chain.
        _tail is internal and keyword-only; build chains through the
        append methods.
    """

    initial: Number
    _tail: Optional[_Link] = field(default=None, repr=False, kw_only=True)

    def __post_init__(self):
        _check_number(self.initial, "initial")

    # =========================================================================
    # BUILD PHASE
    # =========================================================================

    def _append(self, kind: OperationKind, operand: Number) -> "Accumulator":
        _check_number(operand, "operand")
        link = _Link(Operation(kind, operand), self._tail, len(self) + 1)
        return Accumulator(self.initial, _tail=link)

    def add(self, operand: Number) -> "Accumulator":
        return self._append(OperationKind.ADD, operand)

    def subtract(self, operand: Number) -> "Accumulator":
        return self._append(OperationKind.SUBTRACT, operand)

    def multiply(self, operand: Number) -> "Accumulator":
        return self._append(OperationKind.MULTIPLY, operand)

    def divide(self, operand: Number) -> "Accumulator":
        """Record a division. A zero operand is accepted here and fails on evaluate()."""
        return self._append(OperationKind.DIVIDE, operand)

    def then(self, operation: Operation) -> "Accumulator":
        """Append an already-built Operation record."""
        return self._append(operation.kind, operation.operand)

    # =========================================================================
    # INSPECTION
    # =========================================================================

    @property
    def operations(self) -> Tuple[Operation, ...]:
        ops = []
        link = self._tail
        while link is not None:
            ops.append(link.operation)
            link = link.previous
        ops.reverse()
        return tuple(ops)

    def __len__(self) -> int:
        return self._tail.length if self._tail is not None else 0

    def __iter__(self) -> Iterator[Operation]:
        return iter(self.operations)

    def __eq__(self, other):
        if not isinstance(other, Accumulator):
            return NotImplemented
        if self._tail is other._tail:
            return self.initial == other.initial
        return (
            self.initial == other.initial
            and len(self) == len(other)
            and self.operations == other.operations
        )

    def __hash__(self):
        return hash((self.initial, self.operations))

    def __repr__(self) -> str:
        ops = ", ".join(str(op) for op in self.operations)
        return f"Accumulator(initial={self.initial!r}, operations=[{ops}])"

    # =========================================================================
    # FORCE PHASE
    # =========================================================================

    def evaluate(self) -> Number:
        """
        Fold the chain over the seed, first appended first applied.

        Returns:
            The final running value. Any DIVIDE step promotes to true
            division (int / int gives float).

        Raises:
            DivisionByZero: If a DIVIDE step's operand equals zero
        """
        running = self.initial
        for index, operation in enumerate(self.operations):
            if operation.kind is OperationKind.DIVIDE and operation.operand == 0:
                raise DivisionByZero(index, operation)
            running = operation.apply(running)
        return running


def create(initial: Number) -> Accumulator:
    """Return an accumulator with the given seed and no pending operations."""
    return Accumulator(initial)


def add(acc: Accumulator, operand: Number) -> Accumulator:
    return acc.add(operand)


def subtract(acc: Accumulator, operand: Number) -> Accumulator:
    return acc.subtract(operand)


def multiply(acc: Accumulator, operand: Number) -> Accumulator:
    return acc.multiply(operand)


def divide(acc: Accumulator, operand: Number) -> Accumulator:
    return acc.divide(operand)


def evaluate(acc: Accumulator) -> Number:
    return acc.evaluate()
