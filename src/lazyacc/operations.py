"""
Operation records for deferred arithmetic.

An operation is plain data: a kind tag plus one numeric operand.
Recording operations as data (rather than closures) keeps a chain
inspectable, serializable and renderable before any arithmetic runs.

ARCHITECTURAL RULE:
    Operation.apply performs exactly one fold step.
    It does NOT check for zero divisors (belongs in the evaluator).
"""

from dataclasses import dataclass
from enum import Enum
from numbers import Number


class OperationKind(Enum):
    """
    The four deferred arithmetic steps.

    Values are the infix symbols, used by the rendering backends.
    """

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @classmethod
    def from_name(cls, name: str) -> "OperationKind":
        """
        Resolve a kind from its name ("add", "Divide") or symbol ("/").

        Raises:
            ValueError: If the name matches no kind
        """
        key = name.strip()
        for kind in cls:
            if key.upper() == kind.name or key == kind.value:
                return kind
        raise ValueError(f"Unknown operation: {name!r}")


@dataclass(frozen=True)
class Operation:
    """
    A single pending arithmetic step.

    Example:
        Operation(OperationKind.MULTIPLY, 2)

    Properties:
        kind: OperationKind enum
        operand: Right-hand operand of the step

    IMPORTANT:
        This object is immutable (frozen=True).
        Building one never evaluates anything.
    """

    kind: OperationKind
    operand: Number

    def apply(self, running: Number) -> Number:
        if self.kind is OperationKind.ADD:
            return running + self.operand
        if self.kind is OperationKind.SUBTRACT:
            return running - self.operand
        if self.kind is OperationKind.MULTIPLY:
            return running * self.operand
        # True division: int / int promotes to float.
        return running / self.operand

    def __str__(self) -> str:
        return f"{self.kind.name.lower()}({self.operand})"
