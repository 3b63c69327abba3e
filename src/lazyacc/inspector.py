"""
Chain Inspector — read-only diagnostics of a pending chain.

Produces a ChainReport describing an Accumulator WITHOUT evaluating it:
    - Chain length and per-kind operation counts
    - Steps that will raise DivisionByZero when forced
    - Whether floating point enters the computation
    - Warning flags

IMPORTANT: This module never calls evaluate() and never modifies the
accumulator. It only produces reports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from lazyacc.accumulator import Accumulator
from lazyacc.operations import OperationKind


@dataclass
class ChainReport:
    """Inspection report for one accumulator."""

    initial: object
    length: int = 0
    kind_counts: Dict[OperationKind, int] = field(default_factory=dict)
    zero_divisor_indices: List[int] = field(default_factory=list)
    uses_float: bool = False
    has_division: bool = False

    warnings: List[str] = field(default_factory=list)

    @property
    def will_fail(self) -> bool:
        """True if forcing the chain is certain to raise DivisionByZero."""
        return bool(self.zero_divisor_indices)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def inspect_chain(acc: Accumulator) -> ChainReport:
    """
    Inspect an accumulator's pending chain.

    Returns a ChainReport with counts and warnings; the chain is not forced.
    """
    report = ChainReport(initial=acc.initial)
    report.kind_counts = {kind: 0 for kind in OperationKind}
    report.uses_float = isinstance(acc.initial, float)

    for index, operation in enumerate(acc.operations):
        report.length += 1
        report.kind_counts[operation.kind] += 1
        if isinstance(operation.operand, float):
            report.uses_float = True
        if operation.kind is OperationKind.DIVIDE:
            report.has_division = True
            if operation.operand == 0:
                report.zero_divisor_indices.append(index)

    if report.length == 0:
        report.add_warning("Chain is empty; evaluation returns the initial value")

    for index in report.zero_divisor_indices:
        report.add_warning(f"Division by zero at step {index + 1} will fail on evaluation")

    if report.has_division and not report.zero_divisor_indices:
        report.add_warning("Chain contains division; division promotes int operands to float")

    return report
