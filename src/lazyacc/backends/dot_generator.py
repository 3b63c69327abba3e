"""
Graphviz DOT diagram generator for lazyacc chains.

Converts an Accumulator into a linear DOT pipeline:

    SEED -> step1 -> step2 -> ... -> RESULT

Supports two modes:
    - SIMPLE: One node per operation
    - DETAILED: Step numbers, plus zero-divisor steps highlighted

The chain is never evaluated; the RESULT node is a placeholder.
"""

from enum import Enum
from pathlib import Path
from typing import List, Union

from lazyacc.accumulator import Accumulator
from lazyacc.operations import Operation, OperationKind


class DotMode(Enum):
    """Visualization modes for DOT output."""
    SIMPLE = "simple"
    DETAILED = "detailed"


def _escape_dot_string(s: str) -> str:
    """Escape special characters for DOT labels."""
    if not s:
        return '""'
    # Escape backslashes first
    s = s.replace('\\', '\\\\')
    s = s.replace('"', '\\"')
    s = s.replace('\n', '\\n')
    return f'"{s}"'


def _is_zero_divisor(op: Operation) -> bool:
    return op.kind is OperationKind.DIVIDE and op.operand == 0


def generate_dot(acc: Accumulator, mode: DotMode = DotMode.SIMPLE) -> str:
    """
    Generate Graphviz DOT format for a pending chain.

    Args:
        acc: Accumulator to visualize
        mode: Visualization mode (SIMPLE, DETAILED)

    Returns:
        String containing DOT graph definition
    """
    lines: List[str] = []

    lines.append("digraph chain {")
    lines.append("  rankdir=LR;")
    lines.append("  node [shape=box, style=filled, fillcolor=lightblue];")

    seed_label = _escape_dot_string(f"initial = {acc.initial}")
    lines.append(f"  SEED [shape=ellipse, fillcolor=lightgreen, label={seed_label}];")

    previous = "SEED"
    for index, op in enumerate(acc.operations, start=1):
        node_id = f"step{index}"
        label = f"{op.kind.value} {op.operand}"
        attrs = []
        if mode == DotMode.DETAILED:
            label = f"#{index}: {label}"
            if _is_zero_divisor(op):
                label += "\ndivision by zero"
                attrs.append("fillcolor=salmon")
        attrs.append(f"label={_escape_dot_string(label)}")
        lines.append(f"  {node_id} [{', '.join(attrs)}];")
        lines.append(f"  {previous} -> {node_id};")
        previous = node_id

    lines.append('  RESULT [shape=doublecircle, fillcolor=lightyellow, label="evaluate()"];')
    lines.append(f"  {previous} -> RESULT [style=dashed];")
    lines.append("}")

    return "\n".join(lines)


def save_dot_file(acc: Accumulator, filepath: Union[str, Path], mode: DotMode = DotMode.SIMPLE) -> None:
    """Write the DOT rendering of a chain to a file."""
    Path(filepath).write_text(generate_dot(acc, mode=mode) + "\n", encoding="utf-8")
