"""
Infix renderer: show a pending chain as a fully parenthesised expression.

    create(0).add(5).subtract(2)  ->  "((0 + 5) - 2)"

Read-only; never evaluates.
"""

from lazyacc.accumulator import Accumulator


def _format_number(value) -> str:
    text = str(value)
    if text.startswith("-"):
        return f"({text})"
    return text


def render_infix(acc: Accumulator) -> str:
    expr = str(acc.initial)
    for op in acc.operations:
        expr = f"({expr} {op.kind.value} {_format_number(op.operand)})"
    return expr
