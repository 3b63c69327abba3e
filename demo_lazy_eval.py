#!/usr/bin/env python3
"""
Demo: build a deferred chain, inspect it, render it, then force it.
"""

from lazyacc import DivisionByZero
from lazyacc.backends import DotMode, generate_dot, render_infix
from lazyacc.examples import build_example_chain
from lazyacc.inspector import inspect_chain
from lazyacc.serialization import accumulator_to_yaml


def show(acc):
    report = inspect_chain(acc)
    print(f"  Chain:      {acc!r}")
    print(f"  Infix:      {render_infix(acc)}")
    print(f"  Steps:      {report.length}")
    for warning in report.warnings:
        print(f"  ⚠️  {warning}")
    try:
        print(f"  Result:     {acc.evaluate()}")
    except DivisionByZero as e:
        print(f"  Failed:     {e}")


def main():
    acc = build_example_chain()

    print("=" * 70)
    print("LAZY EVALUATION DEMO")
    print("=" * 70)

    print("\nExample chain (nothing computed yet):")
    show(acc)

    print("\nForked chain ending in a zero divisor:")
    show(acc.divide(0))

    print("\nYAML:")
    print(accumulator_to_yaml(acc))

    print("DOT (detailed):")
    print(generate_dot(acc.divide(0), mode=DotMode.DETAILED))


if __name__ == "__main__":
    main()
