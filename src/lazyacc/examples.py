"""
Example chain builder.

Builds the canonical lazy-evaluation chain:
    start at 0, add 5, subtract 2, multiply by 2, divide by 3
which evaluates to (((0 + 5) - 2) * 2) / 3 == 2.0.
"""
from lazyacc.accumulator import Accumulator, create


def build_example_chain(initial=0) -> Accumulator:
    return create(initial).add(5).subtract(2).multiply(2).divide(3)
