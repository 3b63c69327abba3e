"""
Tests for the Chain Inspector.

Tests verify that the inspector correctly:
    - Counts operations per kind
    - Flags zero divisors without evaluating
    - Detects floating point entering the chain
    - Reports warnings
"""

from lazyacc import create, OperationKind
from lazyacc.examples import build_example_chain
from lazyacc.inspector import inspect_chain


def test_example_chain_report():
    report = inspect_chain(build_example_chain())

    assert report.initial == 0
    assert report.length == 4
    assert report.kind_counts[OperationKind.ADD] == 1
    assert report.kind_counts[OperationKind.DIVIDE] == 1
    assert report.has_division
    assert not report.will_fail
    assert not report.uses_float


def test_empty_chain():
    report = inspect_chain(create(3))
    assert report.length == 0
    assert all(count == 0 for count in report.kind_counts.values())
    assert any("empty" in w for w in report.warnings)


def test_zero_divisors_flagged_without_evaluating():
    acc = create(1).divide(0).add(1).divide(0.0)
    report = inspect_chain(acc)

    assert report.will_fail
    assert report.zero_divisor_indices == [0, 2]
    assert "Division by zero at step 1 will fail on evaluation" in report.warnings
    assert "Division by zero at step 3 will fail on evaluation" in report.warnings


def test_float_detection():
    assert inspect_chain(create(1.5)).uses_float
    assert inspect_chain(create(1).multiply(0.5)).uses_float
    assert not inspect_chain(create(1).multiply(2)).uses_float


def test_division_warning_only_when_safe():
    report = inspect_chain(create(4).divide(2))
    assert any("promotes int operands to float" in w for w in report.warnings)


def test_warnings_deduplicated():
    report = inspect_chain(create(1))
    report.add_warning("x")
    report.add_warning("x")
    assert report.warnings.count("x") == 1
