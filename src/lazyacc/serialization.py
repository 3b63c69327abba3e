"""
Serialization helpers for lazyacc accumulators.

Provides lossless JSON/YAML round-trip via intermediate dict representation:

    {"initial": 0, "operations": [{"op": "add", "operand": 5}, ...]}

Only int and float numbers are representable; other numbers (Fraction,
Decimal, complex) raise SerializationError.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from lazyacc.accumulator import Accumulator
from lazyacc.operations import Operation, OperationKind


class SerializationError(Exception):
    """Raised when a payload cannot be turned back into an accumulator."""
    pass


def _check_serializable(value, role: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SerializationError(
            f"{role} must be an int or float to serialize, got {type(value).__name__}"
        )


def operation_to_dict(op: Operation) -> Dict[str, Any]:
    _check_serializable(op.operand, "operand")
    return {"op": op.kind.name.lower(), "operand": op.operand}


def operation_from_dict(d: Dict[str, Any]) -> Operation:
    try:
        kind = OperationKind.from_name(d["op"])
        operand = d["operand"]
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise SerializationError(f"Invalid operation entry {d!r}: {e}") from e
    return Operation(kind=kind, operand=operand)


def accumulator_to_dict(acc: Accumulator) -> Dict[str, Any]:
    _check_serializable(acc.initial, "initial")
    return {
        "initial": acc.initial,
        "operations": [operation_to_dict(op) for op in acc.operations],
    }


def accumulator_from_dict(d: Dict[str, Any]) -> Accumulator:
    if not isinstance(d, dict) or "initial" not in d:
        raise SerializationError("Accumulator payload must be a mapping with an 'initial' key")
    try:
        acc = Accumulator(d["initial"])
        operations = d.get("operations") or []
        if not isinstance(operations, list):
            raise SerializationError("'operations' must be a list")
        for entry in operations:
            acc = acc.then(operation_from_dict(entry))
    except TypeError as e:
        raise SerializationError(str(e)) from e
    return acc


def accumulator_to_json(acc: Accumulator) -> str:
    return json.dumps(accumulator_to_dict(acc), sort_keys=True)


def accumulator_from_json(s: str) -> Accumulator:
    try:
        d = json.loads(s)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e
    return accumulator_from_dict(d)


def accumulator_to_yaml(acc: Accumulator) -> str:
    return yaml.safe_dump(accumulator_to_dict(acc))


def accumulator_from_yaml(s: str) -> Accumulator:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise SerializationError(f"Invalid YAML: {e}") from e
    return accumulator_from_dict(d)
