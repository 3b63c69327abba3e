"""
CSV Parser for lazyacc (raw recipe text -> Accumulator).

CSV Format:
    operation, operand

    initial,0
    add,5
    subtract,2
    multiply,2
    divide,3

Syntax Notes:
    - The first data row must be the seed: initial,<number>
    - Operation names are case-insensitive; symbols (+ - * /) also accepted
    - Rows with an empty operation cell are skipped with a warning
    - Operands that look like integers become int, the rest float
"""

import csv
import warnings
from io import StringIO
from pathlib import Path
from typing import Union

from lazyacc.accumulator import Accumulator
from lazyacc.operations import Operation, OperationKind


REQUIRED_COLUMNS = ("operation", "operand")


class CSVParseError(Exception):
    """Raised when CSV parsing fails."""
    pass


def parse_number(text: str) -> Union[int, float]:
    """
    Parse an operand cell.

    Raises:
        CSVParseError: If the cell is not a number
    """
    text = (text or "").strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise CSVParseError(f"Not a number: {text!r}") from None


def parse_csv(content: str) -> Accumulator:
    """
    Parse CSV recipe content into an Accumulator.

    Args:
        content: CSV text with an 'operation,operand' header

    Returns:
        Accumulator holding the seed and every recorded operation

    Raises:
        CSVParseError: On a missing header, missing seed row,
            unknown operation or non-numeric operand
    """
    reader = csv.DictReader(StringIO(content))

    if reader.fieldnames is None:
        raise CSVParseError("CSV is empty")

    fieldnames = [name.strip().lower() for name in reader.fieldnames]
    missing = [col for col in REQUIRED_COLUMNS if col not in fieldnames]
    if missing:
        raise CSVParseError(f"Missing required columns: {missing}")
    reader.fieldnames = fieldnames

    acc = None
    # Header is line 1
    for row_num, row in enumerate(reader, start=2):
        name = (row.get("operation") or "").strip()
        if not name:
            warnings.warn(f"Skipping row {row_num}: empty operation", UserWarning)
            continue

        try:
            operand = parse_number(row.get("operand"))
        except CSVParseError as e:
            raise CSVParseError(f"Error parsing row {row_num}: {e}") from e

        if acc is None:
            if name.lower() != "initial":
                raise CSVParseError(
                    f"Error parsing row {row_num}: first row must be 'initial', got {name!r}"
                )
            acc = Accumulator(operand)
            continue

        try:
            kind = OperationKind.from_name(name)
        except ValueError as e:
            raise CSVParseError(f"Error parsing row {row_num}: {e}") from e
        acc = acc.then(Operation(kind, operand))

    if acc is None:
        raise CSVParseError("CSV has no 'initial' row")

    return acc


def parse_csv_file(filepath: Union[str, Path]) -> Accumulator:
    """Parse a CSV recipe file into an Accumulator."""
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"CSV file not found: {filepath}")
    return parse_csv(path.read_text(encoding="utf-8"))
