"""
Reading and writing relationship networks as headered CSV files.

The first line lists the participant names. Row r then holds the weights of
participant r to every participant; only the entries right of the diagonal
are read, the matrix is mirrored from them.
"""

import csv
import logging
import os
from typing import Sequence

import numpy as np

logger = logging.getLogger(__name__)


def _weight(field: str, row: int, column: int) -> int:
    try:
        weight = int(field.strip() or 0)
    except ValueError:
        raise ValueError(f"Row {row + 1}, column {column + 1}: weight {field!r} is not an integer") from None
    if weight < 0:
        raise ValueError(f"Row {row + 1}, column {column + 1}: weight {weight} is negative")
    return weight


def parse_network(lines: Sequence[Sequence[str]]) -> tuple[np.ndarray, list[str]]:
    """Build the symmetric matrix and names from already split CSV rows

    Raises
    ------
    ValueError if the header is missing, a row does not have one field per name,
    there are more rows than names or a weight is not a non-negative integer
    """
    rows = [row for row in lines if any(field.strip() for field in row)]
    if not rows:
        raise ValueError("Empty network file, expected a header of names")
    names = [name.strip() for name in rows[0]]
    size = len(names)
    network = np.zeros((size, size), dtype=np.int64)
    if len(rows) - 1 > size:
        raise ValueError(f"Found {len(rows) - 1} rows for {size} participants")
    for r, row in enumerate(rows[1:]):
        if len(row) != size:
            raise ValueError(f"Please ensure your file has even rows! Row {r + 1} has {len(row)} fields, expected {size}")
        for i in range(r + 1, size):
            network[r, i] = network[i, r] = _weight(row[i], r, i)
    return network, names


def read_network(path: str | os.PathLike) -> tuple[np.ndarray, list[str]]:
    """Read a network CSV file, see `parse_network`"""
    with open(path, newline="", encoding="utf-8-sig") as f:
        network, names = parse_network(list(csv.reader(f)))
    logger.info(f"read {len(names)} participants from {path}")
    return network, names


def write_network(path: str | os.PathLike, network: np.ndarray, names: Sequence[str] | None = None):
    """Write a network in the format read by `read_network`, defaulting names to indices"""
    network = np.asarray(network)
    names = list(names) if names is not None else [str(i) for i in range(len(network))]
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(names)
        writer.writerows(network.tolist())
