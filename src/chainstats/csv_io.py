"""
Simplified delimited-text reader for sampler output.

Intended for test fixtures and demos only: there is no header, quoting or
comment handling, and every field is assumed to be numeric. Column j of the
file becomes chain j.
"""

from itertools import islice
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np

from .config import clean_config, validate_config

import logging
logger = logging.getLogger('chainstats')


def _parse_field(field: str, path: Path, line_no: int, idx: int) -> float:
    # float() also accepts padding and digit separators ("1_000"); neither is a number here
    bad = ValueError(f"{path}:{line_no}: field {idx} is not a number: {field!r}")
    if field != field.strip() or '_' in field:
        raise bad
    try:
        return float(field)
    except ValueError:
        raise bad from None


def read_csv(path, skip_rows: int = 0, n_rows: Optional[int] = None, delimiter: str = ',') -> List[np.ndarray]:
    """
    Read a delimited file into a chain set, one chain per column.

    Args:
        path: File to read
        skip_rows: Number of lines to skip before the numeric rows, e.g. 1
                   for a header line
        n_rows: Number of rows to read. Use to take a subset of rows or to
                stop before trailing non-numeric lines (Stan output files end
                with comment lines). None reads to the end of the file.
        delimiter: Field separator

    Returns:
        List of float64 arrays, one per column

    Raises:
        FileNotFoundError: If path does not exist
        ValueError: If a field is not a number
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Chain file not found: {path}")

    columns: List[List[float]] = []
    stop = None if n_rows is None else skip_rows + n_rows

    with path.open('r') as f:
        for line_no, line in enumerate(islice(f, skip_rows, stop), start=skip_rows + 1):
            for idx, field in enumerate(line.rstrip('\r\n').split(delimiter)):
                if idx >= len(columns):
                    columns.append([])
                columns[idx].append(_parse_field(field, path, line_no, idx))

    chains = [np.array(col, dtype=np.float64) for col in columns]
    logger.info(f"Read {len(chains)} chain(s) from {path}")
    return chains


def load_chains(reader_config: Dict[str, Any]) -> List[np.ndarray]:
    """
    Read a chain set as described by a reader configuration dict.

    See chainstats.config for the recognized keys.
    """
    reader_config = clean_config(dict(reader_config))
    validate_config(reader_config)
    return read_csv(
        reader_config['path'],
        skip_rows=reader_config['skip_rows'],
        n_rows=reader_config['n_rows'],
        delimiter=reader_config['delimiter'],
    )
