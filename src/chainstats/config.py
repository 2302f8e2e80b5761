"""
Reader configuration.

Configuration is a plain dict with lowercase underscore keys:
- path: File holding one chain per column (required)
- skip_rows: Lines to skip before the numeric rows (default 0)
- n_rows: Number of numeric rows to read, None for all (default None)
- delimiter: Field separator (default ',')
"""

from typing import Any, Dict


def clean_config(reader_config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Cleans the config dict and sets defaults.
    All config keys use lowercase with underscores.
    """
    reader_config.setdefault('skip_rows', 0)
    reader_config.setdefault('n_rows', None)
    reader_config.setdefault('delimiter', ',')
    return reader_config


def validate_config(reader_config: Dict[str, Any]) -> None:
    """
    Validates that a reader configuration is sensible.

    Args:
        reader_config: Configuration dictionary

    Raises:
        ValueError: If configuration is invalid (all problems reported together)
    """
    errors = []

    if 'path' not in reader_config:
        errors.append("Missing required config key: 'path'")

    if 'skip_rows' in reader_config:
        skip_rows = reader_config['skip_rows']
        if not isinstance(skip_rows, int) or isinstance(skip_rows, bool) or skip_rows < 0:
            errors.append(f"skip_rows must be an integer >= 0, got {skip_rows!r}")

    if reader_config.get('n_rows') is not None:
        n_rows = reader_config['n_rows']
        if not isinstance(n_rows, int) or isinstance(n_rows, bool) or n_rows < 0:
            errors.append(f"n_rows must be an integer >= 0 or None, got {n_rows!r}")

    if 'delimiter' in reader_config:
        delimiter = reader_config['delimiter']
        if not isinstance(delimiter, str) or len(delimiter) != 1 or delimiter in '\r\n':
            errors.append(f"delimiter must be a single non-newline character, got {delimiter!r}")

    if errors:
        raise ValueError("Invalid reader configuration:\n  " + "\n  ".join(errors))
