"""Helper utility functions for the Pallet Tag Generator."""

from typing import Any

import numpy as np
import pandas as pd


def is_blank(val) -> bool:
    """
    Check if value is considered empty.

    Returns True if value is:
    - NaN / None
    - Empty string ""
    - String containing only whitespace
    - String "nan" (case-insensitive)

    Args:
        val: Value to check (any type)

    Returns:
        True if value is considered empty, False otherwise
    """
    if val is None:
        return True
    if isinstance(val, str):
        stripped = val.strip()
        return stripped == "" or stripped.lower() == "nan"
    try:
        return bool(pd.isna(val))
    except (TypeError, ValueError):
        # array-likes have no single truth value; they are not blank cells
        return False


def stringify(val: Any) -> str:
    """
    Convert a cell value to display text.

    Whole-number floats lose their trailing ".0" so that a numeric cell
    holding 725 prints as "725", the way spreadsheet tools show it.

    Args:
        val: Cell value (str, int, float, numpy scalar, None, ...)

    Returns:
        Display string, "" for blank cells

    Examples:
        >>> stringify(725.0)
        '725'
        >>> stringify(12.5)
        '12.5'
        >>> stringify(None)
        ''
    """
    if val is None:
        return ""
    if isinstance(val, str):
        return val
    if isinstance(val, (bool, np.bool_)):
        return "true" if val else "false"
    if isinstance(val, (int, np.integer)):
        return str(int(val))
    if isinstance(val, (float, np.floating)):
        f = float(val)
        if np.isnan(f):
            return ""
        return str(int(f)) if f.is_integer() else str(f)
    if is_blank(val):
        return ""
    return str(val)


def clean_header(val: Any) -> str:
    """
    Clean a raw header cell for alias matching.

    Only surrounding whitespace is removed; trailing colons such as in
    "Size MM:" are kept because they take part in matching.

    Examples:
        >>> clean_header("  Size MM: ")
        'Size MM:'
        >>> clean_header(None)
        ''
    """
    return stringify(val).strip()
