"""Alias-driven lookup of canonical fields in a header-keyed record."""

from typing import Any, Mapping, Sequence

from utils.helpers import is_blank, stringify


def _norm(s: str) -> str:
    return s.lower().strip()


def _header_matches(key: str, alias: str) -> bool:
    k = _norm(key)
    a = _norm(alias)
    return k == a or k == a + ":" or k.replace(":", "") == a.replace(":", "")


def resolve(record: Mapping[str, Any], aliases: Sequence[str], default: str = "") -> str:
    """
    Return the first non-empty value found under any of the given aliases.

    For each alias in order, an exact key match is tried first. Failing
    that, record keys are scanned in order for one equal to the alias
    ignoring case, surrounding whitespace and colons. Blank values never
    match.

    Args:
        record: Header-keyed row
        aliases: Accepted header spellings, highest priority first
        default: Returned when no alias yields a value

    Returns:
        The matched value as a string, or ``default``

    Examples:
        >>> resolve({"SIZE MM:": 1200}, ("Size MM",))
        '1200'
        >>> resolve({}, ("Size MM",))
        ''
    """
    if not isinstance(record, Mapping):
        return default

    for alias in aliases:
        if alias in record and not is_blank(record[alias]):
            return stringify(record[alias])

        for key, value in record.items():
            if _header_matches(str(key), alias) and not is_blank(value):
                return stringify(value)

    return default
