"""Derived-value parsers for pallet tag fields.

Every parser tolerates missing or malformed input and falls back to a
fixed default instead of raising.
"""

import re
from typing import Mapping, Any

from config import (
    CONTAINER_ALIASES,
    DEFAULT_CONTAINER_NUMBER,
    DEFAULT_COUNTRY,
    DEFAULT_DIMENSIONS,
    DIMENSIONS_ALIASES,
    HEIGHT_ALIASES,
    LENGTH_ALIASES,
    WIDTH_ALIASES,
)
from models import ParsedAddress, ParsedDimensions
from normalizers.field_resolver import resolve

_DIGITS_RE = re.compile(r"\d+")
_FILENAME_CONT_RE = re.compile(r"CONT\s*#?\s*(\d+)", re.IGNORECASE)
_LEADING_NUMBER_RE = re.compile(r"^\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)")
_DIMENSION_SPLIT_RE = re.compile(r"[xX]")


def parse_address(raw: str, default_country: str = DEFAULT_COUNTRY) -> ParsedAddress:
    """
    Split a composite "customer, street..., country" string.

    Args:
        raw: Address cell text (may be empty)
        default_country: Country used when the string carries none

    Returns:
        ParsedAddress with every field populated (address may be "")

    Examples:
        >>> parse_address("Acme, 12 Main St, Spain")
        ParsedAddress(customer='Acme', address='12 Main St', country='Spain')
        >>> parse_address("Acme, France")
        ParsedAddress(customer='Acme', address='', country='France')
    """
    fallback_country = (default_country or "").strip() or DEFAULT_COUNTRY
    parts = [p.strip() for p in (raw or "").split(",") if p.strip()]

    if len(parts) >= 3:
        return ParsedAddress(customer=parts[0], address=", ".join(parts[1:-1]), country=parts[-1])
    if len(parts) == 2:
        return ParsedAddress(customer=parts[0], address="", country=parts[1])
    return ParsedAddress(customer=parts[0] if parts else "", address="", country=fallback_country)


def extract_container_number(record: Mapping[str, Any], filename: str) -> str:
    """
    Derive the 2-digit container number for a tag.

    Priority:
    1) A container column in the record ("CONT #3" -> "03")
    2) "CONT # NN" in the source filename
    3) "01"

    Args:
        record: Header-keyed row
        filename: Source spreadsheet file name

    Returns:
        Container number, zero-padded to at least 2 characters
    """
    value = resolve(record, CONTAINER_ALIASES)
    if value:
        match = _DIGITS_RE.search(value)
        if match:
            return match.group(0).rjust(2, "0")
        return value.rjust(2, "0")

    match = _FILENAME_CONT_RE.search(filename or "")
    if match:
        return match.group(1).rjust(2, "0")

    return DEFAULT_CONTAINER_NUMBER


def parse_dimensions(record: Mapping[str, Any]) -> ParsedDimensions:
    """
    Resolve pallet length, width and height.

    Separate Length/Width/Height columns are used when all three are
    present. Otherwise a combined "725 X 895 X 2625" column replaces all
    three. If that also fails the fixed defaults are used for all three.
    """
    length = resolve(record, LENGTH_ALIASES)
    width = resolve(record, WIDTH_ALIASES)
    height = resolve(record, HEIGHT_ALIASES)

    if not (length and width and height):
        combined = resolve(record, DIMENSIONS_ALIASES)
        if combined:
            parts = [p.strip() for p in _DIMENSION_SPLIT_RE.split(combined) if p.strip()]
            if len(parts) >= 3:
                length, width, height = parts[0], parts[1], parts[2]

    if not (length and width and height):
        length, width, height = DEFAULT_DIMENSIONS

    return ParsedDimensions(length=length, width=width, height=height)


def format_weight(raw: str) -> str:
    """
    Format a weight to exactly two decimals.

    The leading number of the text is used ("512.3 KG" -> "512.30");
    thousands separators are ignored. Text without a leading number is
    returned unchanged.

    Examples:
        >>> format_weight("12.5")
        '12.50'
        >>> format_weight("N/A")
        'N/A'
    """
    if raw is None:
        return ""
    match = _LEADING_NUMBER_RE.match(raw.replace(",", ""))
    if not match:
        return raw
    return f"{float(match.group(1)):.2f}"
