"""
Normalizers Package
===================

Maps drifting spreadsheet headers onto canonical pallet tag fields and
parses the derived values (address, container number, dimensions, weight).
"""

from .field_resolver import resolve
from .field_parsers import (
    extract_container_number,
    format_weight,
    parse_address,
    parse_dimensions,
)
from .tag_normalizer import normalize_record

__all__ = [
    "resolve",
    "parse_address",
    "extract_container_number",
    "parse_dimensions",
    "format_weight",
    "normalize_record",
]
