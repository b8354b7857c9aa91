"""
Loaders Package
===============

Reads a pallet tag spreadsheet into header-keyed records.

Usage:
    from loaders import TagSheetLoader

    sheet = TagSheetLoader("TAG - QUIMIDROGA - CONT # 03.xlsx").run_import()
    for record in sheet.records:
        ...
"""

from .sheet_loader import (
    SheetParseError,
    SheetReadError,
    TagSheetLoader,
    build_records,
    detect_header_row,
)

__all__ = [
    "TagSheetLoader",
    "SheetReadError",
    "SheetParseError",
    "detect_header_row",
    "build_records",
]
