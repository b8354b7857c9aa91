"""
Builders Package
================

Turns resolved pallet tag records into positioned draw instructions.
"""

from .layout_builder import (
    PalletTagLayoutBuilder,
    build_page_context,
    layout_page,
    text_width,
    wrap_text,
)

__all__ = [
    "PalletTagLayoutBuilder",
    "build_page_context",
    "layout_page",
    "text_width",
    "wrap_text",
]
