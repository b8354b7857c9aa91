"""
Exporters Package
=================

This package contains the PDF export functionality for pallet tags.

Classes:
    - PalletTagAssembler: Lays out one page per record into a document
    - PalletTagDocument: Renders and saves the laid-out pages as PDF

Usage:
    from exporters import PalletTagAssembler

    assembler = PalletTagAssembler(logo_source="tri-pack-logo.jpeg")
    document = assembler.build(records, "TAG - QUIMIDROGA - CONT # 03.xlsx")
    if document is not None:
        document.save()
"""

from .pdf_exporter import PalletTagAssembler, PalletTagDocument, load_logo

__all__ = [
    "PalletTagAssembler",
    "PalletTagDocument",
    "load_logo",
]
