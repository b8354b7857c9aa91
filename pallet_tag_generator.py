"""
Pallet Tag Generator
====================

Converts a pallet tag spreadsheet into a PDF with one 6" x 4" tag per row.

Quick Start:
    ```python
    from pallet_tag_generator import convert_file

    pdf_path = convert_file("TAG - QUIMIDROGA - CONT # 03.xlsx")
    ```

Command line:
    pallet-tags "TAG - QUIMIDROGA - CONT # 03.xlsx" --output-dir out/
"""

from __future__ import annotations

import argparse
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional

from config import FLAG_DEBUG, LOGO_SOURCE
from exporters import PalletTagAssembler
from loaders import SheetParseError, SheetReadError, TagSheetLoader
from utils.step_timer import StepTimer


def convert_file(input_path, output_dir=None, logo_source: Optional[str] = LOGO_SOURCE,
                 timer: Optional[StepTimer] = None) -> Optional[Path]:
    """
    Run the full conversion: read → lay out → render → save.

    The sheet and the logo are loaded concurrently; both finish before
    layout starts. Nothing is written unless every page rendered.

    Args:
        input_path: .xlsx / .csv file
        output_dir: Folder for the PDF (defaults to the input's folder)
        logo_source: Logo path or URL; None disables the logo
        timer: Optional StepTimer collecting step durations

    Returns:
        Path of the written PDF, or None when the sheet has no data rows

    Raises:
        SheetReadError: If the input cannot be read
        SheetParseError: If the input is not a valid table
    """
    timer = timer or StepTimer()
    loader = TagSheetLoader(input_path)
    assembler = PalletTagAssembler(logo_source=logo_source)

    with timer.timeit("1) read sheet + logo"):
        with ThreadPoolExecutor(max_workers=2) as pool:
            sheet_future = pool.submit(loader.run_import)
            logo_future = pool.submit(assembler.load_logo)
            sheet = sheet_future.result()
            logo_future.result()

    with timer.timeit("2) layout"):
        document = assembler.build(sheet.records, loader.path)
    if document is None:
        return None

    with timer.timeit("3) render + save"):
        return document.save(output_dir)


# ---- CLI ----
def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Convert an Excel pallet tag sheet to PDF")
    ap.add_argument("input", help="Path to the .xlsx / .csv pallet tag sheet")
    ap.add_argument("--output-dir", help="Folder for the PDF (default: beside the input)")
    ap.add_argument("--logo", default=LOGO_SOURCE, help="Logo image path or URL")
    ap.add_argument("--no-logo", action="store_true", help="Render tags without the logo")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if (args.verbose or FLAG_DEBUG) else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    timer = StepTimer()
    try:
        out_file = convert_file(
            args.input,
            output_dir=args.output_dir,
            logo_source=None if args.no_logo else args.logo,
            timer=timer,
        )
    except (SheetReadError, SheetParseError, OSError) as e:
        logging.error("Error converting file: %s", e)
        return 1

    if out_file is None:
        logging.warning("Nothing to convert: no data rows in %s", args.input)
    timer.log_summary()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
