"""
PDF Exporter Module
===================

Assembles pallet tag pages into one document and renders it with reportlab.

This module handles:
- Loading the shared logo once (path or URL), tolerating its absence
- Laying out one page per record, in input order
- Rendering the draw instructions onto a 152.4mm x 101.6mm PDF
- Writing <input stem>.pdf only after the whole document rendered
"""

import io
import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional

import requests
from PIL import Image
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from builders.layout_builder import PalletTagLayoutBuilder, build_page_context
from config import LOGO_HTTP_TIMEOUT, LOGO_MAX_HEIGHT, LOGO_SOURCE, OUTPUT_EXTENSION
from models import DrawOp, ImageOp, LineOp, Logo, PageContext, TextOp


def load_logo(source: Optional[str], max_height: float = LOGO_MAX_HEIGHT) -> Optional[Logo]:
    """
    Load the logo image from a filesystem path or an http(s) URL.

    The draw height is fixed at ``max_height`` mm and the width follows
    the image's aspect ratio.

    Args:
        source: Path or URL of the image, None to skip
        max_height: Draw height in millimetres

    Returns:
        Logo, or None when the image is missing or unreadable
    """
    if not source:
        return None
    try:
        if str(source).lower().startswith(("http://", "https://")):
            resp = requests.get(source, timeout=LOGO_HTTP_TIMEOUT)
            resp.raise_for_status()
            data = resp.content
        else:
            data = Path(source).read_bytes()
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            px_width, px_height = img.size
    except (OSError, requests.RequestException) as e:
        logging.warning("Could not load logo %s: %s", source, e)
        return None

    if not px_width or not px_height:
        logging.warning("Could not load logo %s: empty image", source)
        return None

    logging.info("Logo loaded successfully")
    return Logo(data=data, width=max_height * px_width / px_height, height=max_height)


class PalletTagDocument:
    """
    A laid-out pallet tag document.

    Attributes:
        source_path: Input spreadsheet path (output name derives from it)
        ctx: Page constants shared by every page
        logo: Logo drawn on every page, or None
        pages: One draw-instruction list per record, in input order
    """

    def __init__(self, source_path, ctx: PageContext, pages: List[List[DrawOp]],
                 logo: Optional[Logo] = None):
        self.source_path = Path(source_path)
        self.ctx = ctx
        self.pages = pages
        self.logo = logo

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def output_path(self, output_dir=None) -> Path:
        """<input stem>.pdf, beside the input unless ``output_dir`` is given."""
        folder = Path(output_dir) if output_dir else self.source_path.parent
        return folder / f"{self.source_path.stem}{OUTPUT_EXTENSION}"

    def _draw_ops(self, pdf: canvas.Canvas, ops: List[DrawOp], image: Optional[ImageReader]):
        page_height = self.ctx.page_height
        for op in ops:
            if isinstance(op, TextOp):
                pdf.setFont(op.font, op.size)
                pdf.drawString(op.x * mm, (page_height - op.y) * mm, op.text)
            elif isinstance(op, ImageOp):
                if image is None:
                    continue
                pdf.drawImage(image, op.x * mm, (page_height - op.y - op.height) * mm,
                              width=op.width * mm, height=op.height * mm)
            elif isinstance(op, LineOp):
                pdf.setLineWidth(op.width * mm)
                pdf.line(op.x1 * mm, (page_height - op.y1) * mm,
                         op.x2 * mm, (page_height - op.y2) * mm)

    def render(self) -> bytes:
        """
        Render every page to PDF bytes.

        The first record draws on the canvas's initial page; each later
        record starts a new page.
        """
        buf = io.BytesIO()
        pdf = canvas.Canvas(buf, pagesize=(self.ctx.page_width * mm, self.ctx.page_height * mm))
        pdf.setTitle(self.source_path.stem)

        image = ImageReader(io.BytesIO(self.logo.data)) if self.logo else None
        for index, ops in enumerate(self.pages):
            if index > 0:
                pdf.showPage()
            self._draw_ops(pdf, ops, image)

        pdf.save()
        return buf.getvalue()

    def save(self, output_dir=None) -> Path:
        """
        Render and write the PDF.

        Returns:
            Path of the written file
        """
        data = self.render()
        out_file = self.output_path(output_dir)
        out_file.parent.mkdir(parents=True, exist_ok=True)
        out_file.write_bytes(data)
        logging.info("PDF generated successfully with %d page(s): %s", self.page_count, out_file)
        return out_file


class PalletTagAssembler:
    """
    Build one document holding one pallet tag page per record.

    The logo is loaded once and reused for every page.
    """

    def __init__(self, logo_source: Optional[str] = LOGO_SOURCE, ctx: Optional[PageContext] = None):
        """
        Initialize assembler.

        Args:
            logo_source: Logo path or URL; None disables the logo
            ctx: Page constants (defaults to the 6" x 4" tag stock)
        """
        self.logo_source = logo_source
        self.ctx = ctx or build_page_context()
        self._logo: Optional[Logo] = None
        self._logo_loaded = False

    def load_logo(self) -> Optional[Logo]:
        """Load and cache the logo. A failed load is cached too."""
        if not self._logo_loaded:
            self._logo = load_logo(self.logo_source)
            self._logo_loaded = True
        return self._logo

    def build(self, records: Iterable[Mapping[str, Any]], filename) -> Optional[PalletTagDocument]:
        """
        Lay out every record onto its own page.

        Args:
            records: Header-keyed rows, in output page order
            filename: Source spreadsheet path or name

        Returns:
            PalletTagDocument, or None when there are no records
        """
        records = list(records)
        name = Path(filename).name
        if not records:
            logging.warning("No data rows found in %s", name)
            return None

        logo = self.load_logo()
        builder = PalletTagLayoutBuilder(self.ctx, logo)

        logging.info("Generating PDF with %d page(s)", len(records))
        pages = [builder.build_page(record, name) for record in records]
        return PalletTagDocument(filename, self.ctx, pages, logo)
