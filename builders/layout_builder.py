"""Pallet tag page layout: one record in, one list of draw instructions out."""

from typing import Any, List, Mapping, Optional

from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth

from config import (
    BODY_FONT_SIZE,
    CONTAINER_FONT_SIZE,
    DIMENSION_FONT_SIZE,
    FONT_BOLD,
    FONT_REGULAR,
    LABEL_VALUE_GAP,
    LINE_HEIGHT,
    MAX_ADDRESS_LINES,
    MAX_FILM_LINES,
    ORIGIN_TEXT,
    PAGE_HEIGHT,
    PAGE_MARGIN,
    PAGE_WIDTH,
    RIGHT_COL_OFFSET,
    TITLE_FONT_SIZE,
    TITLE_TEXT,
    WEIGHT_UNIT,
)
from models import DrawOp, ImageOp, LineOp, Logo, PageContext, PalletTag, TextOp
from normalizers.tag_normalizer import normalize_record


def build_page_context(page_width: float = PAGE_WIDTH, page_height: float = PAGE_HEIGHT,
                       margin: float = PAGE_MARGIN) -> PageContext:
    """Compute the per-document layout constants (millimetres)."""
    return PageContext(
        page_width=page_width,
        page_height=page_height,
        margin=margin,
        content_width=page_width - margin * 2,
        left_col=margin,
        right_col=page_width / 2 + RIGHT_COL_OFFSET,
        col_width=(page_width - margin * 2) / 2 - RIGHT_COL_OFFSET,
        label_value_gap=LABEL_VALUE_GAP,
    )


def text_width(text: str, font: str, size: float) -> float:
    """Width of ``text`` in millimetres."""
    return stringWidth(text, font, size) / mm


def wrap_text(text: str, font: str, size: float, max_width: float) -> List[str]:
    """Word-wrap ``text`` to ``max_width`` millimetres."""
    if not text:
        return []
    return simpleSplit(text, font, size, max_width * mm)


class PalletTagLayoutBuilder:
    """
    Lay out pallet tag pages on a fixed canvas.

    Layout runs top to bottom in two columns with a running baseline
    cursor. Every coordinate derives from the PageContext plus fixed
    offsets, so the same record always yields the same instructions.

    Attributes:
        ctx: Shared page constants
        logo: Preloaded logo or None when it could not be loaded
    """

    def __init__(self, ctx: PageContext, logo: Optional[Logo] = None):
        self.ctx = ctx
        self.logo = logo

    # ----------------------
    # Primitives
    # ----------------------
    @staticmethod
    def _text(ops: List[DrawOp], text: str, x: float, y: float, font: str, size: float):
        if text:
            ops.append(TextOp(text=text, x=x, y=y, font=font, size=size))

    def _lines(self, ops: List[DrawOp], lines: List[str], x: float, y: float,
               font: str, size: float):
        for i, line in enumerate(lines):
            self._text(ops, line, x, y + i * LINE_HEIGHT, font, size)

    def _centered_x(self, text: str, font: str, size: float) -> float:
        return (self.ctx.page_width - text_width(text, font, size)) / 2

    # ----------------------
    # Sections
    # ----------------------
    def _draw_header(self, ops: List[DrawOp], tag: PalletTag) -> float:
        """Logo, title and container line. Returns the body start cursor."""
        header_y = self.ctx.margin

        if self.logo is not None:
            ops.append(ImageOp(x=self.ctx.left_col, y=header_y,
                               width=self.logo.width, height=self.logo.height))

        self._text(ops, TITLE_TEXT, self._centered_x(TITLE_TEXT, FONT_BOLD, TITLE_FONT_SIZE),
                   header_y + 3, FONT_BOLD, TITLE_FONT_SIZE)

        cont_text = f"CONT # {tag.container_number}"
        self._text(ops, cont_text, self._centered_x(cont_text, FONT_BOLD, CONTAINER_FONT_SIZE),
                   header_y + 7, FONT_BOLD, CONTAINER_FONT_SIZE)

        return header_y + 13

    def _draw_consignee(self, ops: List[DrawOp], tag: PalletTag, y: float) -> float:
        """LC/PO, customer, street address and country."""
        ctx = self.ctx
        size = BODY_FONT_SIZE

        self._text(ops, "LC / PO #", ctx.left_col, y, FONT_BOLD, size)
        self._text(ops, tag.lc_po, ctx.left_col + ctx.label_value_gap, y, FONT_REGULAR, size)
        y += 4

        self._text(ops, tag.customer, ctx.left_col, y, FONT_BOLD, size)
        y += 4

        address_lines = wrap_text(tag.address, FONT_BOLD, size, ctx.col_width)[:MAX_ADDRESS_LINES]
        self._lines(ops, address_lines, ctx.left_col, y, FONT_BOLD, size)
        y += max(len(address_lines) * LINE_HEIGHT, LINE_HEIGHT)

        self._text(ops, tag.country, ctx.left_col, y, FONT_BOLD, size)
        y += 4
        return y

    def _draw_goods(self, ops: List[DrawOp], tag: PalletTag, y: float) -> float:
        """Invoice number, film description, size and reel count."""
        ctx = self.ctx
        size = BODY_FONT_SIZE

        invoice_label = "PROFORMA INVOICE NUMBER:"
        self._text(ops, invoice_label, ctx.left_col, y, FONT_BOLD, size)
        self._text(ops, tag.invoice_number,
                   ctx.left_col + text_width(invoice_label, FONT_BOLD, size) + 2, y,
                   FONT_REGULAR, size)
        y += 4.5

        self._text(ops, "FILM DESCP:", ctx.left_col, y, FONT_BOLD, size)
        film_lines = wrap_text(tag.film_description, FONT_REGULAR, size,
                               ctx.content_width - 20)[:MAX_FILM_LINES]
        self._lines(ops, film_lines, ctx.left_col + ctx.label_value_gap, y, FONT_REGULAR, size)
        y += max(len(film_lines) * LINE_HEIGHT, 4)

        self._text(ops, "SIZE MM:", ctx.left_col, y, FONT_BOLD, size)
        self._text(ops, tag.size_mm, ctx.left_col + ctx.label_value_gap, y, FONT_REGULAR, size)

        reels_label = "No. OF REELS / PALLET"
        self._text(ops, reels_label, ctx.right_col, y, FONT_BOLD, size)
        self._text(ops, tag.reels,
                   ctx.right_col + text_width(reels_label, FONT_BOLD, size) + 2, y,
                   FONT_REGULAR, size)
        y += 4
        return y

    def _draw_weights(self, ops: List[DrawOp], tag: PalletTag, y: float) -> float:
        """Net and gross weight with their values on one shared x."""
        ctx = self.ctx
        size = BODY_FONT_SIZE
        net_label = "NET WEIGHT (PALLET):"
        gross_label = "GROSS WEIGHT (PALLET):"

        max_label_width = max(text_width(net_label, FONT_BOLD, size),
                              text_width(gross_label, FONT_BOLD, size))
        value_x = ctx.left_col + max_label_width + 3

        for label, value in ((net_label, tag.net_weight), (gross_label, tag.gross_weight)):
            self._text(ops, label, ctx.left_col, y, FONT_BOLD, size)
            self._text(ops, value, value_x, y, FONT_REGULAR, size)
            self._text(ops, WEIGHT_UNIT, value_x + text_width(value, FONT_REGULAR, size) + 2, y,
                       FONT_REGULAR, size)
            y += 4
        return y

    def _draw_dimensions(self, ops: List[DrawOp], tag: PalletTag, y: float) -> float:
        """Dimension heading plus Width, Height, Length rows."""
        ctx = self.ctx
        dims = tag.dimensions

        self._text(ops, "PALLET DIMENSIONS MM:", ctx.left_col, y, FONT_BOLD, BODY_FONT_SIZE)
        y += 4

        label_x = ctx.left_col + 5
        value_x = ctx.left_col + 42
        rows = (("Width", dims.width), ("Height", dims.height), ("Length", dims.length))
        for i, (label, value) in enumerate(rows):
            if i:
                y += 3.5
            self._text(ops, label, label_x, y, FONT_REGULAR, DIMENSION_FONT_SIZE)
            self._text(ops, value, value_x, y, FONT_REGULAR, DIMENSION_FONT_SIZE)
        y += 4
        return y

    def _draw_pallet_number(self, ops: List[DrawOp], tag: PalletTag, y: float) -> float:
        ctx = self.ctx
        self._text(ops, "PALLET NUMBER:", ctx.right_col, y, FONT_BOLD, BODY_FONT_SIZE)
        self._text(ops, tag.pallet_number, ctx.right_col + 36, y, FONT_REGULAR, BODY_FONT_SIZE)
        return y + 5

    def _draw_footer(self, ops: List[DrawOp]):
        """Underlined origin line at a fixed distance from the bottom margin."""
        ctx = self.ctx
        origin_width = text_width(ORIGIN_TEXT, FONT_BOLD, BODY_FONT_SIZE)
        origin_x = (ctx.page_width - origin_width) / 2
        origin_y = ctx.page_height - ctx.margin - 1.5

        self._text(ops, ORIGIN_TEXT, origin_x, origin_y, FONT_BOLD, BODY_FONT_SIZE)
        ops.append(LineOp(x1=origin_x - 1, y1=origin_y + 0.8,
                          x2=origin_x + origin_width + 1, y2=origin_y + 0.8, width=0.3))

    # ----------------------
    # Public API
    # ----------------------
    def build_page(self, record: Mapping[str, Any], filename: str) -> List[DrawOp]:
        """
        Lay out one pallet tag.

        Args:
            record: Header-keyed row
            filename: Source spreadsheet file name

        Returns:
            Draw instructions in paint order
        """
        tag = normalize_record(record, filename)
        ops: List[DrawOp] = []

        y = self._draw_header(ops, tag)
        y = self._draw_consignee(ops, tag, y)
        y = self._draw_goods(ops, tag, y)
        y = self._draw_weights(ops, tag, y)
        y = self._draw_dimensions(ops, tag, y)
        self._draw_pallet_number(ops, tag, y)
        self._draw_footer(ops)

        return ops


def layout_page(record: Mapping[str, Any], filename: str, ctx: PageContext,
                logo: Optional[Logo] = None) -> List[DrawOp]:
    """Pure wrapper around PalletTagLayoutBuilder.build_page."""
    return PalletTagLayoutBuilder(ctx, logo).build_page(record, filename)
