from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

# One spreadsheet row keyed by its cleaned header
Record = Dict[str, Any]


@dataclass(frozen=True)
class ParsedAddress:
    customer: str = ""
    address: str = ""
    country: str = ""


@dataclass(frozen=True)
class ParsedDimensions:
    length: str
    width: str
    height: str


@dataclass(frozen=True)
class PageContext:
    """Layout constants shared by every page of one document (millimetres)."""
    page_width: float
    page_height: float
    margin: float
    content_width: float
    left_col: float
    right_col: float
    col_width: float
    label_value_gap: float


@dataclass(frozen=True)
class TextOp:
    text: str
    x: float
    y: float
    font: str
    size: float


@dataclass(frozen=True)
class ImageOp:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class LineOp:
    x1: float
    y1: float
    x2: float
    y2: float
    width: float


DrawOp = Union[TextOp, ImageOp, LineOp]


@dataclass(frozen=True)
class Logo:
    """Preloaded logo bytes and their draw size in millimetres."""
    data: bytes
    width: float
    height: float


@dataclass
class SheetData:
    headers: List[str] = field(default_factory=list)
    records: List[Record] = field(default_factory=list)
    raw_rows: List[List[Any]] = field(default_factory=list)


class PalletTag:
    def __init__(self, container_number: str = "", lc_po: str = "", customer: str = "",
                 address: str = "", country: str = "", invoice_number: str = "",
                 film_description: str = "", size_mm: str = "", reels: str = "",
                 net_weight: str = "", gross_weight: str = "",
                 dimensions: Optional[ParsedDimensions] = None, pallet_number: str = ""):
        self.container_number = container_number
        self.lc_po = lc_po
        self.customer = customer
        self.address = address
        self.country = country
        self.invoice_number = invoice_number
        self.film_description = film_description
        self.size_mm = size_mm
        self.reels = reels
        self.net_weight = net_weight
        self.gross_weight = gross_weight
        self.dimensions = dimensions
        self.pallet_number = pallet_number
