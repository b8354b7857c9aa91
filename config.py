"""Configuration constants for the Pallet Tag Generator."""

from pathlib import Path
from typing import Tuple

# ============================================================================
# PAGE GEOMETRY (millimetres)
# ============================================================================

# Tag stock is 6" x 4" landscape: width=152.4mm, height=101.6mm
PAGE_WIDTH: float = 152.4
PAGE_HEIGHT: float = 101.6
PAGE_MARGIN: float = 6.0

# Right column starts this far past the page centre line
RIGHT_COL_OFFSET: float = 3.0

# Gap between a label and its value on the same row
LABEL_VALUE_GAP: float = 15.0

# Logo is scaled to this height, width follows the aspect ratio
LOGO_MAX_HEIGHT: float = 8.0

# ============================================================================
# FONTS
# ============================================================================

FONT_REGULAR: str = "Helvetica"
FONT_BOLD: str = "Helvetica-Bold"

TITLE_FONT_SIZE: float = 13
CONTAINER_FONT_SIZE: float = 11
BODY_FONT_SIZE: float = 7.5
DIMENSION_FONT_SIZE: float = 7

# Vertical advance per wrapped line
LINE_HEIGHT: float = 3.5

# Wrapped address and film text stop here so the body stays above the footer
MAX_ADDRESS_LINES: int = 3
MAX_FILM_LINES: int = 3

# ============================================================================
# TEXT CONSTANTS
# ============================================================================

TITLE_TEXT: str = "PALLET TAG"
ORIGIN_TEXT: str = "MADE IN PAKISTAN"
WEIGHT_UNIT: str = "KGS."

# ============================================================================
# DEFAULT VALUES
# ============================================================================

DEFAULT_COUNTRY: str = "Spain"
DEFAULT_CONTAINER_NUMBER: str = "01"

# (length, width, height) used when no dimension source parses
DEFAULT_DIMENSIONS: Tuple[str, str, str] = ("725", "895", "2625")

# Header row is searched for within this many leading rows
HEADER_LOOKAHEAD: int = 5

# ============================================================================
# INPUT / OUTPUT
# ============================================================================

SUPPORTED_EXTENSIONS: Tuple[str, ...] = (".xlsx", ".csv")
OUTPUT_EXTENSION: str = ".pdf"

# Logo may be a filesystem path or an http(s) URL
LOGO_SOURCE: str = str(Path(__file__).resolve().parent / "assets" / "tri-pack-logo.jpeg")
LOGO_HTTP_TIMEOUT: float = 10.0

# ============================================================================
# FLAGS
# ============================================================================

# Enable debug logging and output
FLAG_DEBUG: bool = False

# Net weight is printed as resolved; flip to format it like gross weight
FORMAT_NET_WEIGHT: bool = False

# ============================================================================
# HEADER ALIASES
# ============================================================================
# Ordered: the first alias yielding a non-empty value wins.

LC_PO_ALIASES: Tuple[str, ...] = ("LC / PO #", "LC/PO#", "LC/PO", "PO#", "LC / PO")

ADDRESS_ALIASES: Tuple[str, ...] = ("ADDRESS", "Address", "Address Line 1")

CUSTOMER_ALIASES: Tuple[str, ...] = ("Customer", "Customer Name", "QUIMIDROGA")

ADDRESS_LINE_ALIASES: Tuple[str, ...] = (
    "Address Line 1",
    "C/TUSET 26 08006, 08006 BARCELONA,",
)

COUNTRY_ALIASES: Tuple[str, ...] = ("Country", "Spain")

INVOICE_ALIASES: Tuple[str, ...] = (
    "PROFORMA INVOICE NUMBER:",
    "PROFORMA INVOICE NUMBER",
    "Invoice Number",
    "Invoice",
)

FILM_ALIASES: Tuple[str, ...] = ("Film", "FILM DESCP", "Film Description", "Description")

SIZE_ALIASES: Tuple[str, ...] = ("Size MM:", "SIZE MM", "Size", "Size MM")

REELS_ALIASES: Tuple[str, ...] = (
    "NO. Of Reels / Pallet",
    "NO. Of Reels / Pallet:",
    "No. OF REELS / PALLET",
    "Reels",
    "Number of Reels",
)

NET_WEIGHT_ALIASES: Tuple[str, ...] = (
    "Net Weight (PALLET):",
    "NET WEIGHT (PALLET):",
    "NET WEIGHT (PALLET)",
    "Net Weight",
    "Net Weight (Pallet)",
)

GROSS_WEIGHT_ALIASES: Tuple[str, ...] = (
    "Gross Weight (PALLET):",
    "GROSS WEIGHT (PALLET):",
    "GROSS WEIGHT (PALLET)",
    "Gross Weight",
    "Gross Weight (Pallet)",
)

LENGTH_ALIASES: Tuple[str, ...] = ("Length", "LENGTH")
WIDTH_ALIASES: Tuple[str, ...] = ("Width", "WIDTH")
HEIGHT_ALIASES: Tuple[str, ...] = ("Height", "HEIGHT")

DIMENSIONS_ALIASES: Tuple[str, ...] = (
    "Pallet Dimension MM:",
    "PALLET DIMENSIONS MM:",
    "PALLET DIMENSIONS MM",
    "Dimensions",
    "Pallet Dimensions",
)

PALLET_NUMBER_ALIASES: Tuple[str, ...] = (
    "Pallet No.",
    "PALLET NUMBER",
    "Pallet Number",
    "Pallet #",
    "Pallet",
)

CONTAINER_ALIASES: Tuple[str, ...] = (
    "CONT #03",
    "CONT #",
    "CONT#",
    "CONT #",
    "Container Number",
    "CONT",
)
