"""Resolve every display field of one pallet tag record."""

from typing import Any, Mapping

from config import (
    ADDRESS_ALIASES,
    ADDRESS_LINE_ALIASES,
    COUNTRY_ALIASES,
    CUSTOMER_ALIASES,
    DEFAULT_COUNTRY,
    FILM_ALIASES,
    FORMAT_NET_WEIGHT,
    GROSS_WEIGHT_ALIASES,
    INVOICE_ALIASES,
    LC_PO_ALIASES,
    NET_WEIGHT_ALIASES,
    PALLET_NUMBER_ALIASES,
    REELS_ALIASES,
    SIZE_ALIASES,
)
from models import PalletTag
from normalizers.field_parsers import (
    extract_container_number,
    format_weight,
    parse_address,
    parse_dimensions,
)
from normalizers.field_resolver import resolve


def normalize_record(record: Mapping[str, Any], filename: str,
                     format_net_weight: bool = FORMAT_NET_WEIGHT) -> PalletTag:
    """
    Build a PalletTag from one header-keyed row.

    The composite address column wins for customer, street and country;
    the dedicated columns are consulted only for parts it does not carry.
    A Country column therefore shows only when the address has no country
    part of its own; the previous generator always printed "Spain" there.

    Args:
        record: Header-keyed row
        filename: Source spreadsheet file name (container number fallback)
        format_net_weight: Also apply two-decimal formatting to net weight

    Returns:
        PalletTag with every display value resolved
    """
    country_column = resolve(record, COUNTRY_ALIASES, DEFAULT_COUNTRY)
    address = parse_address(resolve(record, ADDRESS_ALIASES), default_country=country_column)

    net_weight = resolve(record, NET_WEIGHT_ALIASES)
    if format_net_weight:
        net_weight = format_weight(net_weight)

    return PalletTag(
        container_number=extract_container_number(record, filename),
        lc_po=resolve(record, LC_PO_ALIASES),
        customer=address.customer or resolve(record, CUSTOMER_ALIASES),
        address=address.address or resolve(record, ADDRESS_LINE_ALIASES),
        country=address.country,
        invoice_number=resolve(record, INVOICE_ALIASES),
        film_description=resolve(record, FILM_ALIASES),
        size_mm=resolve(record, SIZE_ALIASES),
        reels=resolve(record, REELS_ALIASES),
        net_weight=net_weight,
        gross_weight=format_weight(resolve(record, GROSS_WEIGHT_ALIASES)),
        dimensions=parse_dimensions(record),
        pallet_number=resolve(record, PALLET_NUMBER_ALIASES),
    )
