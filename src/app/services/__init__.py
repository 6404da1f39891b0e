from .address_splitter import AddressParts, split_address, truncate
from .country import resolve_country_code
from .iban import format_iban, is_supported_iban, normalize_iban
from .line_classifier import (
    ClassifiedLine,
    LineCategory,
    classify_item,
    classify_items,
    contributing_total,
)

__all__ = [
    "AddressParts",
    "split_address",
    "truncate",
    "resolve_country_code",
    "format_iban",
    "is_supported_iban",
    "normalize_iban",
    "ClassifiedLine",
    "LineCategory",
    "classify_item",
    "classify_items",
    "contributing_total",
]
