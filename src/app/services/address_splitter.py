"""Address Splitter

Splits a one-line street address into street and house number for the
structured (type "S") address blocks of the Swiss QR-bill.
"""

import re
from typing import NamedTuple, Optional

STREET_MAX_LENGTH = 70
HOUSE_NUMBER_MAX_LENGTH = 16

# "<street> <token starting with a digit ... end>"
_ADDRESS_PATTERN = re.compile(r"^(.+?)\s+(\d.*)$")


class AddressParts(NamedTuple):
    street: str
    house_number: str


def truncate(value: Optional[str], max_length: int) -> str:
    """Cut value to max_length characters; None becomes an empty string"""
    if not value:
        return ""
    return value[:max_length]


def split_address(address: Optional[str]) -> AddressParts:
    """
    Split a freeform address line into (street, house number)

    Best-effort heuristic, not a postal parser. Never raises.

    Examples:
        "Bahnhofstrasse 12a" -> ("Bahnhofstrasse", "12a")
        "Hauptplatz"         -> ("Hauptplatz", "")
        ""                   -> ("", "")

    Returns:
        AddressParts with street <= 70 and house number <= 16 characters
    """
    cleaned = (address or "").strip()
    if not cleaned:
        return AddressParts("", "")

    match = _ADDRESS_PATTERN.match(cleaned)
    if match:
        street, house_number = match.group(1), match.group(2)
    else:
        street, house_number = cleaned, ""

    return AddressParts(
        street=truncate(street, STREET_MAX_LENGTH),
        house_number=truncate(house_number, HOUSE_NUMBER_MAX_LENGTH),
    )
