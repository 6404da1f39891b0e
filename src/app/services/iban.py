"""IBAN normalization and validation for Swiss QR-bills

Only Swiss (CH) and Liechtenstein (LI) creditor accounts may be used on a
QR-bill. Shape validation only: the mod-97 checksum is not verified.
"""

import re
from typing import Optional

IBAN_ALLOWED_COUNTRIES = ("CH", "LI")

_WHITESPACE = re.compile(r"\s+")
_SUPPORTED_IBAN = re.compile(r"(CH|LI)[0-9]{2}[A-Z0-9]{1,21}")


def normalize_iban(raw: Optional[str]) -> str:
    """Remove all whitespace and uppercase"""
    return _WHITESPACE.sub("", raw or "").upper()


def is_supported_iban(iban: Optional[str]) -> bool:
    """True when the normalized IBAN has the shape of a CH or LI account"""
    return _SUPPORTED_IBAN.fullmatch(normalize_iban(iban)) is not None


def format_iban(raw: Optional[str]) -> str:
    """Group the normalized IBAN in blocks of four for display"""
    iban = normalize_iban(raw)
    return " ".join(iban[i:i + 4] for i in range(0, len(iban), 4))
