"""Country code resolution for QR-bill address blocks

Address blocks carry a two-letter ISO 3166-1 code. Sender records are typed
by the operator and often hold a country name ("Switzerland") instead.
"""

import logging
from typing import Optional

from iso3166 import countries

logger = logging.getLogger(__name__)

COUNTRY_CODE_LENGTH = 2


def resolve_country_code(value: Optional[str], default: str = "CH") -> str:
    """
    Return a two-letter country code for an address field

    Args:
        value: ISO-2 code, ISO-3 code or English country name; may be empty
        default: Code used when value is empty

    Returns:
        Uppercase alpha-2 code when the value is known, otherwise the value
        truncated to two characters
    """
    cleaned = (value or "").strip()
    if not cleaned:
        return default[:COUNTRY_CODE_LENGTH]

    if len(cleaned) == COUNTRY_CODE_LENGTH:
        return cleaned.upper()

    try:
        return countries.get(cleaned).alpha2
    except KeyError:
        logger.debug(f"Unknown country '{cleaned}', truncating to {COUNTRY_CODE_LENGTH} characters")
        return cleaned[:COUNTRY_CODE_LENGTH]
