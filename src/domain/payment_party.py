"""Sender and Banking records

Entered per operator session and supplied on every encode call.
Only truncated when encoded; never validated beyond that here.
"""

from pydantic import Field
from src.domain.base import BaseModel


class Sender(BaseModel):
    """Sender - Creditor address shown on the invoice"""

    name: str = Field(default="", description="Free-text company or person name")
    address: str = Field(default="", description="Street and house number on one line")
    zip: str = Field(default="", description="Postal code")
    city: str = Field(default="", description="Town")
    country: str = Field(default="", description="Country name or ISO-2 code")


class Banking(BaseModel):
    """Banking - Creditor account receiving the payment"""

    name: str = Field(default="", description="Bank name")
    iban: str = Field(default="", description="IBAN as typed (any spacing or case)")
    holder: str = Field(default="", description="Account holder name")

    @property
    def has_payment_details(self) -> bool:
        """A payment part is only produced when both IBAN and holder are set"""
        return bool(self.iban.strip()) and bool(self.holder.strip())
