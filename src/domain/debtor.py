"""Debtor Domain Entity

The billed building user. Owned by the billing system and only referenced
by invoices.
"""

from typing import Optional
from pydantic import Field
from src.domain.base import BaseModel


class Debtor(BaseModel):
    """Debtor - Person paying an invoice"""

    id: Optional[int] = Field(default=None, description="User identifier")
    first_name: str = Field(default="", description="First name")
    last_name: str = Field(default="", description="Last name")
    email: str = Field(default="", description="Contact email")
    address_street: str = Field(
        default="",
        description="Street and house number on one line (e.g., 'Seestrasse 5')"
    )
    address_zip: str = Field(default="", description="Postal code")
    address_city: str = Field(default="", description="Town")
    address_country: str = Field(default="", description="ISO-2 country code")
    is_active: bool = Field(default=True, description="False once the user is archived")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
