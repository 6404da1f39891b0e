from .base import BaseModel, FrozenModel
from .debtor import Debtor
from .invoice import Invoice, InvoiceStatus
from .invoice_line import InvoiceLineItem, InvoiceItemType
from .payment_party import Banking, Sender

__all__ = [
    "BaseModel",
    "FrozenModel",
    "Debtor",
    "Invoice",
    "InvoiceStatus",
    "InvoiceLineItem",
    "InvoiceItemType",
    "Banking",
    "Sender",
]
