"""Invoice Line Classifier

Maps each invoice row to a render category and decides whether its amount
counts towards the displayed (and QR-encoded) invoice total.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Iterable, List, Optional

from src.domain.invoice_line import InvoiceItemType, InvoiceLineItem


class LineCategory(str, Enum):
    """Render/compute category of an invoice row"""
    HEADER = "header"
    INFO = "info"
    SEPARATOR = "separator"
    COSTED_HIGHLIGHTED = "costed_highlighted"
    COSTED_PLAIN = "costed_plain"
    ZERO_AMOUNT_INFO = "zero_amount_info"


HEADER_TYPES = frozenset({
    InvoiceItemType.METER_INFO.value,
    InvoiceItemType.CHARGING_HEADER.value,
})

INFO_TYPES = frozenset({
    InvoiceItemType.METER_READING_FROM.value,
    InvoiceItemType.METER_READING_TO.value,
    InvoiceItemType.TOTAL_CONSUMPTION.value,
    InvoiceItemType.CHARGING_SESSION_FROM.value,
    InvoiceItemType.CHARGING_SESSION_TO.value,
    InvoiceItemType.TOTAL_CHARGED.value,
})

# Item type -> highlight key (tint and icon chosen by the renderer)
HIGHLIGHTS = {
    InvoiceItemType.SOLAR_POWER.value: "solar",
    InvoiceItemType.NORMAL_POWER.value: "normal",
    InvoiceItemType.CAR_CHARGING_NORMAL.value: "charging",
    InvoiceItemType.CAR_CHARGING_PRIORITY.value: "charging_priority",
}

ZERO = Decimal("0")


@dataclass(frozen=True)
class ClassifiedLine:
    """An invoice row together with how it is rendered and summed"""
    item: InvoiceLineItem
    category: LineCategory
    contributes_to_total: bool
    highlight: Optional[str] = None

    @property
    def spans_columns(self) -> bool:
        """Label rows use the full table width and show no amount column"""
        return self.category in (
            LineCategory.HEADER,
            LineCategory.INFO,
            LineCategory.SEPARATOR,
            LineCategory.ZERO_AMOUNT_INFO,
        )

    @property
    def show_amount(self) -> bool:
        return self.category in (LineCategory.COSTED_HIGHLIGHTED, LineCategory.COSTED_PLAIN)

    @property
    def amount(self) -> Decimal:
        """Amount counted towards the total (zero for non-contributing rows)"""
        return self.item.total_price if self.contributes_to_total else ZERO


def _item_type_tag(item: InvoiceLineItem) -> str:
    tag = item.item_type
    if isinstance(tag, InvoiceItemType):
        return tag.value
    return tag or ""


def classify_item(item: InvoiceLineItem) -> ClassifiedLine:
    """
    Classify one invoice row

    Rule order: header, info, separator, highlighted tiers, then by amount.
    Unknown item types never fail; they are classified by amount only.
    """
    tag = _item_type_tag(item)
    positive = item.total_price > ZERO

    if tag in HEADER_TYPES:
        return ClassifiedLine(item, LineCategory.HEADER, False)
    if tag in INFO_TYPES:
        return ClassifiedLine(item, LineCategory.INFO, False)
    if tag == InvoiceItemType.SEPARATOR.value:
        return ClassifiedLine(item, LineCategory.SEPARATOR, False)
    if tag in HIGHLIGHTS:
        return ClassifiedLine(item, LineCategory.COSTED_HIGHLIGHTED, positive, HIGHLIGHTS[tag])
    if positive:
        return ClassifiedLine(item, LineCategory.COSTED_PLAIN, True)
    return ClassifiedLine(item, LineCategory.ZERO_AMOUNT_INFO, False)


def classify_items(items: Iterable[InvoiceLineItem]) -> List[ClassifiedLine]:
    """Classify rows keeping their order"""
    return [classify_item(item) for item in items]


def contributing_total(lines: Iterable[ClassifiedLine]) -> Decimal:
    """Sum of the rows that count towards the invoice total"""
    return sum((line.amount for line in lines), ZERO)
