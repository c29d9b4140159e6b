from pydantic import BaseModel, Field
from typing import List, Literal, Optional

from utils.totals import line_total, calculate_total

LineItemType = Literal['parts', 'labor', 'fee']

LINE_ITEM_TYPES = [
    {'value': 'parts', 'label': 'Parts'},
    {'value': 'labor', 'label': 'Labor'},
    {'value': 'fee', 'label': 'Fee'},
]


def line_item_label(kind: Optional[str]) -> str:
    """Display label for a type code; unknown codes show as-is, a missing one as Other."""
    if not kind:
        return 'Other'
    for entry in LINE_ITEM_TYPES:
        if entry['value'] == kind:
            return entry['label']
    return kind


class LineItem(BaseModel):
    description: str
    type: LineItemType
    quantity: float = Field(..., ge=0)
    price: float = Field(..., ge=0)
    # Re-stamped as quantity x price on every write
    total: float = Field(0.0, ge=0)


class LineItemTypeOption(BaseModel):
    value: str
    label: str


def price_line_items(items: List[LineItem]) -> tuple:
    """Stamp each item's total and return (item dicts, document total)."""
    priced = []
    for item in items:
        data = item.model_dump()
        data['total'] = line_total(item.quantity, item.price)
        priced.append(data)
    return priced, calculate_total(priced)
