from typing import Iterable, Mapping


def line_total(quantity, price) -> float:
    return float(quantity or 0) * float(price or 0)


def calculate_total(items: Iterable[Mapping]) -> float:
    """
    Sum of quantity x price across line items.
    Full precision is kept; rounding only happens when the value is displayed.
    """
    return sum(line_total(item.get('quantity'), item.get('price')) for item in items)


def format_amount(value) -> str:
    """Two-decimal display form used on printable documents."""
    return f'{float(value or 0):.2f}'
