from line_items.models import LineItem, price_line_items, line_item_label
from utils.totals import line_total, calculate_total, format_amount


def test_line_total():
    assert line_total(2, 10) == 20.0
    assert line_total(1.5, 80) == 120.0
    assert line_total(None, 5) == 0.0


def test_calculate_total_sums_quantity_times_price():
    items = [
        {"quantity": 3, "price": 0.1},
        {"quantity": 1, "price": 19.99},
        {"quantity": 0.5, "price": 7},
    ]
    assert format_amount(calculate_total(items)) == "23.79"
    assert calculate_total([]) == 0


def test_format_amount_rounds_to_two_places():
    assert format_amount(20) == "20.00"
    assert format_amount(10 / 3) == "3.33"
    assert format_amount(None) == "0.00"


def test_price_line_items_restamps_client_totals():
    items = [
        LineItem(description="Oil", type="parts", quantity=4, price=8.25, total=999),
        LineItem(description="Shop fee", type="fee", quantity=1, price=15),
    ]
    priced, total = price_line_items(items)

    assert [item["total"] for item in priced] == [33.0, 15.0]
    assert total == 48.0
    assert priced[0]["description"] == "Oil"


def test_line_item_label_lookup():
    assert line_item_label("labor") == "Labor"
    assert line_item_label("tires") == "tires"
    assert line_item_label(None) == "Other"
    assert line_item_label("") == "Other"
