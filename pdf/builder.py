from line_items.models import line_item_label
from pdf.utils.text_utils import escape_text, format_quantity
from utils.totals import line_total, format_amount

DEFAULT_BUSINESS_NAME = "Your Business Name"

# Vehicle fields in display order; "milage" is the key older clients send
VEHICLE_FIELDS = [
    ("Year", ("year",)),
    ("Make", ("make",)),
    ("Model", ("model",)),
    ("Engine", ("engine",)),
    ("Mileage", ("mileage", "milage")),
]

STYLES = """
        @media print {
            body { margin: 0; }
            .no-print { display: none; }
        }
        body { font-family: Arial, sans-serif; margin: 20px; color: #333; line-height: 1.4; }
        .header { display: flex; justify-content: space-between; margin-bottom: 30px;
                  border-bottom: 2px solid #007bff; padding-bottom: 20px; }
        .business-info { flex: 1; }
        .business-name { font-size: 24px; font-weight: bold; color: #007bff; margin-bottom: 5px; }
        .business-details { font-size: 14px; color: #666; }
        .document-info { text-align: right; flex: 1; }
        .document-title { font-size: 32px; font-weight: bold; color: #007bff; margin-bottom: 10px; }
        .document-number { font-size: 18px; font-weight: bold; margin-bottom: 5px; }
        .client-section { margin-bottom: 30px; }
        .section-title { font-size: 16px; font-weight: bold; margin-bottom: 10px; color: #007bff; }
        .client-info { background: #f8f9fa; padding: 15px; border-radius: 5px; }
        .items-table { width: 100%; border-collapse: collapse; margin-bottom: 30px; }
        .items-table th { background: #007bff; color: white; padding: 12px; text-align: left; font-weight: bold; }
        .items-table td { padding: 10px 12px; border-bottom: 1px solid #dee2e6; }
        .items-table tr:nth-child(even) { background: #f8f9fa; }
        .text-right { text-align: right; }
        .text-center { text-align: center; }
        .total-section { margin-top: 20px; text-align: right; }
        .total-row { display: flex; justify-content: flex-end; margin-bottom: 5px; }
        .total-label { width: 150px; font-weight: bold; padding: 5px 10px; }
        .total-value { width: 100px; padding: 5px 10px; text-align: right; }
        .grand-total { border-top: 2px solid #007bff; font-size: 18px; font-weight: bold; color: #007bff; }
        .footer { margin-top: 40px; padding-top: 20px; border-top: 1px solid #dee2e6;
                  font-size: 12px; color: #666; text-align: center; }
        .print-button { position: fixed; top: 20px; right: 20px; background: #007bff; color: white;
                        border: none; padding: 10px 20px; border-radius: 5px; cursor: pointer; font-size: 14px; }
        .print-button:hover { background: #0056b3; }
        .work-description { margin-top: 30px; margin-bottom: 30px; }
        .work-description-content { background: #f8f9fa; padding: 15px; border-radius: 5px;
                                    white-space: pre-wrap; line-height: 1.5; }
"""


# ==================== HEADER: BUSINESS IDENTITY ====================

def _locality_line(config):
    """City, State Zip with empty parts dropped."""
    state_zip = " ".join(part for part in (config.get("state"), config.get("zipCode")) if part)
    return ", ".join(part for part in (config.get("city"), state_zip) if part)


def build_business_block(config):
    lines = []
    if config.get("ownerName"):
        lines.append(escape_text(config["ownerName"]))
    if config.get("address"):
        lines.append(escape_text(config["address"]))
    locality = _locality_line(config)
    if locality:
        lines.append(escape_text(locality))
    if config.get("phone"):
        lines.append(f"Phone: {escape_text(config['phone'])}")
    if config.get("email"):
        lines.append(f"Email: {escape_text(config['email'])}")
    if config.get("website"):
        lines.append(f"Website: {escape_text(config['website'])}")

    details = "\n".join(f"                <div>{line}</div>" for line in lines)
    name = escape_text(config.get("businessName") or DEFAULT_BUSINESS_NAME)
    return f"""
        <div class="business-info">
            <div class="business-name">{name}</div>
            <div class="business-details">
{details}
            </div>
        </div>"""


# ==================== VEHICLE INFORMATION ====================

def _vehicle_value(vehicle, keys):
    for key in keys:
        if vehicle.get(key):
            return vehicle[key]
    return None


def build_vehicle_block(vehicle):
    """Empty string unless at least one vehicle field is filled in."""
    vehicle = vehicle or {}
    rows = []
    for label, keys in VEHICLE_FIELDS:
        value = _vehicle_value(vehicle, keys)
        if value:
            rows.append(f"                <div><strong>{label}:</strong> {escape_text(value)}</div>")

    if not rows:
        return ""

    body = "\n".join(rows)
    return f"""
    <div class="client-section">
        <div class="section-title">Vehicle Information:</div>
        <div class="client-info">
{body}
        </div>
    </div>"""


# ==================== ITEMS TABLE ====================

def build_item_rows(items):
    rows = []
    for item in items or []:
        price = float(item.get("price") or 0)
        total = item.get("total")
        if total is None:
            total = line_total(item.get("quantity"), price)

        rows.append(f"""
                <tr>
                    <td>{escape_text(item.get('description'))}</td>
                    <td>{escape_text(line_item_label(item.get('type')))}</td>
                    <td class="text-center">{format_quantity(item.get('quantity'))}</td>
                    <td class="text-right">{format_amount(price)}</td>
                    <td class="text-right">{format_amount(total)}</td>
                </tr>""")
    return "".join(rows)


def build_work_description(document, is_invoice):
    if not is_invoice or not document.get("workDescription"):
        return ""
    return f"""
    <div class="work-description">
        <div class="section-title">Work Description:</div>
        <div class="work-description-content">{escape_text(document['workDescription'])}</div>
    </div>"""


# ==================== FULL DOCUMENT ====================

def render_document_html(document, doc_type, config=None):
    """
    Printable HTML for an invoice or quote.

    `document` and `config` are wire-shaped dicts (camelCase keys);
    `doc_type` is "invoice" or "quote". The output is meant for the
    browser's print-to-PDF, no binary encoding happens here.
    """
    config = config or {}
    is_invoice = doc_type == "invoice"
    title = "INVOICE" if is_invoice else "QUOTE"
    date_label = "Due Date" if is_invoice else "Valid Until"
    date_value = document.get("dueDate") if is_invoice else document.get("validUntil")
    footer_note = (
        "Payment is due by the due date specified above."
        if is_invoice else
        "This quote is valid until the date specified above."
    )
    number = escape_text(document.get("number"))

    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>{number}</title>
    <style>{STYLES}    </style>
</head>
<body>
    <button class="print-button no-print" onclick="window.print()">Print PDF</button>

    <div class="header">{build_business_block(config)}
        <div class="document-info">
            <div class="document-title">{title}</div>
            <div class="document-number">{number}</div>
            <div>Date: {escape_text(document.get('date'))}</div>
            <div>{date_label}: {escape_text(date_value)}</div>
        </div>
    </div>

    <div class="client-section">
        <div class="section-title">Bill To:</div>
        <div class="client-info">
            <div><strong>{escape_text(document.get('clientName'))}</strong></div>
            <div>{escape_text(document.get('clientEmail'))}</div>
        </div>
    </div>
{build_vehicle_block(document.get('vehicleInformation'))}

    <table class="items-table">
        <thead>
            <tr>
                <th>Description</th>
                <th>Type</th>
                <th class="text-center">Quantity</th>
                <th class="text-right">Price</th>
                <th class="text-right">Total</th>
            </tr>
        </thead>
        <tbody>{build_item_rows(document.get('items'))}
        </tbody>
    </table>

    <div class="total-section">
        <div class="total-row grand-total">
            <div class="total-label">Total:</div>
            <div class="total-value">{format_amount(document.get('total'))}</div>
        </div>
    </div>
{build_work_description(document, is_invoice)}

    <div class="footer">
        <div>Thank you for your business!</div>
        <div>{footer_note}</div>
    </div>
</body>
</html>
"""
