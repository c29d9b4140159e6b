from .dates import utcnow, today_iso, days_from_today
from .numbering import generate_document_id, generate_document_number
from .totals import line_total, calculate_total, format_amount

__all__ = [
    'utcnow', 'today_iso', 'days_from_today',
    'generate_document_id', 'generate_document_number',
    'line_total', 'calculate_total', 'format_amount',
]
