from .text_utils import escape_text, format_quantity

__all__ = ["escape_text", "format_quantity"]
