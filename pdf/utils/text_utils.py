# pdf/utils/text_utils.py
import html


def escape_text(value):
    """
    Ensures a value is safe to interpolate into HTML by converting to string
    and escaping markup characters.
    """
    if value is None:
        return ""

    return html.escape(str(value))


def format_quantity(value):
    """
    Quantities print without a trailing .0 when whole (2 -> "2", 1.5 -> "1.5").
    """
    if value is None:
        return ""

    number = float(value)
    if number.is_integer():
        return str(int(number))
    return f"{number:g}"


__all__ = ["escape_text", "format_quantity"]
