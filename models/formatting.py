# models/formatting.py
"""
Formatting helpers shared by goals, storage and the command layer
"""

from datetime import datetime

# Goals file date pattern (dd-MM-yyyy). Changing it breaks existing files.
DATE_FORMAT = '%d-%m-%Y'


def format_date(day):
    """Format a date the way it appears in listings and the goals file"""
    return day.strftime(DATE_FORMAT)


def parse_date(text):
    """Parse a dd-MM-yyyy string back into a date"""
    return datetime.strptime(text.strip(), DATE_FORMAT).date()


def format_amount(value, decimals=2):
    """Human-friendly number: 2000.0 -> '2000', 7.50 -> '7.5'"""
    text = f"{float(value):.{decimals}f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def format_stored_number(value):
    """Exact float text for the goals file (parses back with float())"""
    return repr(float(value))


def parse_amount(text, field='value', allow_negative=False):
    """
    Parse a user-supplied number

    Raises:
        ValueError: If text is not a number, or negative when not allowed
    """
    try:
        value = float(str(text).strip())
    except (TypeError, ValueError):
        raise ValueError(f"Invalid {field}: {text!r} is not a number")
    if value != value or value in (float('inf'), float('-inf')):
        raise ValueError(f"Invalid {field}: {text!r} is not a finite number")
    if value < 0 and not allow_negative:
        raise ValueError(f"Invalid {field}: must not be negative")
    return value
