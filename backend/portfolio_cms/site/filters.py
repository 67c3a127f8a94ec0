from dateutil.parser import ParserError, parse
from . import site_bp


@site_bp.app_template_filter("format_date")
def format_date(value, fmt="%B %d, %Y"):
    """Post dates are free text; pretty-print the ones that parse."""
    if not value:
        return ""

    try:
        return parse(value).strftime(fmt)
    except (ParserError, OverflowError, ValueError):
        return value
