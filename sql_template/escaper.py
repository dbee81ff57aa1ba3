"""String escaping for SQL literals and identifiers."""

from .mappings import escape_table


def escape_string(text: str) -> str:
    """Escape special characters for use inside a quoted SQL string."""
    return text.translate(escape_table)


def quote_identifier(name: str) -> str:
    """Escape a name and wrap it in back-quotes."""
    escaped = escape_string(name).replace('`', '``')
    return f'`{escaped}`'
