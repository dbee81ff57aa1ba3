"""Escape tables and regex patterns for the template language."""

import re

# Source character -> escaped form inside a quoted SQL literal
escape_map = {
    '\\': '\\\\',
    '\0': '\\0',
    '\n': '\\n',
    '\r': '\\r',
    "'": "\\'",
    '"': '\\"',
    '\x1a': '\\Z',
}

escape_table = str.maketrans(escape_map)

patterns = {
    # Marker followed by a run of tag characters; runs longer than one are rejected later
    'placeholder': r'\?(?P<tag>[adf#]*)',
    'block': r'\{(?P<body>[^{}]*)\}',
}

rx_placeholder = re.compile(patterns['placeholder'])
rx_block_or_placeholder = re.compile(f"{patterns['block']}|{patterns['placeholder']}")
