"""Unit tests for sql_template.escaper and sql_template.formatter."""

import re
from decimal import Decimal

import pytest

from sql_template import escape_string, quote_identifier, format_value

_unescape = {'\\': '\\', '0': '\0', 'n': '\n', 'r': '\r', "'": "'", '"': '"', 'Z': '\x1a'}


def unescape(text):
    return re.sub(r'\\(.)', lambda m: _unescape[m.group(1)], text, flags=re.S)


class TestEscapeString:
    @pytest.mark.parametrize('raw, escaped', [
        ('\\', '\\\\'),
        ('\0', '\\0'),
        ('\n', '\\n'),
        ('\r', '\\r'),
        ("'", "\\'"),
        ('"', '\\"'),
        ('\x1a', '\\Z'),
    ])
    def test_special_characters(self, raw, escaped):
        assert escape_string(raw) == escaped

    def test_plain_text_untouched(self):
        assert escape_string('hello world %_?') == 'hello world %_?'

    def test_no_double_escape(self):
        assert escape_string("\\'") == "\\\\\\'"

    def test_reversible(self):
        original = "a\\b\0c\nd\re'f\"g\x1ah"
        assert unescape(escape_string(original)) == original


class TestQuoteIdentifier:
    def test_simple(self):
        assert quote_identifier('users') == '`users`'

    def test_backquote_doubled(self):
        assert quote_identifier('we`ird') == '`we``ird`'

    def test_special_chars_escaped(self):
        assert quote_identifier("a'b") == "`a\\'b`"


class TestFormatValue:
    def test_bool(self):
        assert format_value(True) == '1'
        assert format_value(False) == '0'

    def test_none(self):
        assert format_value(None) == 'NULL'

    def test_string_quoted_and_escaped(self):
        assert format_value("O'Hara") == "'O\\'Hara'"

    def test_string_round_trip(self):
        original = "x\\\0\n\r'\"\x1a"
        rendered = format_value(original)
        assert rendered.startswith("'") and rendered.endswith("'")
        assert unescape(rendered[1:-1]) == original

    def test_numbers_unquoted(self):
        assert format_value(42) == '42'
        assert format_value(1.5) == '1.5'
        assert format_value(Decimal('2.50')) == '2.50'
