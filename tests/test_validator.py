"""Unit tests for sql_template.validator."""

import pytest

from sql_template import (
    validate, count_placeholders, NestedBlockError, BlockPlaceholderError,
    StructuralError, ArgumentCountMismatch, TemplateError
)


class TestCountPlaceholders:
    def test_bare_and_block(self):
        assert count_placeholders('SELECT ?# FROM t WHERE a = ? {AND b = ?d} AND c IN (?a)') == 4

    def test_none(self):
        assert count_placeholders('SELECT 1') == 0

    def test_long_tag_counts_once(self):
        assert count_placeholders('SELECT ?dd') == 1


class TestNestedBlocks:
    @pytest.mark.parametrize('template', [
        '{a {b ?d}}',
        'SELECT 1 {AND a = ?d {AND b = ?d}}',
        '{{?}}',
    ])
    def test_nested_rejected(self, template):
        with pytest.raises(NestedBlockError):
            validate(template, [1, 2])

    def test_nested_is_structural(self):
        with pytest.raises(StructuralError):
            validate('{ {?} }', [1])

    def test_checked_before_argument_count(self):
        with pytest.raises(NestedBlockError):
            validate('{ {?} }', [])

    def test_sibling_blocks_allowed(self):
        validate('SELECT 1 {AND a = ?d} {AND b = ?d}', [1, 2])


class TestBlockPlaceholders:
    def test_two_placeholders_rejected(self):
        with pytest.raises(BlockPlaceholderError):
            validate('SELECT 1 {AND a = ?d AND b = ?d}', [1, 2])

    def test_empty_block_is_literal(self):
        validate("SELECT '{}'", [])


class TestArgumentCount:
    def test_match(self):
        assert validate('SELECT ?d, ?', [1, 'a']) is None

    def test_too_few(self):
        with pytest.raises(ArgumentCountMismatch) as exc:
            validate('SELECT ?d, ?', [1])
        assert exc.value.expected == 2
        assert exc.value.given == 1

    def test_too_many(self):
        with pytest.raises(ArgumentCountMismatch):
            validate('SELECT ?d', [1, 2])

    def test_block_placeholders_counted(self):
        with pytest.raises(ArgumentCountMismatch):
            validate('SELECT 1 {AND a = ?d}', [])

    def test_is_template_error(self):
        with pytest.raises(TemplateError):
            validate('SELECT 1', [1])
