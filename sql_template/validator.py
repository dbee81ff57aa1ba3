"""Structural checks run on a template before substitution."""

import re
from typing import Any, Sequence
from .errors import NestedBlockError, BlockPlaceholderError, ArgumentCountMismatch
from .mappings import patterns, rx_placeholder

_rx_block = re.compile(patterns['block'])


def count_placeholders(template: str) -> int:
    """Count placeholder occurrences, including those inside blocks."""
    return sum(1 for _ in rx_placeholder.finditer(template))


def check_blocks(template: str) -> None:
    """Reject nested blocks and blocks holding more than one placeholder."""
    depth = 0
    for pos, ch in enumerate(template):
        if ch == '{':
            if depth:
                raise NestedBlockError(f'Nested conditional block at position {pos}')
            depth = 1
        elif ch == '}' and depth:
            depth = 0
    for m in _rx_block.finditer(template):
        n = count_placeholders(m.group('body'))
        if n > 1:
            raise BlockPlaceholderError(
                f'Conditional block {m.group(0)!r} holds {n} placeholders; exactly one is allowed')


def validate(template: str, args: Sequence[Any]) -> None:
    """Raise a TemplateError if the template cannot be filled with args."""
    check_blocks(template)
    expected = count_placeholders(template)
    if expected != len(args):
        raise ArgumentCountMismatch(expected, len(args))
