"""Template substitution engine and the public build_query entry point."""

import logging
from typing import Any, List, Optional, Sequence, Tuple
from .errors import InvalidSpecifierError
from .mappings import rx_block_or_placeholder, rx_placeholder
from .resolvers import resolvers
from .skip import is_skip, skip
from .validator import count_placeholders, validate

logger = logging.getLogger(__name__)

__all__ = ['build_query', 'substitute', 'skip']


def _resolve(tag: str, args: Sequence[Any], position: int) -> Tuple[str, int]:
    """Run the resolver for one bare placeholder and advance the cursor."""
    resolver = resolvers.get(tag) if len(tag) <= 1 else None
    if resolver is None:
        raise InvalidSpecifierError(f'?{tag}')
    return resolver(args[position]), position + 1


def substitute(template: str, args: Sequence[Any], position: int = 0, blocks: bool = True) -> Tuple[str, int]:
    """Replace placeholders left to right, starting at args[position].

    Returns the substituted text and the cursor just past the last consumed
    argument. With ``blocks`` false only bare placeholders are recognised,
    which is how the interior of a conditional block is filled.
    """
    rx = rx_block_or_placeholder if blocks else rx_placeholder
    out: List[str] = []
    last = 0
    for m in rx.finditer(template):
        out.append(template[last:m.start()])
        last = m.end()
        body = m.groupdict().get('body')
        if body is None:
            text, position = _resolve(m.group('tag'), args, position)
        elif not count_placeholders(body):
            # A brace pair without a placeholder is plain SQL text
            text = m.group(0)
        elif is_skip(args[position]):
            text = ''
            position += 1
        else:
            text, position = substitute(body, args, position, blocks=False)
        out.append(text)
    out.append(template[last:])
    return ''.join(out), position


def build_query(template: str, args: Optional[Sequence[Any]] = None) -> str:
    """Validate the template and return it with every placeholder filled."""
    args = list(args) if args is not None else []
    validate(template, args)
    sql, _ = substitute(template, args)
    logger.debug('Built query: %s', sql)
    return sql
