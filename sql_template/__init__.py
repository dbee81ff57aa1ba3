"""SQL template compiler: typed placeholders and conditional blocks rendered to plain SQL."""

from .engine import build_query, substitute
from .skip import skip, SKIP
from .escaper import escape_string, quote_identifier
from .formatter import format_value
from .resolvers import resolvers
from .validator import validate, count_placeholders
from .errors import (
    TemplateError, StructuralError, NestedBlockError, BlockPlaceholderError,
    ArgumentCountMismatch, InvalidSpecifierError, UnsupportedTypeError, MisplacedSkipError
)

__all__ = [
    'build_query',
    'substitute',
    'skip',
    'SKIP',
    'escape_string',
    'quote_identifier',
    'format_value',
    'resolvers',
    'validate',
    'count_placeholders',
    'TemplateError',
    'StructuralError',
    'NestedBlockError',
    'BlockPlaceholderError',
    'ArgumentCountMismatch',
    'InvalidSpecifierError',
    'UnsupportedTypeError',
    'MisplacedSkipError'
]
