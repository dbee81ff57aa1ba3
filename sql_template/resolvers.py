"""Per-placeholder resolvers turning one argument into SQL text."""

import math
from typing import Any, Callable, Dict, Mapping
from .errors import UnsupportedTypeError, MisplacedSkipError
from .escaper import quote_identifier
from .formatter import format_value
from .skip import is_skip

_scalar_types = (str, int, float, bool, type(None))
_container_types = (Mapping, list, tuple, set, frozenset)


def _reject_skip(value: Any, placeholder: str):
    if is_skip(value):
        raise MisplacedSkipError(f'skip() is only allowed as the argument of a conditional block, got it for {placeholder}')


def resolve_int(value: Any) -> str:
    """?d: integer text, floats truncated."""
    _reject_skip(value, '?d')
    if value is None:
        return 'NULL'
    try:
        return str(int(value))
    except (TypeError, ValueError, OverflowError):
        pass
    if isinstance(value, str):
        try:
            return str(int(float(value)))
        except (ValueError, OverflowError):
            pass
    raise UnsupportedTypeError(f'Cannot convert {value!r} to integer for ?d')


def resolve_float(value: Any) -> str:
    """?f: float text."""
    _reject_skip(value, '?f')
    if value is None:
        return 'NULL'
    try:
        num = float(value)
    except (TypeError, ValueError):
        raise UnsupportedTypeError(f'Cannot convert {value!r} to float for ?f') from None
    if not math.isfinite(num):
        raise UnsupportedTypeError(f'Non-finite float {value!r} for ?f')
    return repr(num)


def resolve_identifier(value: Any) -> str:
    """?#: one name or a list of names, back-quoted."""
    _reject_skip(value, '?#')
    if isinstance(value, str):
        return quote_identifier(value)
    if isinstance(value, (list, tuple)):
        if not all(isinstance(v, str) for v in value):
            raise UnsupportedTypeError(f'Identifiers for ?# must be strings: {value!r}')
        return ', '.join(quote_identifier(v) for v in value)
    raise UnsupportedTypeError(f'?# expects a name or a list of names, got {type(value).__name__}')


def resolve_assoc(value: Any) -> str:
    """?a: list values, or `key` = value pairs for string keys."""
    _reject_skip(value, '?a')
    if isinstance(value, Mapping):
        items = value.items()
    elif isinstance(value, (list, tuple)):
        items = enumerate(value)
    else:
        raise UnsupportedTypeError(f'?a expects a mapping or a list, got {type(value).__name__}')
    parts = []
    for key, item in items:
        if is_skip(item) or isinstance(item, _container_types):
            raise UnsupportedTypeError(f'Unsupported value for ?a entry {key!r}: {item!r}')
        if isinstance(key, int) and not isinstance(key, bool) and key >= 0:
            parts.append(format_value(item))
        elif isinstance(key, str):
            parts.append(f'{quote_identifier(key)} = {format_value(item)}')
        else:
            raise UnsupportedTypeError(f'Unsupported key for ?a: {key!r}')
    return ', '.join(parts)


def resolve_scalar(value: Any) -> str:
    """?: any of str, int, float, bool or None."""
    _reject_skip(value, '?')
    if not isinstance(value, _scalar_types):
        raise UnsupportedTypeError(
            f'Argument for ? must be str, int, float, bool or None, got {type(value).__name__}')
    return format_value(value)


resolvers: Dict[str, Callable[[Any], str]] = {
    '': resolve_scalar,
    'd': resolve_int,
    'f': resolve_float,
    'a': resolve_assoc,
    '#': resolve_identifier,
}
