"""Exceptions raised while compiling a query template."""


class TemplateError(ValueError):
    """Base class for every template compilation failure."""


class StructuralError(TemplateError):
    """Template blocks are malformed."""


class NestedBlockError(StructuralError):
    """A conditional block opens inside another block."""


class BlockPlaceholderError(StructuralError):
    """A conditional block holds more than one placeholder."""


class ArgumentCountMismatch(TemplateError):
    """Placeholder count differs from the number of arguments."""

    def __init__(self, expected: int, given: int):
        super().__init__(f'Template has {expected} placeholder(s) but {given} argument(s) were given')
        self.expected = expected
        self.given = given


class InvalidSpecifierError(TemplateError):
    """Placeholder tag is not one of ?, ?d, ?f, ?a, ?#."""

    def __init__(self, specifier: str):
        super().__init__(f'Invalid specifier: {specifier}')
        self.specifier = specifier


class UnsupportedTypeError(TemplateError, TypeError):
    """Argument type cannot be rendered by its placeholder."""


class MisplacedSkipError(UnsupportedTypeError):
    """Skip sentinel used anywhere but as the argument of a conditional block."""
