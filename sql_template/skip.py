"""Skip sentinel marking a conditional block for removal."""


class Skip:
    """Marker type; only the module level SKIP instance is ever used."""
    __slots__ = ()

    def __repr__(self):
        return '<skip>'

    def __reduce__(self):
        return 'SKIP'


SKIP = Skip()


def skip() -> Skip:
    """Return the sentinel that drops the enclosing conditional block."""
    return SKIP


def is_skip(value) -> bool:
    """True only for the skip sentinel itself."""
    return value is SKIP
