"""Stable colour classes for nick mentions."""

MENTION_COLOR_COUNT = 32


def mention_style_class(name: str) -> str:
    """Map a nick to one of ``color-1`` .. ``color-32``.

    The same nick always gets the same class.
    """
    return f'color-{1 + sum(map(ord, name)) % MENTION_COLOR_COUNT}'
