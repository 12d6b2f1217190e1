"""Typeable escapes for IRC control codes."""

import re


ESCAPE = re.compile(r'\\(x[0-9a-fA-F]{2}|\\)')


def decode_escapes(text: str) -> str:
    """Turn ``\\x02``-style escapes into the characters they name.

    ``\\\\`` yields a literal backslash; anything else is left alone, so
    non-ASCII text survives untouched.
    """

    def replace(match: re.Match) -> str:
        escape = match.group(1)
        if escape == '\\':
            return '\\'
        return chr(int(escape[1:], 16))

    return ESCAPE.sub(replace, text)
