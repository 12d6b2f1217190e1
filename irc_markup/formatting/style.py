"""IRC styling control code tokenizer.

Strips control codes from a raw message and reports which ranges of the
resulting plain text carry which formatting.
"""

import re
from dataclasses import replace

from irc_markup.formatting.models import PLAIN, StyleAttributes, StyleRun


BOLD = '\x02'
COLOR = '\x03'
HEX_COLOR = '\x04'
RESET = '\x0f'
MONOSPACE = '\x11'
REVERSE = '\x16'
ITALIC = '\x1d'
STRIKETHROUGH = '\x1e'
UNDERLINE = '\x1f'

COLOR_CODES = re.compile(r'(\d{1,2})(?:,(\d{1,2}))?')
HEX_COLOR_CODES = re.compile(r'([0-9a-f]{6})(?:,([0-9a-f]{6}))?', re.IGNORECASE)
# Remaining C0 controls (newline excluded) become spaces so offsets do not shift
CONTROL_CODES = re.compile(r'[\x00-\x09\x0b-\x1f]')

TOGGLES = {
    BOLD: 'bold',
    ITALIC: 'italic',
    UNDERLINE: 'underline',
    STRIKETHROUGH: 'strikethrough',
    MONOSPACE: 'monospace',
}


def tokenize_style(text: str | None) -> tuple[str, list[StyleRun]]:
    """Split a raw IRC message into plain text and style runs.

    Args:
        text: Raw message, possibly containing control codes.

    Returns:
        Tuple of the plain text and its style runs. Runs are consecutive,
        never overlap, and only cover text with some formatting active.
    """
    if not text:
        return '', []

    chunks: list[str] = []
    runs: list[StyleRun] = []
    offset = 0
    style = PLAIN
    chunk_start = 0
    position = 0

    def emit(until: int) -> None:
        nonlocal offset
        chunk = CONTROL_CODES.sub(' ', text[chunk_start:until])
        if not chunk:
            return
        chunks.append(chunk)
        if style:
            end = offset + len(chunk)
            if runs and runs[-1].end == offset and runs[-1].attributes == style:
                runs[-1] = replace(runs[-1], end=end)
            else:
                runs.append(StyleRun(start=offset, end=end, attributes=style))
        offset += len(chunk)

    while position < len(text):
        char = text[position]
        consumed = 1

        if char == RESET:
            emit(position)
            style = PLAIN
        elif char in TOGGLES:
            emit(position)
            name = TOGGLES[char]
            style = replace(style, **{name: not getattr(style, name)})
        elif char == COLOR:
            emit(position)
            match = COLOR_CODES.match(text, position + 1)
            if match:
                style = replace(style, text_color=int(match.group(1)))
                if match.group(2):
                    style = replace(style, bg_color=int(match.group(2)))
                consumed += len(match.group(0))
            else:
                style = replace(style, text_color=None, bg_color=None)
        elif char == HEX_COLOR:
            emit(position)
            match = HEX_COLOR_CODES.match(text, position + 1)
            if match:
                style = replace(style, hex_color=match.group(1).upper())
                if match.group(2):
                    style = replace(style, hex_bg_color=match.group(2).upper())
                consumed += len(match.group(0))
            else:
                style = replace(style, hex_color=None, hex_bg_color=None)
        elif char == REVERSE:
            emit(position)
            style = replace(style, text_color=style.bg_color, bg_color=style.text_color)
        else:
            position += 1
            continue

        position += consumed
        chunk_start = position

    emit(len(text))
    return ''.join(chunks), runs


def strip_style(text: str | None) -> str:
    """Return the message text with all styling control codes removed."""
    return tokenize_style(text)[0]
