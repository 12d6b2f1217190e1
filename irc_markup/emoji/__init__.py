"""Emoji name lookup."""

from irc_markup.emoji.names import DEFAULT_EMOJI_NAMES
from irc_markup.emoji.table import EmojiNameTable, EmojiTableFile, normalize_emoji_name


__all__ = [
    'DEFAULT_EMOJI_NAMES',
    'EmojiNameTable',
    'EmojiTableFile',
    'normalize_emoji_name',
]
