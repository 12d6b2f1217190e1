"""Render IRC messages with styling, channels, links, emoji and mentions."""

from irc_markup.config import ParserConfig, get_config, load_config
from irc_markup.emoji import EmojiNameTable
from irc_markup.errors import ConfigError, MarkupContractError, MarkupError
from irc_markup.models import FormattedMessage
from irc_markup.parser import parse_message, render, render_parts


__all__ = [
    'ConfigError',
    'EmojiNameTable',
    'FormattedMessage',
    'MarkupContractError',
    'MarkupError',
    'ParserConfig',
    'get_config',
    'load_config',
    'parse_message',
    'render',
    'render_parts',
]
