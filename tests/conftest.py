"""Shared pytest fixtures for irc-markup tests."""

import pytest

from irc_markup.config import ParserConfig, get_config
from irc_markup.emoji import EmojiNameTable


ENV_VARS = (
    'IRC_MARKUP_CHANNEL_PREFIXES',
    'IRC_MARKUP_USER_MODES',
    'IRC_MARKUP_CONTAINER_TAG',
    'IRC_MARKUP_EMOJI_TABLE',
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's environment out of configuration lookups."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def config():
    """Default parser configuration."""
    return ParserConfig()


@pytest.fixture
def emoji_names():
    """Built-in emoji name table."""
    return EmojiNameTable()

