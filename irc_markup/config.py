"""Parser configuration loaded from the environment."""

import os
import re
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from irc_markup.errors import ConfigError


TAG_NAME = re.compile(r'^[a-zA-Z][a-zA-Z0-9-]*$')


class ParserConfig(BaseModel):
    """Settings for message parsing and rendering.

    Attributes:
        channel_prefixes: Characters that start a channel name. These should
            come from the server's CHANTYPES once capability negotiation is
            wired up.
        user_mode_prefixes: Nick mode characters that may precede a channel
            reference. These should come from the server's PREFIX.
        container_tag: Tag wrapping styled fragments outside links.
        emoji_table_path: Optional JSON file with extra emoji names.
    """

    model_config = ConfigDict(frozen=True)

    channel_prefixes: tuple[str, ...] = ('#', '&')
    user_mode_prefixes: tuple[str, ...] = ('!', '@', '%', '+')
    container_tag: str = 'span'
    emoji_table_path: Path | None = None

    @field_validator('channel_prefixes', 'user_mode_prefixes')
    @classmethod
    def _single_characters(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for prefix in value:
            if len(prefix) != 1 or prefix.isspace():
                raise ValueError(f'prefix must be a single non-space character, got {prefix!r}')
        return value

    @field_validator('container_tag')
    @classmethod
    def _tag_name(cls, value: str) -> str:
        if not TAG_NAME.match(value):
            raise ValueError(f'invalid tag name {value!r}')
        return value


def _split_characters(value: str) -> tuple[str, ...]:
    """``'#&'`` or ``'#,&'`` -> ``('#', '&')``."""
    return tuple(char for char in value if char not in ', ')


def load_config(environ: Mapping[str, str] | None = None) -> ParserConfig:
    """Build a ParserConfig from environment variables.

    Reads ``IRC_MARKUP_CHANNEL_PREFIXES``, ``IRC_MARKUP_USER_MODES``,
    ``IRC_MARKUP_CONTAINER_TAG`` and ``IRC_MARKUP_EMOJI_TABLE``; unset
    variables keep their defaults.

    Raises:
        ConfigError: If a variable holds an invalid value.
    """
    environ = os.environ if environ is None else environ
    values: dict[str, object] = {}

    if 'IRC_MARKUP_CHANNEL_PREFIXES' in environ:
        values['channel_prefixes'] = _split_characters(environ['IRC_MARKUP_CHANNEL_PREFIXES'])
    if 'IRC_MARKUP_USER_MODES' in environ:
        values['user_mode_prefixes'] = _split_characters(environ['IRC_MARKUP_USER_MODES'])
    if environ.get('IRC_MARKUP_CONTAINER_TAG'):
        values['container_tag'] = environ['IRC_MARKUP_CONTAINER_TAG']
    if environ.get('IRC_MARKUP_EMOJI_TABLE'):
        values['emoji_table_path'] = Path(environ['IRC_MARKUP_EMOJI_TABLE']).expanduser()

    try:
        return ParserConfig(**values)
    except ValidationError as e:
        raise ConfigError(f'Invalid irc-markup configuration: {e}') from e


@lru_cache(maxsize=1)
def get_config() -> ParserConfig:
    """Process-wide configuration, read from the environment once."""
    return load_config()
