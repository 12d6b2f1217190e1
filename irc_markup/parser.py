"""Turn raw IRC messages into styled, annotated HTML."""

import logging
from collections.abc import Iterable, Mapping
from functools import lru_cache
from pathlib import Path

from irc_markup.config import ParserConfig, get_config
from irc_markup.emoji import EmojiNameTable
from irc_markup.formatting.merger import merge_spans
from irc_markup.formatting.models import EntityKind, OutputPart
from irc_markup.formatting.patterns import find_channels, find_emoji, find_links, find_names
from irc_markup.formatting.resolver import FAMILY_PRIORITY, resolve_conflicts
from irc_markup.formatting.style import tokenize_style
from irc_markup.rendering import annotation_markup, render_fragment


logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def _emoji_table(path: Path | None) -> EmojiNameTable:
    return EmojiNameTable.load(path)


def _known_users(known_users: Iterable[str] | Mapping | None) -> list[str]:
    """Normalize the caller's user list; mappings count as no users."""
    if known_users is None:
        return []
    if isinstance(known_users, Mapping):
        logger.debug('Expected a list of nicks, got a mapping; treating as no known users')
        return []
    return list(known_users)


def parse_message(
    text: str | None,
    known_users: Iterable[str] | Mapping | None = None,
    config: ParserConfig | None = None,
) -> list[OutputPart]:
    """Tokenize, detect entities and merge them into output parts.

    Args:
        text: Raw message with IRC control codes.
        known_users: Nicks that should be highlighted as mentions.
        config: Parser settings. Defaults to the environment configuration.

    Returns:
        Parts tiling the plain text of the message.
    """
    config = config or get_config()
    plain, runs = tokenize_style(text)
    if not plain:
        return []

    users = _known_users(known_users)
    detectors = {
        EntityKind.CHANNEL: lambda: find_channels(plain, config.channel_prefixes, config.user_mode_prefixes),
        EntityKind.LINK: lambda: find_links(plain),
        EntityKind.EMOJI: lambda: find_emoji(plain),
        EntityKind.MENTION: lambda: find_names(plain, users),
    }
    spans = resolve_conflicts(detectors[kind]() for kind in FAMILY_PRIORITY)
    return merge_spans(plain, spans, runs)


def render_parts(
    parts: Iterable[OutputPart],
    emoji_names: EmojiNameTable,
    container_tag: str = 'span',
) -> str:
    """Serialize output parts to HTML.

    Every fragment of an annotated part is wrapped with the annotation's
    attributes, so style boundaries inside an entity never break its markup.
    """
    html_parts = []
    for part in parts:
        markup = annotation_markup(part.annotation, emoji_names)
        html_parts.extend(render_fragment(fragment, markup, container_tag) for fragment in part.fragments)
    return ''.join(html_parts)


def render(
    text: str | None,
    known_users: Iterable[str] | Mapping | None = None,
    config: ParserConfig | None = None,
    emoji_names: EmojiNameTable | None = None,
) -> str:
    """Render a raw IRC message to HTML.

    Args:
        text: Raw message with IRC control codes.
        known_users: Nicks that should be highlighted as mentions. A mapping
            is treated as no known users.
        config: Parser settings. Defaults to the environment configuration.
        emoji_names: Emoji name table. Defaults to the built-in table plus
            any configured overrides.

    Returns:
        HTML string; empty for empty input.
    """
    config = config or get_config()
    parts = parse_message(text, known_users, config)
    if emoji_names is None:
        emoji_names = _emoji_table(config.emoji_table_path)
    return render_parts(parts, emoji_names, config.container_tag)
