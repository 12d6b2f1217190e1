"""Style tokenizing, entity detection and span merging for IRC messages."""

from irc_markup.formatting.merger import merge_spans
from irc_markup.formatting.models import (
    PLAIN,
    EntityKind,
    EntitySpan,
    OutputPart,
    StyleAttributes,
    StyledFragment,
    StyleRun,
    spans_overlap,
)
from irc_markup.formatting.patterns import find_channels, find_emoji, find_links, find_names
from irc_markup.formatting.resolver import FAMILY_PRIORITY, resolve_conflicts
from irc_markup.formatting.style import strip_style, tokenize_style


__all__ = [
    'FAMILY_PRIORITY',
    'PLAIN',
    'EntityKind',
    'EntitySpan',
    'OutputPart',
    'StyleAttributes',
    'StyleRun',
    'StyledFragment',
    'find_channels',
    'find_emoji',
    'find_links',
    'find_names',
    'merge_spans',
    'resolve_conflicts',
    'spans_overlap',
    'strip_style',
    'tokenize_style',
]
