"""Entity detectors for channels, links, emoji and nicks in plain message text."""

import re
from collections.abc import Iterable

from irc_markup.formatting.models import EntityKind, EntitySpan


# Detector patterns (pre-compiled for performance)
LINK = re.compile(
    r'(?<![\w@.])(?:(?:https?|ftp|ircs?)://|www\.)[^\s<>"\x00-\x1f]+',
    re.IGNORECASE,
)
LINK_TRAILING_PUNCTUATION = '.,;:!?\'"]}>'

# Characters shown as emoji by default
_PRESENTATION = (
    '[\U0001F000-\U0001F1E5\U0001F200-\U0001FAFF'
    '\u231A\u231B\u23E9-\u23EC\u23F0\u23F3\u25FD\u25FE\u2614\u2615\u2648-\u2653'
    '\u267F\u2693\u26A1\u26AA\u26AB\u26BD\u26BE\u26C4\u26C5\u26CE\u26D4\u26EA'
    '\u26F2\u26F3\u26F5\u26FA\u26FD\u2705\u270A\u270B\u2728\u274C\u274E'
    '\u2753-\u2755\u2757\u2795-\u2797\u27B0\u27BF\u2B1B\u2B1C\u2B50\u2B55]'
)
# Symbols that are plain text unless followed by a variation selector or skin tone
_TEXT_DEFAULT = '[\u2300-\u23FF\u2600-\u27BF\u2B00-\u2BFF]'
_TONE = '[\U0001F3FB-\U0001F3FF]'
_PICTOGRAPH = f'(?:{_PRESENTATION}\uFE0F?{_TONE}?|{_TEXT_DEFAULT}(?:\uFE0F{_TONE}?|{_TONE}))'

EMOJI = re.compile(
    # Regional indicator pairs (flags)
    '[\U0001F1E6-\U0001F1FF]{2}'
    # Pictographs with optional variation selector, skin tone and ZWJ continuations
    f'|{_PICTOGRAPH}(?:\u200D{_PICTOGRAPH})*'
    # Shortcodes such as :thumbsup:
    r'|(?<![\w:]):[a-z0-9_+-]+:(?![\w:])',
    re.IGNORECASE,
)

NICK = re.compile(r'[\w\[\]\\`^{|}-]+', re.ASCII)


def _channel_pattern(channel_prefixes: Iterable[str], user_mode_prefixes: Iterable[str]) -> re.Pattern | None:
    prefixes = ''.join(re.escape(prefix) for prefix in channel_prefixes)
    if not prefixes:
        return None
    modes = ''.join(re.escape(mode) for mode in user_mode_prefixes)
    mode_class = f'[{modes}]*' if modes else ''
    return re.compile(rf'(?:^|\s){mode_class}([{prefixes}][^ \x07]+)')


def find_channels(
    text: str,
    channel_prefixes: Iterable[str],
    user_mode_prefixes: Iterable[str] = (),
) -> list[EntitySpan]:
    """Find channel references such as ``#general`` or ``@&ops``.

    A channel starts the text or follows whitespace, may be preceded by user
    mode characters (which stay outside the span), and runs until the next
    space or BEL.

    Args:
        text: Plain message text.
        channel_prefixes: Characters that start a channel name.
        user_mode_prefixes: Characters that may precede a channel name.

    Returns:
        Channel spans in text order.
    """
    pattern = _channel_pattern(channel_prefixes, user_mode_prefixes)
    if pattern is None or not text:
        return []

    return [
        EntitySpan(start=match.start(1), end=match.end(1), kind=EntityKind.CHANNEL, value=match.group(1))
        for match in pattern.finditer(text)
    ]


def _trim_link(url: str) -> str:
    """Drop trailing punctuation that belongs to the sentence, not the URL."""
    while url:
        last = url[-1]
        if last in LINK_TRAILING_PUNCTUATION:
            url = url[:-1]
        elif last == ')' and url.count(')') > url.count('('):
            url = url[:-1]
        else:
            break
    return url


def find_links(text: str) -> list[EntitySpan]:
    """Find URLs and bare ``www.`` hosts.

    Returns:
        Link spans whose value is the target URL, with ``http://`` prepended
        for bare hosts.
    """
    if not text:
        return []

    spans = []
    for match in LINK.finditer(text):
        url = _trim_link(match.group(0))
        has_scheme = not url.lower().startswith('www.')
        # A bare scheme or host prefix is not a link
        host = url.split('://', 1)[1] if has_scheme else url[len('www.'):]
        if not host:
            continue
        target = url if has_scheme else f'http://{url}'
        spans.append(
            EntitySpan(start=match.start(), end=match.start() + len(url), kind=EntityKind.LINK, value=target)
        )
    return spans


def find_emoji(text: str) -> list[EntitySpan]:
    """Find Unicode emoji and ``:shortcode:`` emoji codes."""
    if not text:
        return []

    return [
        EntitySpan(start=match.start(), end=match.end(), kind=EntityKind.EMOJI, value=match.group(0))
        for match in EMOJI.finditer(text)
    ]


def find_names(text: str, known_users: Iterable[str]) -> list[EntitySpan]:
    """Find nick-shaped words that exactly match a known user.

    Args:
        text: Plain message text.
        known_users: Nicks present in the conversation.

    Returns:
        Mention spans in text order.
    """
    users = frozenset(known_users)
    if not users or not text:
        return []

    return [
        EntitySpan(start=match.start(), end=match.end(), kind=EntityKind.MENTION, value=match.group(0))
        for match in NICK.finditer(text)
        if match.group(0) in users
    ]
