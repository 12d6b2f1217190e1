"""Presentation metadata for annotated output parts."""

from dataclasses import dataclass, field

from irc_markup.emoji import EmojiNameTable
from irc_markup.formatting.models import EntityKind, EntitySpan
from irc_markup.rendering.colors import mention_style_class


@dataclass(frozen=True)
class AnnotationMarkup:
    """Tag override and unescaped attributes for an annotated part."""

    tag: str | None = None
    attributes: dict[str, str] = field(default_factory=dict)


def annotation_markup(span: EntitySpan | None, emoji_names: EmojiNameTable) -> AnnotationMarkup:
    """Map an entity annotation to the attributes its fragments are wrapped with.

    Args:
        span: The part's annotation, or None for plain parts.
        emoji_names: Table used for emoji accessible labels.

    Returns:
        AnnotationMarkup; empty for plain parts.
    """
    if span is None:
        return AnnotationMarkup()

    if span.kind is EntityKind.LINK:
        return AnnotationMarkup(
            tag='a',
            attributes={'href': span.value, 'target': '_blank', 'rel': 'noopener'},
        )

    if span.kind is EntityKind.CHANNEL:
        return AnnotationMarkup(
            attributes={'class': 'inline-channel', 'role': 'button', 'tabindex': '0', 'data-chan': span.value},
        )

    if span.kind is EntityKind.EMOJI:
        attributes = {'class': 'emoji', 'role': 'img'}
        name = emoji_names.lookup(span.value)
        if name:
            attributes['aria-label'] = f'Emoji: {name}'
            attributes['title'] = name
        return AnnotationMarkup(attributes=attributes)

    return AnnotationMarkup(
        attributes={'role': 'button', 'class': f'user {mention_style_class(span.value)}', 'data-name': span.value},
    )
