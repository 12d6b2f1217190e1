"""HTML serialization of styled fragments."""

import html

from irc_markup.formatting.models import StyleAttributes, StyledFragment
from irc_markup.rendering.annotations import AnnotationMarkup


def style_classes(attributes: StyleAttributes) -> list[str]:
    """CSS classes for IRC formatting, in a fixed order."""
    classes = []
    if attributes.bold:
        classes.append('irc-bold')
    if attributes.text_color is not None:
        classes.append(f'irc-fg{attributes.text_color}')
    if attributes.bg_color is not None:
        classes.append(f'irc-bg{attributes.bg_color}')
    if attributes.italic:
        classes.append('irc-italic')
    if attributes.underline:
        classes.append('irc-underline')
    if attributes.strikethrough:
        classes.append('irc-strikethrough')
    if attributes.monospace:
        classes.append('irc-monospace')
    return classes


def inline_style(attributes: StyleAttributes) -> str | None:
    """Inline CSS for hex colours, which have no class equivalent.

    A hex background is only applied together with a hex foreground.
    """
    if not attributes.hex_color:
        return None
    rules = [f'color:#{attributes.hex_color}']
    if attributes.hex_bg_color:
        rules.append(f'background-color:#{attributes.hex_bg_color}')
    return ';'.join(rules)


def render_fragment(
    fragment: StyledFragment,
    markup: AnnotationMarkup | None = None,
    container_tag: str = 'span',
) -> str:
    """Render one fragment as escaped text, wrapped in a tag when styled.

    Args:
        fragment: Fragment to render.
        markup: Annotation metadata of the enclosing part, if any.
        container_tag: Tag used when the annotation does not override it.

    Returns:
        HTML string.
    """
    attributes = dict(markup.attributes) if markup else {}
    tag = (markup.tag if markup else None) or container_tag

    classes = ' '.join(style_classes(fragment.attributes))
    if classes:
        attributes['class'] = f'{attributes["class"]} {classes}' if attributes.get('class') else classes

    style = inline_style(fragment.attributes)
    if style:
        attributes['style'] = style

    text = html.escape(fragment.text)
    if not attributes:
        return text

    attributes_string = ''.join(f' {key}="{html.escape(value)}"' for key, value in attributes.items())
    return f'<{tag}{attributes_string}>{text}</{tag}>'
