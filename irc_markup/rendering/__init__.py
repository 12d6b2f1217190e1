"""HTML rendering of merged message parts."""

from irc_markup.rendering.annotations import AnnotationMarkup, annotation_markup
from irc_markup.rendering.colors import mention_style_class
from irc_markup.rendering.fragments import render_fragment


__all__ = [
    'AnnotationMarkup',
    'annotation_markup',
    'mention_style_class',
    'render_fragment',
]
