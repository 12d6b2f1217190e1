"""Tests for annotation markup and fragment serialization."""

from irc_markup.emoji import EmojiNameTable
from irc_markup.formatting.models import EntityKind, StyleAttributes, StyledFragment
from irc_markup.rendering import AnnotationMarkup, annotation_markup, mention_style_class, render_fragment
from tests.fixtures.spans import span


def fragment(text: str, **attributes) -> StyledFragment:
    return StyledFragment(start=0, end=len(text), text=text, attributes=StyleAttributes(**attributes))


class TestMentionStyleClass:
    """Tests for mention colour classes."""

    def test_known_values(self):
        assert mention_style_class('alice') == 'color-31'
        assert mention_style_class('bob') == 'color-20'

    def test_stable(self):
        assert mention_style_class('someone') == mention_style_class('someone')

    def test_range(self):
        for name in ('a', 'zz', 'Guest12345', '[bot]', 'x' * 100):
            number = int(mention_style_class(name).removeprefix('color-'))
            assert 1 <= number <= 32


class TestAnnotationMarkup:
    """Tests for annotation_markup."""

    def test_plain_part(self, emoji_names):
        assert annotation_markup(None, emoji_names) == AnnotationMarkup()

    def test_link(self, emoji_names):
        markup = annotation_markup(span(0, 5, EntityKind.LINK, 'http://example.com'), emoji_names)
        assert markup.tag == 'a'
        assert markup.attributes == {'href': 'http://example.com', 'target': '_blank', 'rel': 'noopener'}

    def test_channel(self, emoji_names):
        markup = annotation_markup(span(0, 8, EntityKind.CHANNEL, '#general'), emoji_names)
        assert markup.tag is None
        assert markup.attributes == {
            'class': 'inline-channel',
            'role': 'button',
            'tabindex': '0',
            'data-chan': '#general',
        }

    def test_known_emoji(self, emoji_names):
        markup = annotation_markup(span(0, 6, EntityKind.EMOJI, ':tada:'), emoji_names)
        assert markup.attributes == {
            'class': 'emoji',
            'role': 'img',
            'aria-label': 'Emoji: party popper',
            'title': 'party popper',
        }

    def test_unknown_emoji_has_no_label(self, emoji_names):
        markup = annotation_markup(span(0, 6, EntityKind.EMOJI, ':nope:'), emoji_names)
        assert markup.attributes == {'class': 'emoji', 'role': 'img'}

    def test_custom_emoji_table(self):
        markup = annotation_markup(span(0, 6, EntityKind.EMOJI, ':tada:'), EmojiNameTable({'tada': 'celebration'}))
        assert markup.attributes['title'] == 'celebration'

    def test_mention(self, emoji_names):
        markup = annotation_markup(span(0, 5, EntityKind.MENTION, 'alice'), emoji_names)
        assert markup.attributes == {'role': 'button', 'class': 'user color-31', 'data-name': 'alice'}


class TestRenderFragment:
    """Tests for render_fragment."""

    def test_plain_text_is_unwrapped(self):
        assert render_fragment(fragment('hello')) == 'hello'

    def test_text_is_escaped(self):
        assert render_fragment(fragment('<b>&"')) == '&lt;b&gt;&amp;&quot;'

    def test_bold(self):
        assert render_fragment(fragment('hi', bold=True)) == '<span class="irc-bold">hi</span>'

    def test_class_order(self):
        html = render_fragment(fragment('x', italic=True, bg_color=1, text_color=4, bold=True, monospace=True))
        assert html == '<span class="irc-bold irc-fg4 irc-bg1 irc-italic irc-monospace">x</span>'

    def test_underline_and_strikethrough(self):
        html = render_fragment(fragment('x', underline=True, strikethrough=True))
        assert html == '<span class="irc-underline irc-strikethrough">x</span>'

    def test_color_zero_is_rendered(self):
        assert render_fragment(fragment('x', text_color=0)) == '<span class="irc-fg0">x</span>'

    def test_hex_colors(self):
        html = render_fragment(fragment('x', hex_color='FF0000', hex_bg_color='00FF00'))
        assert html == '<span style="color:#FF0000;background-color:#00FF00">x</span>'

    def test_hex_background_needs_foreground(self):
        assert render_fragment(fragment('x', hex_bg_color='00FF00')) == 'x'
        html = render_fragment(fragment('x', bold=True, hex_bg_color='00FF00'))
        assert html == '<span class="irc-bold">x</span>'

    def test_container_tag_override(self):
        assert render_fragment(fragment('x', bold=True), container_tag='em') == '<em class="irc-bold">x</em>'

    def test_link_markup(self):
        markup = AnnotationMarkup(tag='a', attributes={'href': 'http://x.com/?a=1&b=2'})
        assert render_fragment(fragment('x'), markup) == '<a href="http://x.com/?a=1&amp;b=2">x</a>'

    def test_link_tag_beats_container_tag(self):
        markup = AnnotationMarkup(tag='a', attributes={'href': 'http://x.com'})
        assert render_fragment(fragment('x'), markup, container_tag='em') == '<a href="http://x.com">x</a>'

    def test_annotation_class_comes_first(self, emoji_names):
        markup = annotation_markup(span(0, 8, EntityKind.CHANNEL, '#general'), emoji_names)
        html = render_fragment(fragment('#general', bold=True), markup)
        assert html == (
            '<span class="inline-channel irc-bold" role="button" tabindex="0" data-chan="#general">#general</span>'
        )

    def test_attribute_values_are_escaped(self, emoji_names):
        markup = annotation_markup(span(0, 5, EntityKind.MENTION, 'a"<b'), emoji_names)
        html = render_fragment(fragment('a"<b'), markup)
        assert 'data-name="a&quot;&lt;b"' in html

    def test_markup_is_not_mutated(self, emoji_names):
        markup = annotation_markup(span(0, 8, EntityKind.CHANNEL, '#general'), emoji_names)
        render_fragment(fragment('#general', bold=True), markup)
        assert markup.attributes['class'] == 'inline-channel'
