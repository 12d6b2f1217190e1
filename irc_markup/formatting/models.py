"""Span and fragment types shared by the tokenizer, detectors and merge engine."""

from dataclasses import dataclass, field, replace
from enum import Enum


class EntityKind(Enum):
    """Entity families, listed in conflict-resolution priority order."""

    CHANNEL = 'channel'
    LINK = 'link'
    EMOJI = 'emoji'
    MENTION = 'mention'


@dataclass(frozen=True)
class StyleAttributes:
    """Combined IRC formatting state for a stretch of text.

    Attributes:
        bold: Bold toggle (``\\x02``).
        italic: Italic toggle (``\\x1d``).
        underline: Underline toggle (``\\x1f``).
        strikethrough: Strikethrough toggle (``\\x1e``).
        monospace: Monospace toggle (``\\x11``).
        text_color: Foreground colour index from ``\\x03``.
        bg_color: Background colour index from ``\\x03``.
        hex_color: Foreground ``RRGGBB`` from ``\\x04``.
        hex_bg_color: Background ``RRGGBB`` from ``\\x04``.
    """

    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    monospace: bool = False
    text_color: int | None = None
    bg_color: int | None = None
    hex_color: str | None = None
    hex_bg_color: str | None = None

    def merged(self, other: 'StyleAttributes') -> 'StyleAttributes':
        """Overlay ``other`` on top of these attributes.

        Flags are unioned; valued attributes set in ``other`` replace ours.
        """
        return StyleAttributes(
            bold=self.bold or other.bold,
            italic=self.italic or other.italic,
            underline=self.underline or other.underline,
            strikethrough=self.strikethrough or other.strikethrough,
            monospace=self.monospace or other.monospace,
            text_color=other.text_color if other.text_color is not None else self.text_color,
            bg_color=other.bg_color if other.bg_color is not None else self.bg_color,
            hex_color=other.hex_color if other.hex_color is not None else self.hex_color,
            hex_bg_color=other.hex_bg_color if other.hex_bg_color is not None else self.hex_bg_color,
        )

    def __bool__(self) -> bool:
        """True if any formatting is active."""
        return self != PLAIN


PLAIN = StyleAttributes()


@dataclass(frozen=True)
class StyleRun:
    """A range of plain text sharing one set of style attributes."""

    start: int
    end: int
    attributes: StyleAttributes


@dataclass(frozen=True)
class EntitySpan:
    """A recognized channel, link, emoji or mention.

    ``value`` holds the kind-specific payload: the channel name, the link
    target, the emoji code or the mentioned nick.
    """

    start: int
    end: int
    kind: EntityKind
    value: str


@dataclass(frozen=True)
class StyledFragment:
    """Contiguous text inside one output part with one exact style."""

    start: int
    end: int
    text: str
    attributes: StyleAttributes = PLAIN


@dataclass
class OutputPart:
    """One tile of the message: plain text or a single annotated entity."""

    start: int
    end: int
    annotation: EntitySpan | None = None
    fragments: list[StyledFragment] = field(default_factory=list)

    @property
    def text(self) -> str:
        return ''.join(fragment.text for fragment in self.fragments)

    def append(self, start: int, text: str, attributes: StyleAttributes) -> None:
        """Add text after the last fragment, coalescing equal styles."""
        end = start + len(text)
        if self.fragments and self.fragments[-1].attributes == attributes:
            last = self.fragments[-1]
            self.fragments[-1] = replace(last, end=end, text=last.text + text)
        else:
            self.fragments.append(StyledFragment(start=start, end=end, text=text, attributes=attributes))


def spans_overlap(a: 'EntitySpan | StyleRun', b: 'EntitySpan | StyleRun') -> bool:
    """True if two half-open ranges share at least one offset."""
    return a.start < b.end and b.start < a.end
