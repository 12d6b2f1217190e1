"""Pydantic models with automatic IRC message rendering."""

from datetime import datetime

from pydantic import BaseModel, Field, PrivateAttr, computed_field

from irc_markup.config import ParserConfig
from irc_markup.emoji import EmojiNameTable
from irc_markup.formatting.style import strip_style
from irc_markup.parser import render


class FormattedMessage(BaseModel):
    """A chat message with computed plain text and HTML.

    Use the `from_raw()` factory method to attach a parser configuration and
    emoji table.

    Attributes:
        channel: Channel the message was sent to.
        nick: Sender's nick.
        raw_text: Original message with control codes.
        known_users: Nicks in the channel, highlighted as mentions.
        timestamp: When the message was received.

    Computed Fields:
        plain_text: Message with control codes removed.
        html: Rendered HTML.
        preview: Plain text truncated to 100 characters.
    """

    channel: str | None = None
    nick: str | None = None
    raw_text: str = ''
    known_users: list[str] = Field(default_factory=list)
    timestamp: datetime | None = None

    # Private rendering context (not serialized)
    _config: ParserConfig | None = PrivateAttr(default=None)
    _emoji_names: EmojiNameTable | None = PrivateAttr(default=None)

    @computed_field
    @property
    def plain_text(self) -> str:
        """Message with control codes removed."""
        return strip_style(self.raw_text)

    @computed_field
    @property
    def html(self) -> str:
        """Rendered HTML."""
        return render(self.raw_text, self.known_users, self._config, self._emoji_names)

    @computed_field
    @property
    def preview(self) -> str:
        """Plain text truncated to 100 characters."""
        return self._truncate(self.plain_text, 100)

    @staticmethod
    def _truncate(text: str, max_len: int) -> str:
        """Truncate text with ellipsis if needed."""
        if len(text) <= max_len:
            return text
        return text[: max_len - 3] + '...'

    @classmethod
    def from_raw(
        cls,
        *,
        text: str = '',
        channel: str | None = None,
        nick: str | None = None,
        known_users: list[str] | None = None,
        timestamp: datetime | None = None,
        config: ParserConfig | None = None,
        emoji_names: EmojiNameTable | None = None,
    ) -> 'FormattedMessage':
        """Factory method to create a message with rendering context.

        Args:
            text: Raw message with control codes.
            channel: Channel the message was sent to.
            nick: Sender's nick.
            known_users: Nicks to highlight as mentions.
            timestamp: Message datetime.
            config: Parser settings; defaults to the environment.
            emoji_names: Emoji table; defaults to the built-in one.

        Returns:
            FormattedMessage with context set.
        """
        message = cls(
            channel=channel,
            nick=nick,
            raw_text=text,
            known_users=known_users or [],
            timestamp=timestamp,
        )
        message._config = config
        message._emoji_names = emoji_names
        return message
