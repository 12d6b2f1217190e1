"""Read-only emoji name table with optional JSON overrides."""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel, Field

from irc_markup.emoji.names import DEFAULT_EMOJI_NAMES


logger = logging.getLogger(__name__)


def normalize_emoji_name(code: str) -> str:
    """Normalize a shortcode so ``:Thumbs-Up:`` and ``thumbs_up`` match.

    Unicode emoji pass through unchanged apart from surrounding whitespace.
    """
    code = code.strip()
    if code.isascii():
        code = code.strip(':').lower().replace('-', '_')
    return code


class EmojiTableFile(BaseModel):
    """On-disk override format: ``{"names": {"code": "name"}}``."""

    names: dict[str, str] = Field(default_factory=dict)


class EmojiNameTable:
    """Immutable lookup from emoji code to a human readable name."""

    def __init__(self, names: Mapping[str, str] | None = None):
        """Initialize the table.

        Args:
            names: Code to name mapping. Defaults to the built-in table.
        """
        source = DEFAULT_EMOJI_NAMES if names is None else names
        self._names = MappingProxyType({normalize_emoji_name(code): name for code, name in source.items()})

    def lookup(self, code: str) -> str | None:
        """Get the name for an emoji code, or None if unknown."""
        return self._names.get(normalize_emoji_name(code))

    def __contains__(self, code: str) -> bool:
        return self.lookup(code) is not None

    def __len__(self) -> int:
        return len(self._names)

    @classmethod
    def load(cls, path: Path | None = None) -> 'EmojiNameTable':
        """Build the built-in table, overlaid with names from a JSON file.

        Args:
            path: Optional override file. Unreadable files are logged and
                ignored.

        Returns:
            EmojiNameTable instance.
        """
        names = dict(DEFAULT_EMOJI_NAMES)
        if path is None:
            return cls(names)

        try:
            with open(path, encoding='utf-8') as f:
                data = json.load(f)
            names.update(EmojiTableFile.model_validate(data).names)
        except (OSError, json.JSONDecodeError, ValueError) as e:
            logger.warning(f'Failed to load emoji table from {path}: {e}')
            return cls(names)

        logger.debug(f'Loaded emoji table overrides from {path}')
        return cls(names)
