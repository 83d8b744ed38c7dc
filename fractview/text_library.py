"""A registry of texts addressed by numeric identifiers."""

from __future__ import annotations

import warnings

from fractview.text import Text

NULL_TEXT = 0


class UnknownTextError(KeyError):
    """Raised when a text identifier is unknown."""


class TextLibrary:
    """Keeps texts under identifiers starting from 1.

    Adding a text with the same string and colour as a stored one returns the
    existing identifier.
    """

    def __init__(self) -> None:
        self._cache: dict[int, Text] = {}
        self._current_id = 1

    def get(self, text_id: int) -> Text:
        """Return the text with ``text_id``."""
        try:
            return self._cache[text_id]
        except KeyError:
            raise UnknownTextError(f"wrong text ID {text_id!r}") from None

    def add(self, text: Text) -> int:
        """Store ``text`` unless an equal one is present; return its identifier."""
        for text_id, cached in self._cache.items():
            if cached.text == text.text and cached.color == text.color:
                return text_id
        text_id = self._current_id
        self._cache[text_id] = text
        self._current_id += 1
        return text_id

    def remove(self, text_id: int) -> None:
        """Destroy and forget the text; unknown identifiers only warn."""
        text = self._cache.pop(text_id, None)
        if text is None:
            warnings.warn(
                f"trying to remove a text with an unknown or invalid ID {text_id!r}",
                RuntimeWarning,
                stacklevel=2,
            )
            return
        text.destroy()

    def clear(self) -> None:
        """Destroy and forget every text."""
        for text in self._cache.values():
            text.destroy()
        self._cache.clear()

    def reset(self) -> None:
        """Forget everything and start numbering from 1 again."""
        self._cache.clear()
        self._current_id = 1