"""A registry of built fonts addressed by numeric identifiers."""

from __future__ import annotations

import warnings

from fractview.font import Font

NULL_FONT = 0


class UnknownFontError(KeyError):
    """Raised when a font identifier is unknown or no longer valid."""


class FontLibrary:
    """Keeps fonts under identifiers starting from 1.

    Adding a font equal in name and scale to a valid one returns the existing
    identifier; removed identifiers are never handed out again.
    """

    def __init__(self) -> None:
        self._cache: dict[int, Font] = {}
        self._invalid: set[int] = set()
        self._current_id = 1

    def _is_valid(self, font_id: int) -> bool:
        return font_id in self._cache and font_id not in self._invalid

    def get(self, font_id: int) -> Font:
        """Return the font with ``font_id``."""
        if not self._is_valid(font_id):
            raise UnknownFontError(f"wrong font ID {font_id!r}")
        return self._cache[font_id]

    def add(self, font: Font) -> int:
        """Build and store ``font`` unless an equal one is present; return its identifier."""
        for font_id, cached in self._cache.items():
            if (
                cached.scale == font.scale
                and cached.name == font.name
                and font_id not in self._invalid
            ):
                return font_id
        font.build()
        font_id = self._current_id
        self._cache[font_id] = font
        self._current_id += 1
        return font_id

    def remove(self, font_id: int) -> None:
        """Destroy the font and invalidate its identifier; unknown ones only warn."""
        if not self._is_valid(font_id):
            warnings.warn(
                f"trying to remove a font with an unknown or invalid ID {font_id!r}",
                RuntimeWarning,
                stacklevel=2,
            )
            return
        self._cache[font_id].destroy()
        self._invalid.add(font_id)

    def clear(self) -> None:
        """Destroy every font and invalidate every identifier."""
        for font_id, font in self._cache.items():
            font.destroy()
            self._invalid.add(font_id)

    def reset(self) -> None:
        """Forget everything and start numbering from 1 again."""
        self._cache.clear()
        self._invalid.clear()
        self._current_id = 1