"""Registration of on-screen texts against the font currently in use."""

from __future__ import annotations

import os
from typing import Union

from fractview.font import DEFAULT_FONT_NAME, Font
from fractview.font_library import NULL_FONT, FontLibrary
from fractview.text_descriptor import TextDrawDescriptor
from fractview.text_library import TextLibrary

DEFAULT_FONT_SCALE = 6.0
_COLOR_MASK = 0xFFFFFFFF


class TextManager:
    """Keeps one descriptor per distinct (text, colour, position).

    The built-in font at scale 6 is loaded on creation.
    """

    def __init__(self, fonts: FontLibrary, texts: TextLibrary) -> None:
        self.fonts = fonts
        self.texts = texts
        self.font_in_use = NULL_FONT
        self._descriptors: dict[TextDrawDescriptor, TextDrawDescriptor] = {}
        self.load_font(DEFAULT_FONT_NAME, DEFAULT_FONT_SCALE)

    def __len__(self) -> int:
        return len(self._descriptors)

    def load_font(self, path: Union[str, os.PathLike], scale: float) -> int:
        """Make the font at ``path`` (or the built-in ``"default"``) the one in use."""
        if str(path) == DEFAULT_FONT_NAME:
            font = Font(DEFAULT_FONT_NAME, scale)
        else:
            font = Font(str(path), scale, path)
        self.font_in_use = self.fonts.add(font)
        return self.font_in_use

    def register_text(
        self, x: int, y: int, color: int, text: str
    ) -> tuple[TextDrawDescriptor, bool]:
        """Return the descriptor for the text and whether it was newly created.

        An existing descriptor laid out with another font is rebuilt with the
        font in use.
        """
        key = TextDrawDescriptor(text, color & _COLOR_MASK, x, y)
        existing = self._descriptors.get(key)
        if existing is None:
            key.build(self.font_in_use, self.fonts, self.texts)
            self._descriptors[key] = key
            return key, True
        if self.texts.get(existing.id).font_id != self.font_in_use:
            self.texts.remove(existing.id)
            existing.build(self.font_in_use, self.fonts, self.texts)
        return existing, False

    def clear(self) -> None:
        """Forget every registered descriptor."""
        self._descriptors.clear()

    def destroy(self) -> None:
        """Release the manager's descriptors."""
        self._descriptors.clear()