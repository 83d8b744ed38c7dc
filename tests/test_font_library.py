import pytest

from fractview.font import Font
from fractview.font_library import NULL_FONT, FontLibrary, UnknownFontError


class StubFont:
    def __init__(self, name, scale):
        self.name = name
        self.scale = scale
        self.builds = 0
        self.destroys = 0

    def build(self):
        self.builds += 1

    def destroy(self):
        self.destroys += 1


def test_first_id_follows_null_font():
    library = FontLibrary()
    font_id = library.add(StubFont("a", 6.0))
    assert font_id == NULL_FONT + 1


def test_add_builds_and_get_returns_font():
    library = FontLibrary()
    font = StubFont("a", 6.0)
    font_id = library.add(font)
    assert library.get(font_id) is font
    assert font.builds == 1


def test_equal_font_reuses_id():
    library = FontLibrary()
    first = library.add(StubFont("a", 6.0))
    again = StubFont("a", 6.0)
    assert library.add(again) == first
    assert again.builds == 0


def test_different_scale_gets_new_id():
    library = FontLibrary()
    first = library.add(StubFont("a", 6.0))
    second = library.add(StubFont("a", 8.0))
    assert second == first + 1


def test_unknown_id_raises():
    library = FontLibrary()
    with pytest.raises(UnknownFontError):
        library.get(NULL_FONT)


def test_remove_invalidates_and_destroys():
    library = FontLibrary()
    font = StubFont("a", 6.0)
    font_id = library.add(font)
    library.remove(font_id)
    assert font.destroys == 1
    with pytest.raises(UnknownFontError):
        library.get(font_id)
    assert library.add(StubFont("a", 6.0)) != font_id


def test_remove_unknown_warns():
    library = FontLibrary()
    with pytest.warns(RuntimeWarning):
        library.remove(42)


def test_clear_invalidates_all():
    library = FontLibrary()
    fonts = [StubFont("a", 6.0), StubFont("b", 6.0)]
    ids = [library.add(font) for font in fonts]
    library.clear()
    assert [font.destroys for font in fonts] == [1, 1]
    for font_id in ids:
        with pytest.raises(UnknownFontError):
            library.get(font_id)
    assert library.add(StubFont("a", 6.0)) not in ids


def test_reset_restarts_numbering():
    library = FontLibrary()
    library.add(StubFont("a", 6.0))
    library.add(StubFont("b", 6.0))
    library.reset()
    assert library.add(StubFont("c", 6.0)) == NULL_FONT + 1


def test_real_font_is_built_on_add():
    library = FontLibrary()
    font = Font("default", 8.0)
    font_id = library.add(font)
    assert library.get(font_id).is_built is True