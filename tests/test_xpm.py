import pytest

from cubscene.colors import text_to_rgb
from cubscene.image import BIG_ENDIAN
from cubscene.xpm import (
    XpmError,
    parse_xpm,
    quoted_lines,
    read_xpm_file,
    split_words,
    strip_comments,
    xpm_from_data,
)

SIMPLE = ["2 2 2 1", ". c #FF0000", "# c None", ".#", "#."]


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tb   c\t") == ["a", "b", "c"]


def test_split_words_keeps_other_whitespace():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_strip_block_comment_keeps_length():
    text = '/* XPM */\n"ab"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "/*" not in result
    assert list(quoted_lines(result)) == ["ab"]


def test_strip_comment_inside_quotes_is_kept():
    text = '"a/*b*/c"'
    assert strip_comments(text) == text


def test_strip_line_comment():
    text = '"x" // note\n"y"'
    result = strip_comments(text)
    assert "note" not in result
    assert len(result) == len(text)
    assert list(quoted_lines(result)) == ["x", "y"]


def test_quoted_lines_ignores_unterminated():
    assert list(quoted_lines('x "ab" y "cd" "e')) == ["ab", "cd"]


def test_parse_simple():
    img = xpm_from_data(SIMPLE)
    assert (img.width, img.height) == (2, 2)
    assert img.get_pixel(0, 0) == text_to_rgb("#FF0000")
    assert img.get_pixel(1, 0) == 0xFF000000
    assert img.get_pixel(0, 1) == 0xFF000000
    assert img.get_pixel(1, 1) == text_to_rgb("#FF0000")


def test_parse_accepts_iterator():
    assert parse_xpm(iter(SIMPLE)).pixels() == xpm_from_data(SIMPLE).pixels()


def test_parse_named_colors_with_long_keys():
    lines = ["2 1 2 3", "abc c red", "def c Blue", "abcdef"]
    img = parse_xpm(lines)
    assert img.pixels() == [text_to_rgb("red"), text_to_rgb("blue")]


def test_parse_two_word_color_name():
    img = parse_xpm(["1 1 1 1", "x c light blue", "x"])
    assert img.get_pixel(0, 0) == text_to_rgb("light", "blue")


def test_duplicate_short_key_last_wins():
    img = parse_xpm(["1 1 2 1", "x c red", "x c blue", "x"])
    assert img.get_pixel(0, 0) == text_to_rgb("blue")


def test_duplicate_long_key_first_wins():
    img = parse_xpm(["1 1 2 3", "xyz c red", "xyz c blue", "xyz"])
    assert img.get_pixel(0, 0) == text_to_rgb("red")


def test_unknown_pixel_key_is_black():
    img = parse_xpm(["2 1 1 1", "x c white", "xq"])
    assert img.pixels() == [text_to_rgb("white"), 0]


def test_big_endian_image_bytes():
    img = parse_xpm(SIMPLE, BIG_ENDIAN)
    assert bytes(img.data[:4]) == text_to_rgb("#FF0000").to_bytes(4, "big")


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["0 2 1 1", "x c red", "x", "x"],
        ["2 2 1"],
        ["1 1 1 1", "x red", "x"],
        ["1 1 1 1", "x c", "x"],
        ["1 2 1 1", "x c red", "x"],
        ["1 1 2 1", "x c red"],
    ],
)
def test_malformed_data(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_read_file_matches_data(tmp_path):
    body = "\n".join(f'"{line}",' for line in SIMPLE)
    text = "/* XPM */\nstatic char *img[] = {\n/* columns rows colors */\n" + body + "\n};\n"
    path = tmp_path / "img.xpm"
    path.write_text(text)
    assert read_xpm_file(path).pixels() == xpm_from_data(SIMPLE).pixels()


def test_read_missing_file(tmp_path):
    with pytest.raises(XpmError):
        read_xpm_file(tmp_path / "missing.xpm")