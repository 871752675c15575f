import pytest

from cubscene.colors import text_to_rgb


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("gray50", 0x7F7F7F),
        ("thistle4", 0x8B7B8B),
        ("lightgreen", 0x90EE90),
    ],
)
def test_single_word_names(name, expected):
    assert text_to_rgb(name, None) == expected


def test_two_word_name_joined_with_end():
    assert text_to_rgb("ghost", "white") == 0xF8F8FF
    assert text_to_rgb("ghost", "white") == text_to_rgb("ghostwhite", None)


def test_duplicate_names_use_first_entry():
    # "dark slate" appears several times; the first entry wins.
    assert text_to_rgb("dark", "slate") == 0x2F4F4F
    assert text_to_rgb("light", "slate") == 0x778899


def test_none_is_transparent():
    assert text_to_rgb("none", None) == -1
    assert text_to_rgb("None", None) == -1


@pytest.mark.parametrize("name", ["RED", "Red", "rEd"])
def test_lookup_is_case_insensitive(name):
    assert text_to_rgb(name, None) == text_to_rgb("red", None)


def test_unknown_name_gives_zero():
    assert text_to_rgb("not-a-colour", None) == 0
    assert text_to_rgb("red", "planet") == 0


def test_end_is_ignored_for_hex_values():
    assert text_to_rgb("#ff00ff", "whatever") == 0xFF00FF


@pytest.mark.parametrize("spec, expected", [("#ff0000", 0xFF0000), ("#00FF00", 0xFF00), ("#0000ff", 0xFF)])
def test_hex_specification(spec, expected):
    assert text_to_rgb(spec, None) == expected


def test_hex_stops_at_first_non_digit():
    assert text_to_rgb("#12zz", None) == 0x12


def test_empty_hex_gives_zero():
    assert text_to_rgb("#", None) == 0
    assert text_to_rgb("#xyz", None) == 0


def test_grey_and_gray_spellings_agree():
    for level in (0, 1, 33, 50, 99, 100):
        assert text_to_rgb(f"gray{level}", None) == text_to_rgb(f"grey{level}", None)


def test_numbered_variant_one_matches_base_where_table_says_so():
    assert text_to_rgb("snow1", None) == text_to_rgb("snow", None)
    assert text_to_rgb("red1", None) == text_to_rgb("red", None)


def test_overlong_joined_name_is_truncated_and_unknown():
    assert text_to_rgb("x" * 40, "y" * 40) == 0