"""Reading XPM pixmaps, from files or from in-memory line lists, into images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

from cubscene.colors import text_to_rgb
from cubscene.image import LITTLE_ENDIAN, Image, new_image

__all__ = [
    "XpmError",
    "parse_xpm",
    "quoted_lines",
    "read_xpm_file",
    "split_words",
    "strip_comments",
    "xpm_from_data",
]

TRANSPARENT = 0xFF000000

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or is malformed."""


def split_words(text: str) -> list[str]:
    """Split *text* on spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _find_outside_quotes(text: str, needle: str) -> int:
    quoted = False
    for pos, char in enumerate(text):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def _blank(chars: list[str], start: int, count: int) -> None:
    for pos in range(start, min(start + count, len(chars))):
        chars[pos] = " "


def strip_comments(text: str) -> str:
    """Replace C comments outside double quotes with spaces, keeping the length."""
    chars = list(text)
    current = text
    while (begin := _find_outside_quotes(current, "/*")) != -1:
        end = current.find("*/", begin + 2)
        end = -1 if end == -1 else end - (begin + 2)
        _blank(chars, begin, end + 4)
        current = "".join(chars)
    while (begin := _find_outside_quotes(current, "//")) != -1:
        end = current.find("\n", begin + 2)
        end = -1 if end == -1 else end - (begin + 2)
        _blank(chars, begin, end + 3)
        current = "".join(chars)
    return current


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in *text*, in order."""
    for match in _QUOTED.finditer(text):
        yield match.group(1)


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _read_header(lines: Iterator[str]) -> tuple[int, int, int, int]:
    words = split_words(_next_line(lines, "header line"))
    if len(words) < 4:
        raise XpmError("header needs width, height, colours and chars per pixel")
    values = tuple(_atoi(word) for word in words[:4])
    if min(values) <= 0:
        raise XpmError(f"invalid header values {values}")
    return values  # type: ignore[return-value]


def _read_colors(lines: Iterator[str], count: int, cpp: int) -> dict[str, int]:
    colors: dict[str, int] = {}
    # Short keys are looked up directly and the last definition wins;
    # longer keys are searched and the first definition wins.
    direct = cpp <= 2
    for _ in range(count):
        line = _next_line(lines, "colour line")
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"no colour key in {line!r}") from None
        if index >= len(words):
            raise XpmError(f"no colour after key in {line!r}")
        end = words[index + 1] if index + 1 < len(words) else None
        rgb = text_to_rgb(words[index], end)
        key = line[:cpp]
        if direct:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)
    return colors


def parse_xpm(lines: Iterable[str], endian: int = LITTLE_ENDIAN) -> Image:
    """Build an image from XPM lines: header, colour table, then pixel rows."""
    source = iter(lines)
    width, height, ncolors, cpp = _read_header(source)
    colors = _read_colors(source, ncolors, cpp)
    try:
        image = new_image(width, height, endian)
    except ValueError as exc:
        raise XpmError(str(exc)) from exc
    for y in range(height):
        row = _next_line(source, "pixel row")
        for x in range(width):
            color = colors.get(row[cpp * x:cpp * x + cpp], 0)
            if color == -1:
                color = TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def xpm_from_data(lines: Iterable[str], endian: int = LITTLE_ENDIAN) -> Image:
    """Build an image from the strings of an in-memory XPM array."""
    return parse_xpm(list(lines), endian)


def read_xpm_file(path: str | PathLike[str], endian: int = LITTLE_ENDIAN) -> Image:
    """Read an XPM file and return its image."""
    try:
        with open(path, "rb") as handle:
            raw = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc.strerror}") from exc
    text = strip_comments(raw.decode("latin-1"))
    return parse_xpm(quoted_lines(text), endian)