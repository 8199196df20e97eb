"""Line-level helpers: classification, continuation lines and offsets."""

from __future__ import annotations

import re
from typing import Sequence

TAG_PATTERN = re.compile(r"^\s*\*\s*@\S+")
EMPTY_PATTERN = re.compile(r"^[\s*/]*$")
LINE_BREAK = re.compile(r"\r?\n")

_LEADING_DECORATION = re.compile(r"^\s*(?:/\*+|\*+)?\s?")
_TRAILING_DECORATION = re.compile(r"\s*\*+/\s*$")


def split_lines(text: str) -> list[str]:
    return LINE_BREAK.split(text)


def is_empty_line(line: str) -> bool:
    """Check if a line holds nothing but comment decoration.

    A line is empty if it contains only whitespace, asterisks and slashes,
    which covers spacer lines (" *") as well as the "/**" and "*/" delimiters.
    """
    return EMPTY_PATTERN.match(line) is not None


def is_tag_line(line: str) -> bool:
    """Check if a line starts a tag: an asterisk, optional spaces, then @name."""
    return TAG_PATTERN.match(line) is not None


def strip_closing_delimiter(line: str) -> str:
    """Remove a trailing "*/" (and the whitespace before it) from a line."""
    return _TRAILING_DECORATION.sub("", line)


def strip_decoration(line: str) -> str:
    """Remove the leading "*" (or "/**") and a trailing "*/" from a line.

    Leading whitespace and a leading run of asterisks are removed even when
    the line has no comment asterisk, so indentation and a leading "**bold**"
    marker do not survive.
    """
    line = _LEADING_DECORATION.sub("", line, count=1)
    return strip_closing_delimiter(line).rstrip()


def collect_continuation_lines(lines: Sequence[str], start: int) -> tuple[str, ...]:
    """Collect the lines that continue a tag's description.

    Starts at ``start`` (the line after the tag line) and stops before the
    first empty line or tag line, which is left for the caller to handle.

    Args:
        lines: All lines of the docblock
        start: Index of the first candidate line

    Returns:
        The continuation lines, unmodified (empty if there are none)
    """
    collected = []
    for line in lines[start:]:
        if is_empty_line(line) or is_tag_line(line):
            break
        collected.append(line)
    return tuple(collected)


def offset_of(lines: Sequence[str], line: int, column: int) -> int:
    """Convert a (line, column) pair into an absolute character offset.

    Every preceding line contributes its length plus one separator (LF).
    """
    return sum(len(text) for text in lines[:line]) + line + column
