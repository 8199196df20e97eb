"""Docblock parser.

Walks the lines of a docblock once, collecting the summary, then the
description, then the tags:

    /**
     * Summary.
     *
     * Description.
     *
     * @param string $name Who to greet.
     * @return string The greeting,
     * over two lines.
     */

A blank line ends the summary; the first tag line ends the description for
good. Tag descriptions may continue on the following lines until a blank line
or the next tag.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto

from .config import ParserConfig, ScanMode
from .lines import (
    collect_continuation_lines,
    is_empty_line,
    is_tag_line,
    offset_of,
    split_lines,
    strip_decoration,
)
from .models import Docblock, Location, Tag, TagPosition
from .scanner import scan_tag_line

log = logging.getLogger(__name__)


class ParsePhase(Enum):
    SUMMARY = auto()
    DESCRIPTION = auto()
    TAGS = auto()


@dataclass
class _DocblockBuilder:
    """Mutable state owned by a single parse() call."""

    phase: ParsePhase = ParsePhase.SUMMARY
    summary: str = ""
    description: str = ""
    tags: list[Tag] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def warn(self, line_index: int, message: str):
        message = f"line {line_index}: {message}"
        log.debug("docblock warning: %s", message)
        self.warnings.append(message)

    def build(self) -> Docblock:
        return Docblock(
            summary=self.summary,
            description=self.description,
            tags=tuple(self.tags),
            warnings=tuple(self.warnings),
        )


def _parse_tag(
    lines: list[str], line_index: int, config: ParserConfig, builder: _DocblockBuilder
) -> tuple[Tag, int]:
    """Parse the tag starting at ``line_index``.

    Returns:
        The tag and the index of the last line it consumed
    """
    line = lines[line_index]
    scanned = scan_tag_line(line, config)
    for message in scanned.warnings:
        builder.warn(line_index, message)

    start = Location(
        line=line_index,
        column=scanned.column,
        offset=offset_of(lines, line_index, scanned.column),
    )

    description = scanned.description
    continuation = collect_continuation_lines(lines, line_index + 1)
    last_index = line_index + len(continuation)
    last_line = lines[last_index]

    if continuation:
        if config.mode is ScanMode.STRICT:
            continuation = tuple(strip_decoration(text) for text in continuation)
        description += "\n" + "\n".join(continuation)

    if config.mode is ScanMode.COMPAT:
        # Column stays at the tag line's length, offset follows the last line
        end_column = len(line)
    else:
        end_column = len(last_line)
    end = Location(
        line=last_index,
        column=end_column,
        offset=offset_of(lines, last_index, len(last_line)),
    )

    tag = Tag(
        name=scanned.name,
        type=scanned.type,
        variable=scanned.variable,
        description=description,
        multiline=bool(continuation),
        position=TagPosition(start=start, end=end),
    )
    return tag, last_index


def parse(text: str, config: ParserConfig | None = None) -> Docblock:
    """Parse a docblock comment.

    Never raises: malformed tags produce empty or partial fields, and a note
    in Docblock.warnings.

    Args:
        text: Full docblock text, delimiters included or not
        config: Parser settings (defaults to ParserConfig())

    Returns:
        Docblock with summary, description and tags in source order
    """
    config = config or ParserConfig()
    lines = split_lines(text)
    builder = _DocblockBuilder()

    index = 0
    while index < len(lines):
        line = lines[index]

        if is_empty_line(line):
            # Blank lines before any summary text (e.g. "/**") don't end it
            if builder.phase is ParsePhase.SUMMARY and builder.summary:
                builder.phase = ParsePhase.DESCRIPTION
            index += 1
            continue

        if is_tag_line(line):
            builder.phase = ParsePhase.TAGS
            tag, index = _parse_tag(lines, index, config, builder)
            log.debug(
                "parsed %s at line %d (multiline=%s)",
                tag.name,
                tag.position.start.line,
                tag.multiline,
            )
            builder.tags.append(tag)
            index += 1
            continue

        if builder.phase is ParsePhase.SUMMARY:
            builder.summary += strip_decoration(line)
        elif builder.phase is ParsePhase.DESCRIPTION:
            builder.description += strip_decoration(line)
        else:
            builder.warn(index, f"text outside any tag ignored: {line.strip()!r}")
        index += 1

    return builder.build()
