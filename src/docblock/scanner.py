"""Tag line scanner.

Splits a single tag line into name, type, variable and description:

    * @param {number} $count Number of items.
      ^name  ^type     ^variable ^description

The scanner walks the line once with a cursor. The current ScanPhase decides
which token is expected next; phases that do not apply to the tag (no type,
no argument) are skipped. Two cursor policies exist, see ScanMode.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, auto

from .config import ParserConfig, ScanMode
from .lines import strip_closing_delimiter

_WORD = re.compile(r"\S*")


class ScanPhase(Enum):
    AWAIT_TAG = auto()
    AWAIT_TYPE = auto()
    AWAIT_VARIABLE = auto()
    AWAIT_DESCRIPTION = auto()
    DONE = auto()


@dataclass
class ScannedTag:
    """Fields extracted from one tag line, before positions are resolved."""

    name: str = ""
    type: str = ""
    variable: str = ""
    description: str = ""
    column: int = 0  # column of the '@'
    warnings: list[str] = field(default_factory=list)


def _consume_until(line: str, start: int, stop: str) -> str:
    """Return line[start:] up to (not including) the next ``stop`` char."""
    end = line.find(stop, start)
    return line[start:] if end == -1 else line[start:end]


def _word_at(line: str, start: int) -> str:
    return _WORD.match(line, start).group(0)


def _skip_whitespace(line: str, pos: int) -> int:
    while pos < len(line) and line[pos].isspace():
        pos += 1
    return pos


def _closing_brace(line: str, start: int) -> int | None:
    """Index of the '}' matching the '{' at ``start``, or None."""
    depth = 0
    for index in range(start, len(line)):
        if line[index] == "{":
            depth += 1
        elif line[index] == "}":
            depth -= 1
            if depth == 0:
                return index
    return None


class TagScanner:
    """Single-use scanner over one tag line."""

    def __init__(self, line: str, config: ParserConfig):
        self.line = line
        self.config = config
        self.pos = 0
        self.phase = ScanPhase.AWAIT_TAG
        self.tag = ScannedTag()

        if config.mode is ScanMode.COMPAT:
            self._handlers = {
                ScanPhase.AWAIT_TAG: self._compat_tag,
                ScanPhase.AWAIT_TYPE: self._compat_type,
                ScanPhase.AWAIT_VARIABLE: self._compat_variable,
                ScanPhase.AWAIT_DESCRIPTION: self._compat_description,
            }
        else:
            # A "*/" sharing the tag line is not part of the description
            self.line = strip_closing_delimiter(line)
            self._handlers = {
                ScanPhase.AWAIT_TAG: self._strict_tag,
                ScanPhase.AWAIT_TYPE: self._strict_type,
                ScanPhase.AWAIT_VARIABLE: self._strict_variable,
                ScanPhase.AWAIT_DESCRIPTION: self._strict_description,
            }

    def scan(self) -> ScannedTag:
        while self.phase is not ScanPhase.DONE:
            self._handlers[self.phase]()
        return self.tag

    def _advance_phase(self):
        """Move to the next phase that applies to the collected tag name."""
        name = self.tag.name
        if self.phase is ScanPhase.AWAIT_TAG and self.config.has_type(name):
            self.phase = ScanPhase.AWAIT_TYPE
        elif self.phase in (
            ScanPhase.AWAIT_TAG,
            ScanPhase.AWAIT_TYPE,
        ) and self.config.has_argument(name):
            self.phase = ScanPhase.AWAIT_VARIABLE
        else:
            self.phase = ScanPhase.AWAIT_DESCRIPTION

    # Strict: the cursor moves by exactly what was consumed

    def _strict_tag(self):
        at = self.line.find("@", self.pos)
        if at == -1:
            self.tag.warnings.append("no tag name found")
            self.phase = ScanPhase.DONE
            return

        self.tag.name = "@" + _word_at(self.line, at + 1)
        self.tag.column = at
        self.pos = at + len(self.tag.name)
        self._advance_phase()

    def _strict_type(self):
        line = self.line
        self.pos = _skip_whitespace(line, self.pos)

        if self.pos < len(line) and line[self.pos] == "{":
            end = _closing_brace(line, self.pos)
            if end is None:
                self.tag.type = line[self.pos :].rstrip()
                self.tag.warnings.append(
                    f"{self.tag.name}: unterminated type {self.tag.type!r}"
                )
                self.pos = len(line)
            else:
                self.tag.type = line[self.pos : end + 1]
                self.pos = end + 1
        else:
            word = _word_at(line, self.pos)
            # "$name" is the variable, the tag just has no type
            if word and not word.startswith("$"):
                self.tag.type = word
                self.pos += len(word)

        self._advance_phase()

    def _strict_variable(self):
        self.pos = _skip_whitespace(self.line, self.pos)
        word = _word_at(self.line, self.pos)
        if word.startswith("$"):
            self.tag.variable = word
            self.pos += len(word)
        else:
            self.tag.warnings.append(f"{self.tag.name}: missing $variable")
        self._advance_phase()

    def _strict_description(self):
        self.tag.description = self.line[self.pos :].strip()
        self.phase = ScanPhase.DONE

    # Compat: buffer-length cursor arithmetic, one character per step

    def _compat_tag(self):
        at = self.line.find("@", self.pos)
        if at == -1:
            self.tag.warnings.append("no tag name found")
            self.phase = ScanPhase.DONE
            return

        self.tag.name = "@" + _consume_until(self.line, at + 1, " ")
        self.tag.column = at
        self.pos = at + len(self.tag.name)
        self._advance_phase()

    def _compat_type(self):
        if self.pos >= len(self.line):
            self.phase = ScanPhase.DONE
            return

        # _compat_tag leaves the cursor on the space after the name, so the
        # "{" and fallback branches only run when a scan starts mid-line
        char = self.line[self.pos]
        if char == "{":
            self.tag.type = "{" + _consume_until(self.line, self.pos + 1, "}") + "}"
            # Skips the character after the closing brace
            self.pos += len(self.tag.type) + 1
        elif char == " ":
            self.tag.type = _consume_until(self.line, self.pos + 1, " ")
            self.pos += len(self.tag.type) + 1
        else:
            self.pos += 1
            return

        self._advance_phase()

    def _compat_variable(self):
        if self.pos >= len(self.line):
            self.phase = ScanPhase.DONE
            return

        if self.line[self.pos] != "$":
            self.pos += 1
            return

        self.tag.variable = "$" + _consume_until(self.line, self.pos + 1, " ")
        # Skips the character after the variable
        self.pos += len(self.tag.variable) + 1
        self._advance_phase()

    def _compat_description(self):
        self.tag.description = self.line[self.pos :]
        self.phase = ScanPhase.DONE


def scan_tag_line(line: str, config: ParserConfig | None = None) -> ScannedTag:
    """Extract name, type, variable and inline description from a tag line.

    Args:
        line: One physical line that starts a tag (see is_tag_line)
        config: Parser settings (defaults to ParserConfig())

    Returns:
        ScannedTag; fields the line does not provide are left empty
    """
    return TagScanner(line, config or ParserConfig()).scan()
