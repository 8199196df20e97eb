"""Data models for parsed docblocks."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field


@dataclass(frozen=True)
class Location:
    """A point in the docblock text."""

    line: int  # 0-based line index
    column: int  # 0-based column within the line
    offset: int  # absolute character offset (LF separators)


@dataclass(frozen=True)
class TagPosition:
    start: Location
    end: Location


@dataclass(frozen=True)
class Tag:
    """A single @-tag and everything collected for it."""

    name: str  # "@param", "@return", "@since"
    position: TagPosition
    type: str = ""  # "{number}" (JS style), "string" (PHP style) or ""
    variable: str = ""  # "$var" for argument-bearing tags
    description: str = ""
    multiline: bool = False  # True if continuation lines were appended

    def to_dict(self) -> dict:
        """Render as plain dicts, e.g. for JSON output."""
        return {
            "name": self.name,
            "description": self.description,
            "type": self.type,
            "variable": self.variable,
            "multiline": self.multiline,
            "position": asdict(self.position),
        }


@dataclass(frozen=True)
class Docblock:
    """Parsed docblock: summary, description and tags in source order."""

    summary: str = ""
    description: str = ""
    tags: tuple[Tag, ...] = ()
    warnings: tuple[str, ...] = field(default=(), compare=False)  # Degraded input

    def get_tags(self, name: str) -> list[Tag]:
        """Return all tags named ``name`` (with or without the leading '@')."""
        if not name.startswith("@"):
            name = f"@{name}"
        return [tag for tag in self.tags if tag.name == name]

    def to_dict(self) -> dict:
        return {
            "summary": self.summary,
            "description": self.description,
            "tags": [tag.to_dict() for tag in self.tags],
        }
