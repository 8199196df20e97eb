"""Parser configuration.

Controls which tags carry a type or an argument, and how the tag line
scanner advances its cursor. Settings can be loaded from the environment:

    DOCBLOCK_SCAN_MODE       strict | compat (default: strict)
    DOCBLOCK_TYPE_TAGS       comma-separated tag names (default: @param,@return)
    DOCBLOCK_ARGUMENT_TAGS   comma-separated tag names (default: @param)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping

from .errors import ConfigError

DEFAULT_TYPE_TAGS = frozenset({"@param", "@return"})
DEFAULT_ARGUMENT_TAGS = frozenset({"@param"})


class ScanMode(Enum):
    """Cursor policy for the tag line scanner."""

    STRICT = "strict"  # advance by exactly the characters consumed
    COMPAT = "compat"  # advance by buffer length, as older parsers did


def _tag_set(tags: Iterable[str], setting: str) -> frozenset[str]:
    result = set()
    for tag in tags:
        tag = tag.strip()
        if not tag:
            continue
        if not tag.startswith("@") or len(tag) == 1:
            raise ConfigError(f"{setting}: invalid tag name {tag!r}", setting=setting)
        result.add(tag)
    return frozenset(result)


def _split(value: str) -> list[str]:
    return [part for part in value.split(",") if part.strip()]


@dataclass(frozen=True)
class ParserConfig:
    """Settings for a single parse."""

    type_tags: frozenset[str] = DEFAULT_TYPE_TAGS
    argument_tags: frozenset[str] = DEFAULT_ARGUMENT_TAGS
    mode: ScanMode = ScanMode.STRICT

    def __post_init__(self):
        # Accept any iterable of names, store validated frozensets
        object.__setattr__(self, "type_tags", _tag_set(self.type_tags, "type_tags"))
        object.__setattr__(
            self, "argument_tags", _tag_set(self.argument_tags, "argument_tags")
        )
        if not isinstance(self.mode, ScanMode):
            object.__setattr__(self, "mode", parse_mode(self.mode))

    def has_type(self, tag_name: str) -> bool:
        return tag_name.strip() in self.type_tags

    def has_argument(self, tag_name: str) -> bool:
        return tag_name.strip() in self.argument_tags

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ParserConfig:
        """Build a config from DOCBLOCK_* environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            ParserConfig with unset variables left at their defaults

        Raises:
            ConfigError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ

        kwargs = {}
        if "DOCBLOCK_SCAN_MODE" in env:
            kwargs["mode"] = parse_mode(env["DOCBLOCK_SCAN_MODE"])
        if "DOCBLOCK_TYPE_TAGS" in env:
            kwargs["type_tags"] = _split(env["DOCBLOCK_TYPE_TAGS"])
        if "DOCBLOCK_ARGUMENT_TAGS" in env:
            kwargs["argument_tags"] = _split(env["DOCBLOCK_ARGUMENT_TAGS"])

        return cls(**kwargs)


def parse_mode(value) -> ScanMode:
    """Convert 'strict' / 'compat' (any case) to a ScanMode."""
    if isinstance(value, ScanMode):
        return value
    try:
        return ScanMode(str(value).strip().lower())
    except ValueError:
        raise ConfigError(
            f"unknown scan mode {value!r} (expected 'strict' or 'compat')",
            setting="mode",
        ) from None
