"""
logos.py
Logo registry, selection and rendering.

- build_registry parses catalog text once into an immutable registry
- select_logo picks the entry whose pattern text is longest among those
  that match the OS identifier (first registered wins a tie)
- render_logo substitutes color tokens and appends the alignment line
"""

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple

from .logo_catalog import DEFAULT_LOGO
from .palette import COLOR_PALETTE, TOKEN_MARKER, apply_palette

logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = ";;"
PATTERN_MARKER = "("


@dataclass(frozen=True)
class LogoEntry:
    pattern: str
    lines: Tuple[str, ...]
    regex: Optional["re.Pattern[str]"] = None

    def matches(self, os_identifier: str) -> bool:
        return self.regex is not None and self.regex.search(os_identifier) is not None


DEFAULT_ENTRY = LogoEntry(pattern="", lines=DEFAULT_LOGO)


class LogoRegistry:
    """Read-only pattern -> LogoEntry mapping, in registration order."""

    def __init__(self, entries: Mapping[str, LogoEntry]):
        self._entries = MappingProxyType(dict(entries))

    @property
    def entries(self) -> Mapping[str, LogoEntry]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._entries

    def __iter__(self):
        return iter(self._entries.values())

    def get(self, pattern: str) -> Optional[LogoEntry]:
        return self._entries.get(pattern)


def parse_block(block: str) -> Tuple[Optional[str], List[str]]:
    """Return (pattern, art lines) for one catalog block; pattern is None if undeclared."""
    lines = block.split("\n")
    for i, line in enumerate(lines):
        stripped = line.strip()
        if not stripped.startswith(PATTERN_MARKER):
            continue
        pattern = stripped
        if pattern.endswith("*"):
            pattern = pattern[:-1]
        if pattern.startswith("["):
            pattern = pattern[1:]
        art = [
            l.lstrip(" ").replace("\t", "")
            for l in lines[i + 1:]
            if TOKEN_MARKER in l
        ]
        return pattern, art
    return None, []


def build_registry(catalog_text: str) -> LogoRegistry:
    entries = {}
    for block in catalog_text.split(BLOCK_SEPARATOR):
        pattern, art = parse_block(block)
        if pattern is None:
            continue
        try:
            regex = re.compile(pattern)
        except re.error as e:
            logger.warning("Invalid pattern: %s Error: %s", pattern, e)
            continue
        entries[pattern] = LogoEntry(pattern=pattern, lines=tuple(art), regex=regex)
    logger.debug("Registered %d logos", len(entries))
    return LogoRegistry(entries)


def select_logo(registry: LogoRegistry, os_identifier: str) -> LogoEntry:
    best = None
    longest = 0
    for entry in registry:
        if entry.matches(os_identifier) and len(entry.pattern) > longest:
            best = entry
            longest = len(entry.pattern)
    if best is None:
        return DEFAULT_ENTRY
    return best


def render_logo(entry: LogoEntry, palette: Sequence[Tuple[str, str]] = COLOR_PALETTE) -> List[str]:
    rendered = [apply_palette(line, palette) for line in entry.lines]
    rendered.append("\r")
    return rendered


def get_logo(registry: LogoRegistry, os_identifier: str) -> List[str]:
    return render_logo(select_logo(registry, os_identifier))
