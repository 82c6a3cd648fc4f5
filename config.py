"""
config.py
Runtime settings, read from the environment only.

- EF_OSNAME: overrides OS detection when non-empty
- EF_EXCLUDE_PKGM: comma-separated package source identifiers to skip
- EF_LOG_LEVEL: level for diagnostics on stderr (default WARNING)
"""

import logging
import os
from dataclasses import dataclass
from typing import FrozenSet, Mapping

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    os_name: str = ""
    excluded: FrozenSet[str] = frozenset()
    log_level: str = DEFAULT_LOG_LEVEL


def parse_exclusions(value: str) -> FrozenSet[str]:
    # split verbatim: "" yields {""}, which matches no source
    return frozenset(value.split(","))


def parse_log_level(value: str) -> str:
    name = value.strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


def load_settings(environ: Mapping[str, str] = os.environ) -> Settings:
    return Settings(
        os_name=environ.get("EF_OSNAME", ""),
        excluded=parse_exclusions(environ.get("EF_EXCLUDE_PKGM", "")),
        log_level=parse_log_level(environ.get("EF_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
    )
