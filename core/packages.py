"""
packages.py
Best-effort installed-package count across package managers.

Sources:
- Command sources: run a package-manager query, one package per output line
- Directory sources: count files under a package manager's install database

Every eligible source runs in its own worker thread; results are summed once
all workers finish. Failures never reach the caller: a missing executable,
a failed command or an unreadable directory simply contributes 0.
"""

import glob
import logging
import os
import re
import shutil
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

from .command import safe_run

logger = logging.getLogger(__name__)

OK = "ok"
UNAVAILABLE = "unavailable"
EXECUTION_FAILED = "execution-failed"
ENUMERATION_FAILED = "enumeration-failed"


@dataclass(frozen=True)
class CommandSource:
    identifier: str
    os_pattern: str
    executable: str
    args: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DirectorySource:
    identifier: str
    os_pattern: str
    globs: Tuple[str, ...]


PackageSource = Union[CommandSource, DirectorySource]


@dataclass(frozen=True)
class SourceOutcome:
    """Result of querying one source. count is 0 unless reason is OK (or a partial directory walk)."""
    identifier: str
    count: int
    reason: str = OK

    @property
    def ok(self) -> bool:
        return self.reason == OK


DPKG_ARGS = ("-f", "${Package}\n", "-W")

PACKAGE_SOURCES: Tuple[PackageSource, ...] = (
    CommandSource("dpkg-query", r"(?i)^debian", "dpkg-query", DPKG_ARGS),
    CommandSource("dpkg-query", r"(?i)^ubuntu", "dpkg-query", DPKG_ARGS),
    CommandSource("pacman", r"(?i)^arch", "pacman", ("-Q",)),
    CommandSource("rpm", r"(?i)^fedora", "rpm", ("-qa",)),
    CommandSource("apk", r"(?i)^alpine", "apk", ("info",)),
    CommandSource("equery", r"(?i)^gentoo", "equery", ("list", "*")),
    CommandSource("zypper", r"(?i)^opensuse", "zypper", ("se", "-i")),
    DirectorySource("kiss", r"(?i)^kiss", ("/var/db/kiss/installed/*/",)),
    DirectorySource("cpt-list", r"(?i)^cpt-list", ("/var/db/cpt/installed/*/",)),
    DirectorySource("homebrew", r"(?i)^homebrew", ("/usr/local/Cellar/*/", "/usr/local/Caskroom/*/")),
    DirectorySource("portage", r"(?i)^portage", ("/var/db/pkg/*/*/",)),
    DirectorySource("pkgtool", r"(?i)^pkgtool", ("/var/log/packages/*",)),
    DirectorySource("eopkg", r"(?i)^eopkg", ("/var/lib/eopkg/package/*",)),
)

RunFunc = Callable[[Sequence[str]], Tuple[int, str, str]]
WhichFunc = Callable[[str], Optional[str]]


def eligible_sources(os_identifier: str, excluded: Iterable[str],
                     sources: Sequence[PackageSource] = PACKAGE_SOURCES) -> List[PackageSource]:
    excluded = set(excluded)
    return [
        s for s in sources
        if re.search(s.os_pattern, os_identifier) and s.identifier not in excluded
    ]


def count_command_source(source: CommandSource, run_func: RunFunc = safe_run,
                         which: WhichFunc = shutil.which) -> SourceOutcome:
    if which(source.executable) is None:
        return SourceOutcome(source.identifier, 0, UNAVAILABLE)
    code, out, err = run_func([source.executable, *source.args])
    if code != 0:
        logger.debug("%s exited %d: %s", source.executable, code, err.strip())
        return SourceOutcome(source.identifier, 0, EXECUTION_FAILED)
    # the final newline leaves an empty trailing element, which is not a package
    return SourceOutcome(source.identifier, len(out.split("\n")) - 1)


def _raise(err: OSError):
    raise err


def count_files(path: str) -> int:
    """Recursively count non-directory entries below path. Walk errors propagate.

    A path that is not a directory counts as one entry itself. Symlinks to
    directories are counted, not followed.
    """
    if not os.path.isdir(path):
        return 1
    count = 0
    for root, dirs, files in os.walk(path, onerror=_raise):
        count += len(files)
        count += sum(1 for d in dirs if os.path.islink(os.path.join(root, d)))
    return count


def count_directory_source(source: DirectorySource) -> SourceOutcome:
    total = 0
    reason = OK
    for pattern in source.globs:
        try:
            subtotal = sum(count_files(match) for match in glob.glob(pattern))
        except OSError as e:
            logger.debug("%s: enumerating %s failed: %s", source.identifier, pattern, e)
            reason = ENUMERATION_FAILED
            continue
        total += subtotal
    return SourceOutcome(source.identifier, total, reason)


def count_source(source: PackageSource, run_func: RunFunc = safe_run,
                 which: WhichFunc = shutil.which) -> SourceOutcome:
    if isinstance(source, CommandSource):
        return count_command_source(source, run_func, which)
    return count_directory_source(source)


def collect_outcomes(os_identifier: str, excluded: Iterable[str],
                     sources: Sequence[PackageSource] = PACKAGE_SOURCES,
                     run_func: RunFunc = safe_run,
                     which: WhichFunc = shutil.which,
                     on_complete: Optional[Callable[[SourceOutcome], None]] = None) -> List[SourceOutcome]:
    """Query every eligible source concurrently and wait for all of them."""
    selected = eligible_sources(os_identifier, excluded, sources)
    if not selected:
        return []

    outcomes: List[SourceOutcome] = []
    with ThreadPoolExecutor(max_workers=len(selected)) as executor:
        future_map = {executor.submit(count_source, s, run_func, which): s for s in selected}
        for fut in as_completed(future_map):
            source = future_map[fut]
            try:
                outcome = fut.result()
            except Exception as e:
                logger.debug("%s: unexpected failure: %s", source.identifier, e)
                outcome = SourceOutcome(source.identifier, 0, EXECUTION_FAILED)
            logger.debug("%s: %d (%s)", outcome.identifier, outcome.count, outcome.reason)
            outcomes.append(outcome)
            if on_complete is not None:
                on_complete(outcome)
    return outcomes


def count_packages(os_identifier: str, excluded: Iterable[str],
                   sources: Sequence[PackageSource] = PACKAGE_SOURCES,
                   run_func: RunFunc = safe_run,
                   which: WhichFunc = shutil.which,
                   on_complete: Optional[Callable[[SourceOutcome], None]] = None) -> int:
    outcomes = collect_outcomes(os_identifier, excluded, sources, run_func, which, on_complete)
    return sum(o.count for o in outcomes)
