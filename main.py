"""
main.py
Entry point for efetch.

Workflow:
1. Read settings from the environment (EF_OSNAME, EF_EXCLUDE_PKGM, EF_LOG_LEVEL).
2. Build the logo registry from the built-in catalog.
3. Resolve the OS identifier (override or os-release).
4. Count packages across eligible sources in parallel (progress on stderr).
5. Collect the remaining host fields.
6. Print the logo and the info lines side by side.

The program always exits 0; every failure degrades to a missing or zero field.
"""

import logging
from typing import Optional

from config import Settings, load_settings
from core.logo_catalog import CATALOG
from core.logos import LogoRegistry, build_registry, get_logo
from core.packages import count_packages, eligible_sources
from core.system_info import collect_system_info, resolve_os_name
from logging_utils import configure_logging
from report.compositor import build_info_lines, compose, print_report
from terminal_ui import TerminalUI

logger = logging.getLogger(__name__)


def run(settings: Settings, registry: LogoRegistry, ui: Optional[TerminalUI] = None) -> int:
    os_name = resolve_os_name(settings.os_name)
    logger.debug("OS identifier: %s", os_name)

    ui = ui or TerminalUI()
    ui.start(total_tasks=len(eligible_sources(os_name, settings.excluded)))
    try:
        packages = count_packages(
            os_name,
            settings.excluded,
            on_complete=lambda outcome: ui.update(f"Counted: {outcome.identifier}"),
        )
    finally:
        ui.stop()

    info = collect_system_info(os_name, packages)
    lines = compose(get_logo(registry, os_name), build_info_lines(info))
    print_report(lines)
    return 0


def main() -> int:
    settings = load_settings()
    configure_logging(settings.log_level)
    registry = build_registry(CATALOG)
    return run(settings, registry)


if __name__ == "__main__":
    raise SystemExit(main())
