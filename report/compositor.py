"""
compositor.py
Lays the rendered logo and the info lines out side by side.

Output: one line per row, logo column padded to LOGO_WIDTH, then a tab,
then the info text. The shorter column is padded with empty strings.
"""

from typing import List, Sequence

from core.system_info import SystemInfo

LABEL_COLOR = "\x1b[34m"
RESET = "\x1b[0m"
LOGO_WIDTH = 15


def format_info(label: str, value: str) -> str:
    if not value:
        return ""
    return f"{LABEL_COLOR}{label:>6}{RESET} ~ {value}"


def format_host(host: str) -> str:
    return f"{LABEL_COLOR}{host:>6}{RESET}"


def build_info_lines(info: SystemInfo) -> List[str]:
    lines = [
        format_host(info.host),
        format_info("os", info.os),
        format_info("kern", info.kernel),
        format_info("up", info.uptime),
        format_info("wm", info.wm),
        format_info("term", info.terminal),
        format_info("cpu", info.cpu),
        format_info("mem", info.memory),
        format_info("host", info.model),
    ]
    if info.packages != 0:
        lines.append(format_info("pkgs", str(info.packages)))
    return lines


def compose(logo_lines: Sequence[str], info_lines: Sequence[str]) -> List[str]:
    logo = list(logo_lines)
    info = list(info_lines)
    while len(logo) < len(info):
        logo.append("")
    while len(info) < len(logo):
        info.append("")
    return [f"{l:<{LOGO_WIDTH}}\t{i}" for l, i in zip(logo, info)]


def print_report(lines: Sequence[str]):
    for line in lines:
        print(line)
