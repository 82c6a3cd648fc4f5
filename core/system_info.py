"""
system_info.py
Collects the host summary shown next to the logo.

Design Principles:
- Each field is a single read with its own fallback
- Nothing here raises; unknown values become "Unknown ..." or ""
- Memory and uptime come from psutil, the rest from /proc, /sys and the environment
"""

import getpass
import os
import re
import socket
import time
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Sequence

import psutil

from .command import safe_run

OS_RELEASE_FILES = ("/etc/os-release", "/usr/lib/os-release")
CPUINFO_PATH = "/proc/cpuinfo"
PROC_DIR = "/proc"
PRODUCT_NAME_PATH = "/sys/devices/virtual/dmi/id/product_name"

WM_PATTERN = re.compile(r"(awesome|xmonad.*|qtile|sway|i3|[bfo]*box|.*wm)")

MIB = 1048576


@dataclass
class SystemInfo:
    host: str
    os: str
    kernel: str
    uptime: str
    wm: str
    terminal: str
    cpu: str
    memory: str
    model: str
    packages: int = 0


def read_file(path: str) -> Optional[str]:
    try:
        with open(path, "r", errors="ignore") as f:
            return f.read()
    except OSError:
        return None


def get_os_name(files: Sequence[str] = OS_RELEASE_FILES) -> str:
    """PRETTY_NAME from the first readable os-release file."""
    for path in files:
        text = read_file(path)
        if text is None:
            continue
        for line in text.splitlines():
            if line.startswith("PRETTY_NAME="):
                return line[len("PRETTY_NAME="):].strip('"')
    return "Unknown OS"


def resolve_os_name(override: str = "", files: Sequence[str] = OS_RELEASE_FILES) -> str:
    if override:
        return override
    return get_os_name(files)


def get_kernel() -> str:
    try:
        return os.uname().release
    except AttributeError:
        return ""


def format_uptime(seconds: float) -> str:
    seconds = int(seconds)
    days = seconds // (24 * 3600)
    hours = (seconds % (24 * 3600)) // 3600
    minutes = (seconds % 3600) // 60
    return f"{days}d {hours:02d}:{minutes:02d}"


def get_uptime() -> str:
    try:
        return format_uptime(time.time() - psutil.boot_time())
    except (OSError, psutil.Error):
        return ""


def format_memory(used: int, total: int) -> str:
    return f"{used // MIB} / {total // MIB} MiB"


def get_memory() -> str:
    try:
        mem = psutil.virtual_memory()
    except (OSError, psutil.Error):
        return ""
    return format_memory(mem.used, mem.total)


def get_cpu(path: str = CPUINFO_PATH) -> str:
    text = read_file(path)
    if text is None:
        return "Unknown CPU"
    for line in text.splitlines():
        if line.startswith("model name"):
            return line.split(":", 1)[1].strip()
    return "Unknown CPU"


def get_host() -> str:
    try:
        hostname = socket.gethostname()
    except OSError:
        return "Unknown Host"
    try:
        username = getpass.getuser()
    except (KeyError, OSError):
        return "Unknown User"
    return f"{username:>6}@{hostname}"


def get_wm(environ: Mapping[str, str] = os.environ, proc_dir: str = PROC_DIR) -> str:
    for var in ("XDG_CURRENT_DESKTOP", "DESKTOP_SESSION"):
        if environ.get(var):
            return environ[var]
    try:
        pids = os.listdir(proc_dir)
    except OSError:
        return ""
    for pid in pids:
        if not pid.isdigit():
            continue
        comm = read_file(os.path.join(proc_dir, pid, "comm"))
        if comm is None:
            continue
        for line in comm.splitlines():
            if WM_PATTERN.search(line):
                return line
    return ""


def get_terminal(run_func: Callable = safe_run, environ: Mapping[str, str] = os.environ) -> str:
    code, _, _ = run_func(["tput", "-T", "try", "setaf", "0"])
    if code == 0:
        code, out, _ = run_func(["tput", "term"])
        if code == 0:
            return out.strip()
    return environ.get("TERM", "")


def get_model(path: str = PRODUCT_NAME_PATH) -> str:
    text = read_file(path)
    if not text:
        return "Unknown Model"
    return text.splitlines()[0]


def collect_system_info(os_name: str, packages: int = 0) -> SystemInfo:
    return SystemInfo(
        host=get_host(),
        os=os_name,
        kernel=get_kernel(),
        uptime=get_uptime(),
        wm=get_wm(),
        terminal=get_terminal(),
        cpu=get_cpu(),
        memory=get_memory(),
        model=get_model(),
        packages=packages,
    )
