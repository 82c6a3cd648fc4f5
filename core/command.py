"""
command.py
Whitelisted command execution for package-manager queries.

- Only executables known to a package source (plus tput) may run
- Never raises: failures come back as (code, stdout, stderr)
- Output is returned untouched (line counting depends on trailing newlines)
- No timeout: a hung package manager blocks its caller
"""

import logging
import shlex
import subprocess
from typing import List, Sequence, Tuple

logger = logging.getLogger(__name__)

WHITELIST_CMDS = {
    "dpkg-query", "pacman", "rpm", "apk", "equery", "zypper", "tput"
}


def safe_run(argv: Sequence[str]) -> Tuple[int, str, str]:
    """
    Execute a whitelisted command.
    Returns (code, stdout, stderr); 127 when blocked or missing.
    """
    args: List[str] = list(argv)
    base = args[0] if args else ""
    if base not in WHITELIST_CMDS:
        return 127, "", f"Command '{base}' blocked"
    logger.debug("CMD %s", " ".join(shlex.quote(a) for a in args))
    try:
        proc = subprocess.run(
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            errors="replace",
        )
    except FileNotFoundError:
        return 127, "", "Not found"
    except OSError as e:
        return 1, "", f"Error: {e}"
    return proc.returncode, proc.stdout or "", proc.stderr or ""
