"""
palette.py
Color placeholder tokens used by the logo catalog and their escape sequences.

Substitution is literal: one left-to-right pass, the longest token starting
at a position wins, and replaced text is never scanned again.
"""

from typing import Sequence, Tuple

RESET = "\x1b[0m"

COLOR_PALETTE: Tuple[Tuple[str, str], ...] = (
    ("${c0}", RESET + "\x1b[38;5;248m"),
    ("${c1}", RESET + "\x1b[31;1m"),
    ("${c2}", RESET + "\x1b[32;1m"),
    ("${c3}", RESET + "\x1b[33;1m"),
    ("${c4}", RESET + "\x1b[34;1m"),
    ("${c5}", RESET + "\x1b[35;1m"),
    ("${c6}", RESET + "\x1b[36;1m"),
    ("${c7}", RESET + "\x1b[37;1m"),
)

TOKEN_MARKER = "${c"


def apply_palette(line: str, palette: Sequence[Tuple[str, str]] = COLOR_PALETTE) -> str:
    # longest first so that a token sharing a prefix with another still wins
    ordered = sorted((p for p in palette if p[0]), key=lambda p: len(p[0]), reverse=True)
    out = []
    i = 0
    while i < len(line):
        for token, replacement in ordered:
            if line.startswith(token, i):
                out.append(replacement)
                i += len(token)
                break
        else:
            out.append(line[i])
            i += 1
    return "".join(out)
