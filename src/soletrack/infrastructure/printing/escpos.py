"""ESC/POS framing for thermal receipt printers.

reset, center, UTF-8 body, full cut. Nothing else is sent, so any
ESC/POS-compatible device prints the same layout.
"""

from __future__ import annotations

ESC = b"\x1b"
GS = b"\x1d"

INITIALIZE = ESC + b"@"
ALIGN_CENTER = ESC + b"a\x01"
CUT = GS + b"VA\x00"


def encode_escpos(lines: list[str]) -> bytes:
    body = "".join(f"{line}\n" for line in lines).encode("utf-8")
    return INITIALIZE + ALIGN_CENTER + body + CUT
