"""Concrete PrinterDevice implementations."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import BinaryIO, TextIO

from soletrack.domain.exceptions import PrintError
from soletrack.domain.gateway.printer import PrinterDevice
from soletrack.infrastructure.printing.escpos import encode_escpos

logger = logging.getLogger(__name__)


class RawFilePrinter(PrinterDevice):
    """ESC/POS printer exposed as a writable file.

    On Linux a USB thermal printer shows up as ``/dev/usb/lp0``; pointing
    this at a regular file captures the exact byte stream instead.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._handle: BinaryIO | None = None

    def open(self) -> str:
        try:
            self._handle = self._path.open("ab")
        except OSError as exc:
            raise PrintError(f"Could not open printer {self._path}: {exc}") from exc
        return str(self._path)

    def print_lines(self, lines: list[str]) -> None:
        if self._handle is None:
            raise PrintError("No printer connected")
        try:
            self._handle.write(encode_escpos(lines))
            self._handle.flush()
        except OSError as exc:
            raise PrintError(f"Printer {self._path} rejected the job: {exc}") from exc

    def close(self) -> None:
        if self._handle is not None:
            try:
                self._handle.close()
            except OSError:
                logger.warning("Error while releasing printer %s", self._path, exc_info=True)
            self._handle = None


class ConsolePrinter(PrinterDevice):
    """Plain-text receipt on a text stream, for the host's own print flow."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._open = False

    def open(self) -> str:
        self._open = True
        return "console"

    def print_lines(self, lines: list[str]) -> None:
        if not self._open:
            raise PrintError("No printer connected")
        stream = self._stream or sys.stdout
        for line in lines:
            stream.write(line.center(32).rstrip() + "\n")
        stream.flush()

    def close(self) -> None:
        self._open = False
