"""Receipt printer capability.

A device is acquired with ``open()`` and must be released with
``close()``. Each device decides how receipt lines become output (raw
command bytes, plain text). Tests substitute an in-memory fake.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class PrinterDevice(ABC):

    @abstractmethod
    def open(self) -> str:
        """Acquire the device and return a human-readable name for it."""

    @abstractmethod
    def print_lines(self, lines: list[str]) -> None:
        """Render one receipt on the acquired device.

        Raises PrintError if the device rejects the job.
        """

    @abstractmethod
    def close(self) -> None:
        """Release the device. Safe to call when not open."""
