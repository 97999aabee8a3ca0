"""Tests for ESC/POS framing and the printer devices."""

import io

import pytest

from soletrack.domain.exceptions import PrintError
from soletrack.infrastructure.printing.devices import ConsolePrinter, RawFilePrinter
from soletrack.infrastructure.printing.escpos import encode_escpos


class TestEscPos:

    def test_framing(self):
        data = encode_escpos(["Shop", "₹100.00"])
        assert data.startswith(b"\x1b@\x1ba\x01")
        assert data.endswith(b"\x1dVA\x00")
        assert "Shop\n₹100.00\n".encode("utf-8") in data


class TestRawFilePrinter:

    def test_writes_job(self, tmp_path):
        target = tmp_path / "lp0"
        printer = RawFilePrinter(target)
        assert printer.open() == str(target)
        printer.print_lines(["hello"])
        printer.close()
        assert target.read_bytes() == encode_escpos(["hello"])

    def test_not_connected(self, tmp_path):
        with pytest.raises(PrintError, match="No printer connected"):
            RawFilePrinter(tmp_path / "lp0").print_lines(["x"])

    def test_unopenable_device(self, tmp_path):
        with pytest.raises(PrintError):
            RawFilePrinter(tmp_path / "no" / "such" / "lp0").open()


class TestConsolePrinter:

    def test_centers_lines(self):
        stream = io.StringIO()
        printer = ConsolePrinter(stream)
        printer.open()
        printer.print_lines(["abc", ""])
        printer.close()
        assert stream.getvalue() == " " * 14 + "abc\n\n"
        with pytest.raises(PrintError):
            printer.print_lines(["late"])
