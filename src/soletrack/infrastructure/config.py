"""Runtime configuration, read from the environment."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path

from soletrack.domain.exceptions import ValidationError
from soletrack.infrastructure.recognition.gemini_gateway import DEFAULT_MODEL, DEFAULT_TIMEOUT

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Config:
    # JSON files for catalog, ledger and settings
    data_dir: Path = DEFAULT_DATA_DIR
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_MODEL
    recognition_timeout: float = DEFAULT_TIMEOUT
    # Raw ESC/POS device, e.g. /dev/usb/lp0; empty means print to the console
    printer_device: str = ""

    @staticmethod
    def from_env(environ: dict[str, str] | None = None) -> Config:
        env = os.environ if environ is None else environ
        return Config(
            data_dir=Path(env.get("SOLETRACK_DATA_DIR") or DEFAULT_DATA_DIR),
            gemini_api_key=env.get("GEMINI_API_KEY", ""),
            gemini_model=env.get("SOLETRACK_GEMINI_MODEL") or DEFAULT_MODEL,
            recognition_timeout=_seconds(
                "SOLETRACK_RECOGNITION_TIMEOUT", env.get("SOLETRACK_RECOGNITION_TIMEOUT")
            ),
            printer_device=env.get("SOLETRACK_PRINTER_DEVICE", ""),
        )


def _seconds(name: str, raw: str | None) -> float:
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        raise ValidationError(f"{name} must be a number of seconds, got {raw!r}") from None
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(f"{name} must be a positive number of seconds, got {raw!r}")
    return value
