"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from soletrack.domain.gateway.printer import PrinterDevice
from soletrack.domain.model.shop import ShopStore
from soletrack.infrastructure.config import Config
from soletrack.infrastructure.persistence.json_persistence_gateway import (
    JsonPersistenceGateway,
)
from soletrack.infrastructure.persistence.json_snapshot_codec import JsonSnapshotCodec
from soletrack.infrastructure.persistence.seed import demo_catalog
from soletrack.infrastructure.persistence.store_sync import open_store
from soletrack.infrastructure.printing.devices import ConsolePrinter, RawFilePrinter
from soletrack.infrastructure.recognition.gemini_gateway import GeminiRecognitionGateway


def config() -> Config:
    return Config.from_env()


def shop_store(cfg: Config | None = None) -> ShopStore:
    cfg = cfg or config()
    return open_store(JsonPersistenceGateway(cfg.data_dir), default_catalog=demo_catalog)


def recognition_gateway(store: ShopStore, cfg: Config | None = None) -> GeminiRecognitionGateway:
    cfg = cfg or config()
    return GeminiRecognitionGateway(
        api_key=cfg.gemini_api_key,
        model=cfg.gemini_model,
        timeout=cfg.recognition_timeout,
        currency=store.settings.currency.value,
    )


def printer_device(device: str | None = None, cfg: Config | None = None) -> PrinterDevice:
    cfg = cfg or config()
    target = device if device is not None else cfg.printer_device
    if target:
        return RawFilePrinter(Path(target))
    return ConsolePrinter()


def snapshot_codec() -> JsonSnapshotCodec:
    return JsonSnapshotCodec()
