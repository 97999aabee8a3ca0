"""Application service: Update Settings use case."""

from __future__ import annotations

from dataclasses import replace

from soletrack.domain.model.settings import Currency, Settings
from soletrack.domain.model.shop import ShopStore


class UpdateSettingsHandler:

    def __init__(self, store: ShopStore) -> None:
        self._store = store

    def handle(
        self,
        currency: str | None = None,
        ai_recognition_enabled: bool | None = None,
        company_name: str | None = None,
        company_address: str | None = None,
        company_phone: str | None = None,
        company_logo: str | None = None,
    ) -> Settings:
        """Apply whichever fields are given; the rest keep their value."""
        settings = self._store.settings
        if currency is not None:
            settings = replace(settings, currency=Currency.parse(currency))
        if ai_recognition_enabled is not None:
            settings = replace(settings, ai_recognition_enabled=ai_recognition_enabled)

        company_changes = {
            key: value
            for key, value in (
                ("name", company_name),
                ("address", company_address),
                ("phone", company_phone),
                ("logo", company_logo),
            )
            if value is not None
        }
        if company_changes:
            settings = settings.with_company(**company_changes)

        if settings != self._store.settings:
            self._store.update_settings(settings)
        return settings
