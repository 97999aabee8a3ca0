"""Application service: Show Report use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from soletrack.application.clock import Clock, local_now
from soletrack.domain.model.shop import ShopStore
from soletrack.domain.service.reporting import DEFAULT_TOP_N, build_report


@dataclass(frozen=True)
class TrendPointDTO:
    label: str
    date: str
    revenue: str


@dataclass(frozen=True)
class TopProductDTO:
    name: str
    units: int


@dataclass(frozen=True)
class ReportDTO:
    total_revenue: str
    total_units: int
    order_count: int
    average_order_value: str
    trend: list[TrendPointDTO]
    top_products: list[TopProductDTO]


class ShowReportHandler:

    def __init__(self, store: ShopStore, clock: Clock = local_now) -> None:
        self._store = store
        self._clock = clock

    def handle(self, top_n: int = DEFAULT_TOP_N, by_weekday: bool = False) -> ReportDTO:
        symbol = self._store.settings.currency_symbol
        report = build_report(
            self._store.sales(), self._clock(), top_n=top_n, by_weekday=by_weekday
        )
        return ReportDTO(
            total_revenue=report.total_revenue.format(symbol),
            total_units=report.total_units,
            order_count=report.order_count,
            average_order_value=report.average_order_value.format(symbol),
            trend=[
                TrendPointDTO(
                    label=point.label,
                    date=point.day.isoformat() if point.day else "",
                    revenue=point.revenue.format(symbol),
                )
                for point in report.daily_revenue
            ],
            top_products=[TopProductDTO(name=p.name, units=p.units) for p in report.top_products],
        )
