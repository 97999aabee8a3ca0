"""Domain service: sales reporting.

Pure derivation from the ledger. Nothing is cached; reports are cheap to
recompute for a single shop's history.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from soletrack.domain.model.sale import SaleRecord
from soletrack.domain.model.value_objects import Money

TREND_DAYS = 7
DEFAULT_TOP_N = 5


@dataclass(frozen=True)
class DailyRevenue:
    label: str
    day: date | None
    revenue: Money


@dataclass(frozen=True)
class ProductUnits:
    name: str
    units: int


@dataclass(frozen=True)
class SalesReport:
    total_revenue: Money
    total_units: int
    order_count: int
    average_order_value: Money
    daily_revenue: list[DailyRevenue]
    top_products: list[ProductUnits]


def build_report(
    sales: Iterable[SaleRecord],
    now: datetime,
    top_n: int = DEFAULT_TOP_N,
    by_weekday: bool = False,
) -> SalesReport:
    records = list(sales)
    revenue = total_revenue(records)
    return SalesReport(
        total_revenue=revenue,
        total_units=sum(s.quantity.value for s in records),
        order_count=len(records),
        average_order_value=revenue / len(records) if records else Money.zero(),
        daily_revenue=(
            weekday_revenue(records, now) if by_weekday else daily_revenue(records, now)
        ),
        top_products=top_products(records, top_n),
    )


def total_revenue(sales: Iterable[SaleRecord]) -> Money:
    result = Money.zero()
    for sale in sales:
        result = result + sale.total_price
    return result


def daily_revenue(sales: Iterable[SaleRecord], now: datetime) -> list[DailyRevenue]:
    """Revenue per calendar day for the trailing week, oldest first.

    Days are taken in the timezone of ``now``. Sales outside the window
    are ignored.
    """
    today = now.date()
    days = [today - timedelta(days=offset) for offset in range(TREND_DAYS - 1, -1, -1)]
    buckets = {day: Money.zero() for day in days}
    for sale in sales:
        day = _local(sale.timestamp, now).date()
        if day in buckets:
            buckets[day] = buckets[day] + sale.total_price
    return [DailyRevenue(label=day.strftime("%a"), day=day, revenue=buckets[day]) for day in days]


def weekday_revenue(sales: Iterable[SaleRecord], now: datetime) -> list[DailyRevenue]:
    """Legacy trend: revenue grouped by weekday name over the whole ledger.

    Two sales on different Mondays land in the same "Mon" bucket. Kept for
    callers that want the old chart; ``daily_revenue`` is the default.
    """
    today = now.date()
    labels = [
        (today - timedelta(days=offset)).strftime("%a")
        for offset in range(TREND_DAYS - 1, -1, -1)
    ]
    buckets = {label: Money.zero() for label in labels}
    for sale in sales:
        label = _local(sale.timestamp, now).strftime("%a")
        buckets[label] = buckets[label] + sale.total_price
    return [DailyRevenue(label=label, day=None, revenue=buckets[label]) for label in labels]


def top_products(sales: Iterable[SaleRecord], limit: int = DEFAULT_TOP_N) -> list[ProductUnits]:
    """Best sellers by units, grouped by the product name on each record.

    Ties keep first-seen order.
    """
    counts: dict[str, int] = {}
    for sale in sales:
        counts[sale.product_name] = counts.get(sale.product_name, 0) + sale.quantity.value
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [ProductUnits(name=name, units=units) for name, units in ranked[:limit]]


def _local(timestamp: datetime, now: datetime) -> datetime:
    if timestamp.tzinfo is None or now.tzinfo is None:
        return timestamp
    return timestamp.astimezone(now.tzinfo)
