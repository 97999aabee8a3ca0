"""Receipt layout shared by every print target.

Order is fixed: header, bill meta, line item, totals, footer.
"""

from __future__ import annotations

from soletrack.domain.model.sale import SaleRecord
from soletrack.domain.model.settings import CompanyInfo

RECEIPT_WIDTH = 32
SEPARATOR = "-" * RECEIPT_WIDTH
THANK_YOU = "Thank you for shopping!"
TRAILING_BLANK_LINES = 2


def receipt_lines(sale: SaleRecord, company: CompanyInfo, symbol: str) -> list[str]:
    unit = sale.unit_price.format(symbol)
    total = sale.total_price.format(symbol)
    lines = [
        company.name,
        company.address,
        f"Tel: {company.phone}",
        SEPARATOR,
        f"Bill: {sale.bill_number}  {sale.timestamp.strftime('%d/%m/%Y')}",
        SEPARATOR,
        sale.product_name,
        f"{sale.variant.color} / Sz: {sale.variant.size}",
        f"{sale.quantity.value} x {unit} = {total}",
        SEPARATOR,
        f"TOTAL: {total}",
        SEPARATOR,
        THANK_YOU,
    ]
    lines.extend([""] * TRAILING_BLANK_LINES)
    return lines


def receipt_text(sale: SaleRecord, company: CompanyInfo, symbol: str) -> str:
    return "\n".join(receipt_lines(sale, company, symbol)) + "\n"
