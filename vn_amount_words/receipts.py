"""
Receipt text helpers — the consumer side of read_money().

The printed purchase / export receipt shows its total twice: as a figure
in the "Cộng" row and in words underneath. Both come from here so that the
figure and the words are always derived from the same total.

Flow:
    Receipt JSON → resolve_receipt_total() → format_number() + read_money()
                 → AmountLine → ReceiptSummary (header, title, date, amount)

No HTML, PDF, or Excel is produced; templates splice these strings as-is.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, localcontext

from .converter import read_money
from .models import AmountLine, CompanySettings, Receipt, ReceiptSummary

logger = logging.getLogger(__name__)

AMOUNT_LINE_LABEL = "- Tổng số tiền (Viết bằng chữ):"

# vi-VN swaps the en-US separators: 1.250.000,50
_VI_SEPARATORS = str.maketrans({",": ".", ".": ","})


def resolve_receipt_total(receipt: Receipt) -> Decimal:
    """The backend total when it is set and non-zero, else the sum of item totals."""
    if receipt.total_amount:
        return receipt.total_amount

    total = sum((item.total_amount or Decimal(0) for item in receipt.items), Decimal(0))
    if not receipt.items:
        logger.warning("Receipt %s has no total and no items", receipt.receipt_number)
    return total


def format_number(value: Decimal | int | float, decimals: int = 2) -> str:
    """Format with vi-VN grouping and a fixed number of decimals (half-up)."""
    number = Decimal(str(value))
    exponent = Decimal(1).scaleb(-decimals)
    # quantize needs room for every integer digit plus the decimals
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + decimals + 2)
        quantized = number.quantize(exponent, rounding=ROUND_HALF_UP)
    return f"{quantized:,.{decimals}f}".translate(_VI_SEPARATORS)


def format_receipt_date(receipt_date: date | None) -> str:
    """"Ngày 05 tháng 03 năm 2024"; today's date when the receipt has none."""
    d = receipt_date or date.today()
    return f"Ngày {d.day:02d} tháng {d.month:02d} năm {d.year}"


def build_amount_line(receipt: Receipt) -> AmountLine:
    """Build the total figure and the "amount in words" line for a receipt."""
    total = resolve_receipt_total(receipt)
    words = read_money(total)
    return AmountLine(
        total=total,
        total_display=format_number(total, 0),
        words=words,
        text=f"{AMOUNT_LINE_LABEL} {words}",
    )


def summarize_receipt(
    receipt: Receipt, settings: CompanySettings | None = None
) -> ReceiptSummary:
    """Collect the header and amount text for one printed receipt."""
    settings = settings or CompanySettings()
    return ReceiptSummary(
        company_name=settings.company_name,
        company_address=settings.company_address,
        form_number=f"Mẫu số: {receipt.kind.form_number}",
        title=receipt.kind.printed_title,
        date_line=format_receipt_date(receipt.receipt_date),
        receipt_number=receipt.receipt_number,
        item_count=len(receipt.items),
        amount=build_amount_line(receipt),
    )
