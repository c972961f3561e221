"""
Pydantic models for receipt data — the boundary where backend JSON enters.

Receipts reach us as loosely-typed JSON from the warehouse backend. Amounts
may be numbers, numeric strings, or missing. Models coerce what is safe to
coerce and leave the rest Optional; the converter decides the wording.
"""

from __future__ import annotations

import os
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .converter import MAX_AMOUNT

DEFAULT_COMPANY_NAME = "CÔNG TY TNHH XÂY DỰNG VẬN TẢI QUỐC TUẤN"
DEFAULT_COMPANY_ADDRESS = (
    "Số 22, Phạm Hồng Thái, Khu Phố Song Vĩnh, Phường Tân Phước, "
    "Thành phố Hồ Chí Minh, Việt Nam."
)


# ─── Receipt Kind ────────────────────────────────────────────────────


class ReceiptKind(str, Enum):
    """Which warehouse form a receipt is printed on."""

    PURCHASE = "PURCHASE"  # Phiếu nhập kho, form 01-VT
    EXPORT = "EXPORT"  # Phiếu xuất kho, form 02-VT

    @property
    def printed_title(self) -> str:
        return _TITLES[self]

    @property
    def form_number(self) -> str:
        return _FORM_NUMBERS[self]


_TITLES = {
    ReceiptKind.PURCHASE: "PHIẾU NHẬP KHO",
    ReceiptKind.EXPORT: "PHIẾU XUẤT KHO",
}

_FORM_NUMBERS = {
    ReceiptKind.PURCHASE: "01 - VT",
    ReceiptKind.EXPORT: "02 - VT",
}


# ─── Settings ────────────────────────────────────────────────────────


class CompanySettings(BaseModel):
    """Company header printed at the top of every receipt."""

    company_name: str = DEFAULT_COMPANY_NAME
    company_address: str = DEFAULT_COMPANY_ADDRESS

    @classmethod
    def from_env(cls) -> CompanySettings:
        """Read COMPANY_NAME / COMPANY_ADDRESS, keeping defaults for blanks."""
        return cls(
            company_name=os.environ.get("COMPANY_NAME") or DEFAULT_COMPANY_NAME,
            company_address=os.environ.get("COMPANY_ADDRESS") or DEFAULT_COMPANY_ADDRESS,
        )


# ─── Receipt Input ───────────────────────────────────────────────────


class ReceiptItem(BaseModel):
    """One material line on a purchase or export receipt."""

    material_name: Optional[str] = None
    material_code: Optional[str] = None
    unit: Optional[str] = None
    quantity: Optional[Decimal] = None
    unit_price: Optional[Decimal] = None
    total_amount: Optional[Decimal] = Field(default=None, ge=-MAX_AMOUNT, le=MAX_AMOUNT)
    notes: Optional[str] = None


class Receipt(BaseModel):
    """A purchase (nhập) or export (xuất) receipt as sent by the backend."""

    kind: ReceiptKind
    receipt_number: str
    receipt_date: Optional[date] = None
    items: list[ReceiptItem] = Field(default_factory=list)
    # Backend-computed; may be absent
    total_amount: Optional[Decimal] = Field(default=None, ge=-MAX_AMOUNT, le=MAX_AMOUNT)


# ─── Output ──────────────────────────────────────────────────────────


class AmountLine(BaseModel):
    """The total as printed: figure, words, and the full "in words" line."""

    total: Decimal
    total_display: str  # vi-VN grouping, e.g. "1.250.000"
    words: str  # read_money() output, unmodified
    text: str  # "- Tổng số tiền (Viết bằng chữ): ..."


class ReceiptSummary(BaseModel):
    """Every text fragment a receipt template needs besides the item table."""

    company_name: str
    company_address: str
    form_number: str
    title: str
    date_line: str
    receipt_number: str
    item_count: int
    amount: AmountLine
