"""
FastAPI endpoint tests for the VN Amount Words API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from vn_amount_words import __version__
from vn_amount_words.models import DEFAULT_COMPANY_NAME, CompanySettings

client = TestClient(app)


@pytest.fixture(scope="module", autouse=True)
def _load_settings() -> None:
    """Initialise settings once for all API tests (bypasses lifespan)."""
    api._settings = CompanySettings()
    yield  # type: ignore[misc]
    api._settings = None


RECEIPT = {
    "kind": "EXPORT",
    "receipt_number": "PX-2024-0007",
    "receipt_date": "2024-11-20",
    "items": [
        {"material_name": "Thép D10", "quantity": "2", "unit_price": "500000", "total_amount": "1000000"},
        {"material_name": "Đá 1x2", "quantity": 1, "unit_price": 2000, "total_amount": 2000},
    ],
}


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == __version__
        assert data["company_name"] == DEFAULT_COMPANY_NAME


class TestReadMoneyEndpoint:
    def test_integer_amount(self) -> None:
        resp = client.post("/read-money", json={"amount": 1250000})
        assert resp.status_code == 200
        assert resp.json()["words"] == "Một triệu hai trăm năm mươi nghìn đồng"

    def test_string_amount(self) -> None:
        data = client.post("/read-money", json={"amount": "1002000"}).json()
        assert data["words"] == "Một triệu không trăm lẻ hai nghìn đồng"

    def test_fractional_amount_rounds(self) -> None:
        data = client.post("/read-money", json={"amount": 14.5}).json()
        assert data["words"] == "Mười lăm đồng"

    def test_missing_amount_reads_zero(self) -> None:
        data = client.post("/read-money", json={}).json()
        assert data["words"] == "Không đồng"

    def test_negative_amount_reads_invalid(self) -> None:
        data = client.post("/read-money", json={"amount": -50}).json()
        assert data["words"] == "Số không hợp lệ"

    def test_strict_negative_returns_422(self) -> None:
        resp = client.post("/read-money", json={"amount": -50, "strict": True})
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "INVALID_AMOUNT"

    def test_strict_out_of_range_returns_422(self) -> None:
        resp = client.post("/read-money", json={"amount": "1000000000000000000", "strict": True})
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "AMOUNT_OUT_OF_RANGE"

    def test_strict_valid_amount(self) -> None:
        data = client.post("/read-money", json={"amount": 21, "strict": True}).json()
        assert data["words"] == "Hai mươi mốt đồng"


class TestReceiptEndpoints:
    def test_amount_line(self) -> None:
        resp = client.post("/receipts/amount-line", json=RECEIPT)
        assert resp.status_code == 200
        data = resp.json()
        assert data["total_display"] == "1.002.000"
        assert data["words"] == "Một triệu không trăm lẻ hai nghìn đồng"
        assert data["text"].startswith("- Tổng số tiền (Viết bằng chữ): ")

    def test_summary(self) -> None:
        data = client.post("/receipts/summary", json=RECEIPT).json()
        assert data["title"] == "PHIẾU XUẤT KHO"
        assert data["form_number"] == "Mẫu số: 02 - VT"
        assert data["date_line"] == "Ngày 20 tháng 11 năm 2024"
        assert data["item_count"] == 2
        assert data["amount"]["words"] == "Một triệu không trăm lẻ hai nghìn đồng"

    def test_unknown_kind_returns_422(self) -> None:
        resp = client.post("/receipts/amount-line", json={**RECEIPT, "kind": "TRANSFER"})
        assert resp.status_code == 422

    def test_missing_receipt_number_returns_422(self) -> None:
        body = {k: v for k, v in RECEIPT.items() if k != "receipt_number"}
        resp = client.post("/receipts/summary", json=body)
        assert resp.status_code == 422

    def test_total_beyond_readable_range_returns_422(self) -> None:
        resp = client.post("/receipts/amount-line", json={**RECEIPT, "total_amount": "1e30"})
        assert resp.status_code == 422

    def test_item_total_beyond_readable_range_returns_422(self) -> None:
        body = {**RECEIPT, "items": [{"total_amount": "1e30"}]}
        resp = client.post("/receipts/summary", json=body)
        assert resp.status_code == 422


class TestReadMoneyExtremeInputs:
    def test_huge_exponent_reads_invalid(self) -> None:
        resp = client.post("/read-money", json={"amount": "1e999999999999999"})
        assert resp.status_code == 200
        assert resp.json()["words"] == "Số không hợp lệ"

    def test_strict_huge_exponent_returns_422(self) -> None:
        resp = client.post("/read-money", json={"amount": "1e999999999999999", "strict": True})
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "AMOUNT_OUT_OF_RANGE"
