"""
VN Amount Words — FastAPI Server
================================

RESTful API for reading amounts in Vietnamese words and building the
amount text of printed warehouse receipts.

Endpoints:
    POST /read-money              Amount → words ("Một triệu ... đồng")
    POST /receipts/amount-line    Receipt → total figure + words line
    POST /receipts/summary        Receipt → header, title, date, amount text
    GET  /health                  Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional, Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from vn_amount_words import __version__
from vn_amount_words.converter import read_money, read_money_strict
from vn_amount_words.exceptions import AmountError
from vn_amount_words.models import AmountLine, CompanySettings, Receipt, ReceiptSummary
from vn_amount_words.receipts import build_amount_line, summarize_receipt

# ─── Load .env if available ──────────────────────────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass

logger = logging.getLogger(__name__)


# ─── Application Lifespan (load company settings) ───────────────────

_settings: CompanySettings | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Read company settings from the environment on startup."""
    global _settings  # noqa: PLW0603
    _settings = CompanySettings.from_env()
    yield
    _settings = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="VN Amount Words API",
    description=(
        "Reads monetary amounts as Vietnamese words for the legally required "
        "'amount in words' line on purchase and export receipts."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ReadMoneyRequest(BaseModel):
    """Request body for the /read-money endpoint."""

    amount: Optional[Union[int, float, str]] = Field(
        default=None,
        description="Amount in đồng. Fractions are rounded half-up.",
        json_schema_extra={"example": 1250000},
    )
    strict: bool = Field(
        default=False,
        description="Return 422 instead of the 'Số không hợp lệ' phrase.",
    )


class ReadMoneyResponse(BaseModel):
    words: str

    model_config = {"json_schema_extra": {"example": {
        "words": "Một triệu hai trăm năm mươi nghìn đồng",
    }}}


class HealthResponse(BaseModel):
    status: str
    version: str
    company_name: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_settings() -> CompanySettings:
    if _settings is None:
        raise HTTPException(status_code=503, detail="Settings not initialised")
    return _settings


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/read-money",
    summary="Read an amount in Vietnamese words",
    tags=["Conversion"],
    responses={422: {"description": "Invalid or out-of-range amount (strict mode)"}},
)
def read_money_endpoint(request: ReadMoneyRequest) -> ReadMoneyResponse:
    """Convert an amount to words.

    - Missing or zero amounts read **"Không đồng"**
    - Unreadable amounts read **"Số không hợp lệ"**, or fail with 422 when
      `strict` is set
    """
    if not request.strict:
        return ReadMoneyResponse(words=read_money(request.amount))

    try:
        words = read_money_strict(request.amount)
    except AmountError as exc:
        raise HTTPException(
            status_code=422,
            detail={"code": exc.code, "message": str(exc), "details": exc.details},
        ) from exc
    return ReadMoneyResponse(words=words)


@app.post(
    "/receipts/amount-line",
    summary="Build the total and amount-in-words line of a receipt",
    tags=["Receipts"],
)
def amount_line_endpoint(receipt: Receipt) -> AmountLine:
    """Resolve the receipt total and render it as a figure and in words."""
    return build_amount_line(receipt)


@app.post(
    "/receipts/summary",
    summary="Build the printable text fragments of a receipt",
    tags=["Receipts"],
    responses={503: {"description": "Settings not yet initialised"}},
)
def receipt_summary_endpoint(receipt: Receipt) -> ReceiptSummary:
    """Company header, form number, title, date line, and amount line."""
    settings = _get_settings()
    logger.info("Summarizing %s receipt %s", receipt.kind.value, receipt.receipt_number)
    return summarize_receipt(receipt, settings)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Settings not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    settings = _get_settings()
    return HealthResponse(
        status="healthy",
        version=__version__,
        company_name=settings.company_name,
    )
