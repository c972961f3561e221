"""
Convert a numeric amount to Vietnamese words for the "amount in words" line.

THIS TEXT IS PRINTED ON LEGAL WAREHOUSE RECEIPTS.

Every receipt (phiếu nhập kho / phiếu xuất kho) must state its total in
words. The rendering layer splices our output in unmodified, so the rules
below are the ONLY place the wording is decided.

Pipeline (pure, stateless, single pass):
    Normalizer  → validate + round to a non-negative integer
    Grouper     → split the digit string into 3-digit groups, low → high
    GroupReader → read one group + its scale word (uses TensReader)
    Assembler   → high → low, capitalize, append "đồng"

Examples:
    1_250_000 → "Một triệu hai trăm năm mươi nghìn đồng"
    1_002_000 → "Một triệu không trăm lẻ hai nghìn đồng"
    21        → "Hai mươi mốt đồng"
    15        → "Mười lăm đồng"

Known simplification: an all-zero group that is not the only group is
skipped entirely, so 1_000_500 reads "Một triệu năm trăm đồng" without a
"không nghìn" filler. Receipts in circulation were printed this way.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from .exceptions import AmountError, AmountOutOfRangeError, InvalidAmountError

logger = logging.getLogger(__name__)

# ─── Word Lookup Tables ──────────────────────────────────────────────

DIGIT_WORDS: tuple[str, ...] = (
    "không",
    "một",
    "hai",
    "ba",
    "bốn",
    "năm",
    "sáu",
    "bảy",
    "tám",
    "chín",
)

# Indexed by DigitGroup.position
SCALE_WORDS: tuple[str, ...] = (
    "",
    "nghìn",
    "triệu",
    "tỷ",
    "nghìn tỷ",
    "triệu tỷ",
)

TEN_WORD = "mười"
TENS_SUFFIX = "mươi"
HUNDRED_WORD = "trăm"
ZERO_TENS_WORD = "lẻ"  # "one hundred [lẻ] three"
CONTRACTED_ONE = "mốt"
CONTRACTED_FIVE = "lăm"

CURRENCY_UNIT = "đồng"
ZERO_PHRASE = "Không đồng"
INVALID_PHRASE = "Số không hợp lệ"

GROUP_SIZE = 3
MAX_AMOUNT = 10 ** (GROUP_SIZE * len(SCALE_WORDS)) - 1


# ─── Data Structures ────────────────────────────────────────────────


@dataclass(frozen=True)
class DigitGroup:
    """One slice of up to three digits at a given scale position."""

    digits: str  # "025" keeps its zero; only the top group may be shorter
    position: int  # 0 = units, 1 = nghìn, 2 = triệu, ...

    @property
    def value(self) -> int:
        return int(self.digits)

    @property
    def scale_word(self) -> str:
        return SCALE_WORDS[self.position]


# ─── Normalizer ──────────────────────────────────────────────────────


def _to_decimal(amount: object) -> Decimal:
    """Coerce a supported input type to Decimal, or raise InvalidAmountError."""
    # bool is an int subclass; True is not an amount
    if isinstance(amount, bool):
        raise InvalidAmountError(f"Boolean is not an amount: {amount!r}")
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, int):
        return Decimal(amount)
    if isinstance(amount, float):
        if math.isnan(amount) or math.isinf(amount):
            raise InvalidAmountError(f"Not a finite number: {amount!r}")
        return Decimal(amount)
    if isinstance(amount, str):
        try:
            return Decimal(amount.strip())
        except InvalidOperation:
            raise InvalidAmountError(
                f"Not a number: {amount!r}", {"raw": amount}
            ) from None
    raise InvalidAmountError(
        f"Unsupported amount type: {type(amount).__name__}",
        {"type": type(amount).__name__},
    )


def normalize_amount(amount: object) -> int:
    """Validate and round an amount to a non-negative whole number of đồng.

    Rounding is half-up on the magnitude, so 2.5 → 3 and -0.4 → 0. Negative
    halves round away from zero (-0.5 → -1, invalid) instead of toward it
    as Math.round does; any negative reading is rejected.

    Bounds are checked on the Decimal before it becomes an int, so an
    exponent like "1e999999999999999" never expands into its digits.

    Raises:
        InvalidAmountError: NaN, infinity, non-numeric, or negative after rounding.
        AmountOutOfRangeError: More than six digit groups (≥ 10^18).
    """
    value = _to_decimal(amount)
    if not value.is_finite():
        raise InvalidAmountError(f"Not a finite number: {amount!r}")

    rounded = value.to_integral_value(rounding=ROUND_HALF_UP)

    if rounded < 0:
        raise InvalidAmountError(
            f"Negative amounts cannot be read: {amount!r}", {"rounded": str(rounded)}
        )
    if rounded > MAX_AMOUNT:
        raise AmountOutOfRangeError(
            f"Amount {rounded} exceeds the largest readable amount {MAX_AMOUNT}",
            {"rounded": str(rounded), "max": MAX_AMOUNT},
        )
    return int(rounded)


# ─── Grouper ─────────────────────────────────────────────────────────


def split_groups(digits: str) -> list[DigitGroup]:
    """Slice a canonical digit string into groups, least significant first.

    The leftmost slice keeps its natural length (1–3) and is never padded:
    "1002000" → ["000" @0, "002" @1, "1" @2].
    """
    groups: list[DigitGroup] = []
    end = len(digits)
    position = 0
    while end > 0:
        start = max(0, end - GROUP_SIZE)
        groups.append(DigitGroup(digits=digits[start:end], position=position))
        end = start
        position += 1
    return groups


# ─── TensReader ──────────────────────────────────────────────────────


def read_tens(tens: int, ones: int) -> str:
    """Read a (tens, ones) pair with the irregular Vietnamese forms.

    - tens 1 reads "mười", never "một mươi"
    - ones 1 after tens ≥ 2 reads "mốt"; after "mười" it stays "một"
    - ones 5 after any tens reads "lăm"
    """
    if tens == 1:
        text = TEN_WORD
    else:
        text = f"{DIGIT_WORDS[tens]} {TENS_SUFFIX}"

    if ones == 1:
        text += f" {CONTRACTED_ONE}" if tens > 1 else f" {DIGIT_WORDS[1]}"
    elif ones == 5:
        text += f" {CONTRACTED_FIVE}" if tens > 0 else f" {DIGIT_WORDS[5]}"
    elif ones != 0:
        text += f" {DIGIT_WORDS[ones]}"
    return text


# ─── GroupReader ─────────────────────────────────────────────────────


def read_group(group: DigitGroup, group_count: int) -> str:
    """Read one digit group followed by its scale word.

    Returns "" for an all-zero group when other groups exist.
    """
    num = group.value
    if num == 0 and group_count > 1:
        return ""

    hundreds, rest = divmod(num, 100)
    tens, ones = divmod(rest, 10)

    if len(group.digits) == 3:
        text = f"{DIGIT_WORDS[hundreds]} {HUNDRED_WORD}"
        if tens == 0 and ones != 0:
            text += f" {ZERO_TENS_WORD} {DIGIT_WORDS[ones]}"
        elif tens != 0:
            text += f" {read_tens(tens, ones)}"
    elif len(group.digits) == 2:
        text = read_tens(tens, ones)
    else:
        text = DIGIT_WORDS[num]

    if group.scale_word:
        text += f" {group.scale_word}"
    return text


# ─── Assembler ───────────────────────────────────────────────────────


def assemble(fragments: list[str]) -> str:
    """Join fragments (given low → high) into the final capitalized phrase."""
    words = " ".join(f for f in reversed(fragments) if f)
    if not words:
        return ZERO_PHRASE
    return f"{words[0].upper()}{words[1:]} {CURRENCY_UNIT}"


# ─── Public API ──────────────────────────────────────────────────────


def _convert(amount: object) -> str:
    if amount is None:
        return ZERO_PHRASE
    rounded = normalize_amount(amount)
    if rounded == 0:
        return ZERO_PHRASE

    groups = split_groups(str(rounded))
    fragments = [read_group(g, len(groups)) for g in groups]
    return assemble(fragments)


def read_money_strict(amount: object) -> str:
    """Like read_money(), but raises instead of returning the invalid phrase.

    Raises:
        InvalidAmountError, AmountOutOfRangeError
    """
    return _convert(amount)


def read_money(amount: object) -> str:
    """Render an amount as Vietnamese words ending in "đồng".

    Args:
        amount: int, float, Decimal, numeric str, or None.

    Returns:
        e.g. "Một triệu hai trăm năm mươi nghìn đồng". Absent or zero
        amounts give "Không đồng"; anything unreadable gives
        "Số không hợp lệ". Never raises.
    """
    try:
        return _convert(amount)
    except AmountError as exc:
        logger.warning("Cannot read amount %r in words [%s]: %s", amount, exc.code, exc)
        return INVALID_PHRASE
