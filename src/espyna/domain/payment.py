"""Payment domain: payments and payment methods."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from ..utils.numbers import to_number
from .base import EntityDefinition, Record, choice_validator, non_negative_validator, numeric_problem

METHOD_TYPES = frozenset({"card", "bank_account"})
MAX_BANK_NAME_LENGTH = 100


@dataclass
class Payment(Record):
    name: str = ""
    subscription_id: str = ""
    amount: float = 0.0
    currency: str = "USD"


@dataclass
class PaymentMethod(Record):
    name: str = ""
    method_type: str = "card"
    cardholder_name: str = ""
    last_four_digits: str = ""
    expiry_month: Optional[int] = None
    expiry_year: Optional[int] = None
    bank_name: str = ""
    account_last_four: str = ""


def _check_last_four(value: str) -> Optional[str]:
    value = str(value)
    if len(value) != 4:
        return "last_four_digits_length"
    if not value.isdigit():
        return "last_four_digits_numeric"
    return None


def validate_payment_method(record: PaymentMethod, today: Optional[datetime] = None) -> Optional[str]:
    """Card and bank account detail rules."""
    today = today or datetime.now(timezone.utc)

    if record.method_type == "card":
        if not record.last_four_digits:
            return "details_required"
        problem = _check_last_four(record.last_four_digits)
        if problem:
            return problem
        problem = numeric_problem(record, "expiry_month", "expiry_year")
        if problem:
            return problem
        month, year = to_number(record.expiry_month), to_number(record.expiry_year)
        if month is not None and not 1 <= month <= 12:
            return "expiry_month_invalid"
        if year is not None:
            if year < today.year:
                return "expiry_year_past"
            if year == today.year and month is not None and month < today.month:
                return "card_expired"

    if record.method_type == "bank_account":
        if not record.bank_name:
            return "details_required"
        bank_name = str(record.bank_name)
        if len(bank_name) < 2:
            return "bank_name_too_short"
        if len(bank_name) > MAX_BANK_NAME_LENGTH:
            return "bank_name_too_long"
        if record.account_last_four:
            return _check_last_four(record.account_last_four)

    return None


PAYMENT = EntityDefinition(
    name="payment",
    domain="payment",
    model=Payment,
    searchable_fields=("name",),
    validators=(non_negative_validator("amount"),),
)

PAYMENT_METHOD = EntityDefinition(
    name="payment_method",
    domain="payment",
    model=PaymentMethod,
    searchable_fields=("name", "cardholder_name", "bank_name"),
    validators=(choice_validator("method_type", METHOD_TYPES), validate_payment_method),
)

DEFINITIONS = (PAYMENT, PAYMENT_METHOD)
