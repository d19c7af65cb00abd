"""Subscription domain: plans, price plans, subscriptions and invoices."""

import re
from dataclasses import dataclass
from typing import Optional

from .base import EntityDefinition, Record, non_negative_validator

CURRENCY_PATTERN = re.compile(r"^[A-Z]{3}$")


@dataclass
class Plan(Record):
    name: str = ""
    description: str = ""


@dataclass
class PricePlan(Record):
    plan_id: str = ""
    name: str = ""
    description: str = ""
    amount: float = 0.0
    currency: str = "USD"


@dataclass
class Subscription(Record):
    name: str = ""
    client_id: str = ""
    price_plan_id: str = ""


@dataclass
class Invoice(Record):
    invoice_number: str = ""
    subscription_id: str = ""
    amount: float = 0.0
    currency: str = "USD"


def validate_currency(record: Record) -> Optional[str]:
    currency = getattr(record, "currency", "")
    if currency and (not isinstance(currency, str) or not CURRENCY_PATTERN.match(currency)):
        return "currency_invalid"
    return None


PLAN = EntityDefinition(
    name="plan",
    domain="subscription",
    model=Plan,
    searchable_fields=("name", "description"),
)

PRICE_PLAN = EntityDefinition(
    name="price_plan",
    domain="subscription",
    model=PricePlan,
    required_fields=("plan_id",),
    searchable_fields=("name", "description"),
    validators=(non_negative_validator("amount"), validate_currency),
)

SUBSCRIPTION = EntityDefinition(
    name="subscription",
    domain="subscription",
    model=Subscription,
    required_fields=("client_id", "price_plan_id"),
    searchable_fields=("name",),
)

INVOICE = EntityDefinition(
    name="invoice",
    domain="subscription",
    model=Invoice,
    name_field=None,
    required_fields=("invoice_number",),
    searchable_fields=("invoice_number",),
    validators=(non_negative_validator("amount"), validate_currency),
)

DEFINITIONS = (PLAN, PRICE_PLAN, SUBSCRIPTION, INVOICE)
