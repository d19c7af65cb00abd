"""Domain records and entity definitions."""

from .base import EntityDefinition, Record, RecordValidator, is_valid_email
from .catalog import ALL_DEFINITIONS, DomainCatalog, default_catalog
from .entity import CLIENT, ROLE, USER, WORKSPACE, Client, Role, User, Workspace
from .event import EVENT, Event
from .payment import PAYMENT, PAYMENT_METHOD, Payment, PaymentMethod
from .product import COLLECTION, PRODUCT, Collection, Product
from .subscription import INVOICE, PLAN, PRICE_PLAN, SUBSCRIPTION, Invoice, Plan, PricePlan, Subscription
from .workflow import ACTIVITY, STAGE, WORKFLOW, Activity, Stage, Workflow

__all__ = [
    "EntityDefinition",
    "Record",
    "RecordValidator",
    "is_valid_email",
    "ALL_DEFINITIONS",
    "DomainCatalog",
    "default_catalog",
    "Workspace",
    "User",
    "Client",
    "Role",
    "Payment",
    "PaymentMethod",
    "Product",
    "Collection",
    "Plan",
    "PricePlan",
    "Subscription",
    "Invoice",
    "Workflow",
    "Stage",
    "Activity",
    "Event",
    "WORKSPACE",
    "USER",
    "CLIENT",
    "ROLE",
    "PAYMENT",
    "PAYMENT_METHOD",
    "PRODUCT",
    "COLLECTION",
    "PLAN",
    "PRICE_PLAN",
    "SUBSCRIPTION",
    "INVOICE",
    "WORKFLOW",
    "STAGE",
    "ACTIVITY",
    "EVENT",
]
