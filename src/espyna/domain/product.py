"""Product domain: products and collections."""

from dataclasses import dataclass

from .base import EntityDefinition, Record


@dataclass
class Product(Record):
    name: str = ""
    description: str = ""


@dataclass
class Collection(Record):
    name: str = ""
    description: str = ""


PRODUCT = EntityDefinition(
    name="product",
    domain="product",
    model=Product,
    searchable_fields=("name", "description"),
)

COLLECTION = EntityDefinition(
    name="collection",
    domain="product",
    model=Collection,
    searchable_fields=("name", "description"),
)

DEFINITIONS = (PRODUCT, COLLECTION)
