"""Entity domain: workspaces, users, clients and roles."""

import re
from dataclasses import dataclass
from typing import Optional

from .base import EntityDefinition, Record, email_validator

HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")


@dataclass
class Workspace(Record):
    name: str = ""
    description: str = ""
    private: bool = False


@dataclass
class User(Record):
    first_name: str = ""
    last_name: str = ""
    email_address: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass
class Client(Record):
    user_id: str = ""
    internal_id: str = ""
    name: str = ""
    email: str = ""


@dataclass
class Role(Record):
    name: str = ""
    description: str = ""
    color: str = ""
    workspace_id: str = ""


def validate_role_color(record: Role) -> Optional[str]:
    if record.color and not HEX_COLOR_PATTERN.match(record.color):
        return "color_invalid"
    return None


WORKSPACE = EntityDefinition(
    name="workspace",
    domain="entity",
    model=Workspace,
    searchable_fields=("name", "description"),
    extra_fields=frozenset({"user_count", "organization", "owner_id"}),
)

USER = EntityDefinition(
    name="user",
    domain="entity",
    model=User,
    name_field=None,
    required_fields=("first_name", "last_name"),
    searchable_fields=("first_name", "last_name", "email_address"),
    validators=(email_validator("email_address"),),
)

CLIENT = EntityDefinition(
    name="client",
    domain="entity",
    model=Client,
    searchable_fields=("name", "email", "internal_id"),
    validators=(email_validator("email"),),
)

ROLE = EntityDefinition(
    name="role",
    domain="entity",
    model=Role,
    searchable_fields=("name", "description"),
    validators=(validate_role_color,),
    workspace_scoped=True,
)

DEFINITIONS = (WORKSPACE, USER, CLIENT, ROLE)
