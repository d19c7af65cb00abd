"""Base record and entity definitions shared by every domain.

Records are plain dataclasses. Everything entity-specific that use cases and
repositories need (field sets, id prefix, validators) lives on an
``EntityDefinition`` so the generic machinery never special-cases an entity.
"""

import dataclasses
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, Mapping, Optional, Tuple, Type, TypeVar

from ..utils.numbers import to_number
from ..utils.time import format_rfc3339, parse_datetime

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$")

R = TypeVar("R", bound="Record")

# Returns the key suffix of the first violated rule, or None
RecordValidator = Callable[["Record"], Optional[str]]


@dataclass
class Record:
    """Fields every persisted record carries.

    Records are never physically removed by default; ``active`` is the soft
    delete flag. Dates are Unix epoch milliseconds with RFC3339 mirrors.
    """

    id: str = ""
    active: bool = True
    date_created: Optional[int] = None
    date_created_string: Optional[str] = None
    date_modified: Optional[int] = None
    date_modified_string: Optional[str] = None

    def mark_created(self, timestamp_ms: int) -> None:
        self.date_created = timestamp_ms
        self.date_created_string = _to_rfc3339(timestamp_ms)
        self.mark_modified(timestamp_ms)

    def mark_modified(self, timestamp_ms: int) -> None:
        self.date_modified = timestamp_ms
        self.date_modified_string = _to_rfc3339(timestamp_ms)

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)

    @classmethod
    def field_names(cls) -> FrozenSet[str]:
        return frozenset(f.name for f in dataclasses.fields(cls))

    @classmethod
    def from_dict(cls: Type[R], data: Mapping[str, Any]) -> R:
        """Build a record, ignoring keys that are not fields."""
        names = cls.field_names()
        return cls(**{key: value for key, value in data.items() if key in names})


def _to_rfc3339(timestamp_ms: int) -> str:
    return format_rfc3339(parse_datetime(timestamp_ms))


@dataclass(frozen=True)
class EntityDefinition:
    """Describes one entity for the generic use cases and repositories."""

    name: str
    domain: str
    model: Type[Record]
    id_prefix: str = ""
    name_field: Optional[str] = "name"
    required_fields: Tuple[str, ...] = ()
    extra_fields: FrozenSet[str] = frozenset()
    searchable_fields: Tuple[str, ...] = ()
    validators: Tuple[RecordValidator, ...] = field(default=())
    workspace_scoped: bool = False

    def __post_init__(self):
        if not self.name:
            raise ValueError("Entity name cannot be empty")
        if not self.id_prefix:
            object.__setattr__(self, "id_prefix", self.name)
        if self.name_field and self.name_field not in self.model.field_names():
            raise ValueError(f"{self.model.__name__} has no field '{self.name_field}'")

    @property
    def valid_fields(self) -> FrozenSet[str]:
        """Fields accepted in filters, sorts and searches."""
        return self.model.field_names() | self.extra_fields

    @property
    def qualified_name(self) -> str:
        return f"{self.domain}.{self.name}"

    def permission(self, action: str) -> str:
        return f"{self.name}:{action}"

    def message_key(self, category: str, suffix: str) -> str:
        return f"{self.name}.{category}.{suffix}"

    def new_record(self, **values: Any) -> Record:
        return self.model.from_dict(values)

    def coerce(self, data: Any) -> Record:
        """Accept a record of this entity or a mapping of its fields."""
        if isinstance(data, self.model):
            return data
        if isinstance(data, Mapping):
            return self.model.from_dict(data)
        raise TypeError(f"Expected {self.model.__name__} or mapping, got {type(data).__name__}")

    def validate(self, record: Record) -> Optional[str]:
        for field_name in self.required_fields:
            value = getattr(record, field_name, None)
            if value is None or (isinstance(value, str) and not value.strip()):
                return f"{field_name}_required"
        for validator in self.validators:
            problem = validator(record)
            if problem:
                return problem
        return None


def is_valid_email(value: Optional[str]) -> bool:
    return isinstance(value, str) and EMAIL_PATTERN.match(value) is not None


def email_validator(field_name: str) -> RecordValidator:
    """Optional email field: empty is fine, malformed is ``email_invalid``."""

    def validate(record: Record) -> Optional[str]:
        value = getattr(record, field_name, None)
        if value and not is_valid_email(value):
            return "email_invalid"
        return None

    return validate


def numeric_problem(record: Record, *field_names: str) -> Optional[str]:
    """``<field>_invalid`` for the first set field that does not hold a number."""
    for field_name in field_names:
        value = getattr(record, field_name, None)
        if value is not None and to_number(value) is None:
            return f"{field_name}_invalid"
    return None


def non_negative_validator(field_name: str) -> RecordValidator:
    def validate(record: Record) -> Optional[str]:
        problem = numeric_problem(record, field_name)
        if problem:
            return problem
        value = to_number(getattr(record, field_name, None))
        if value is not None and value < 0:
            return f"{field_name}_negative"
        return None

    return validate


def choice_validator(field_name: str, choices: FrozenSet[str]) -> RecordValidator:
    def validate(record: Record) -> Optional[str]:
        value = getattr(record, field_name, None)
        if value and (not isinstance(value, str) or value not in choices):
            return f"invalid_{field_name}"
        return None

    return validate
