"""Database table naming configuration."""

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class DatabaseTableConfig:
    """Maps entity names to table names.

    Entities without an explicit mapping use their own name, prefixed with
    ``prefix`` when one is set.
    """

    tables: Dict[str, str] = field(default_factory=dict)
    prefix: str = ""

    def get_table_name(self, entity: str) -> str:
        if entity in self.tables:
            return self.tables[entity]
        return f"{self.prefix}{entity}"

    def with_table(self, entity: str, table: str) -> "DatabaseTableConfig":
        return DatabaseTableConfig({**self.tables, entity: table}, self.prefix)
