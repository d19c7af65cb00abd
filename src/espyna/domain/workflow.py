"""Workflow domain: workflows, stages and activities."""

from dataclasses import dataclass
from typing import Optional

from ..utils.numbers import to_number
from .base import EntityDefinition, Record, choice_validator, numeric_problem

WORKFLOW_STATUSES = frozenset({"draft", "active", "paused", "completed", "archived"})
STAGE_STATUSES = frozenset({"pending", "in_progress", "completed", "skipped", "failed"})
ACTIVITY_STATUSES = frozenset({"pending", "in_progress", "completed", "cancelled"})


@dataclass
class Workflow(Record):
    name: str = ""
    description: str = ""
    status: str = "draft"
    version: int = 1
    workspace_id: str = ""
    created_by: str = ""


@dataclass
class Stage(Record):
    workflow_instance_id: str = ""
    stage_template_id: str = ""
    name: str = ""
    status: str = "pending"
    priority: int = 0
    assigned_to: str = ""
    start_date: Optional[int] = None
    end_date: Optional[int] = None


@dataclass
class Activity(Record):
    stage_id: str = ""
    activity_template_id: str = ""
    name: str = ""
    status: str = "pending"
    priority: int = 0
    assigned_to: str = ""
    due_date: Optional[int] = None


def validate_stage_dates(record: Stage) -> Optional[str]:
    problem = numeric_problem(record, "start_date", "end_date")
    if problem:
        return problem
    start, end = to_number(record.start_date), to_number(record.end_date)
    if start is not None and end is not None and end < start:
        return "end_before_start"
    return None


def validate_version(record: Workflow) -> Optional[str]:
    version = to_number(record.version)
    if version is None or version < 1:
        return "invalid_version"
    return None


WORKFLOW = EntityDefinition(
    name="workflow",
    domain="workflow",
    model=Workflow,
    searchable_fields=("name", "description"),
    validators=(choice_validator("status", WORKFLOW_STATUSES), validate_version),
    workspace_scoped=True,
)

STAGE = EntityDefinition(
    name="stage",
    domain="workflow",
    model=Stage,
    required_fields=("workflow_instance_id",),
    searchable_fields=("name",),
    validators=(choice_validator("status", STAGE_STATUSES), validate_stage_dates),
)

ACTIVITY = EntityDefinition(
    name="activity",
    domain="workflow",
    model=Activity,
    required_fields=("stage_id",),
    searchable_fields=("name",),
    validators=(choice_validator("status", ACTIVITY_STATUSES),),
)

DEFINITIONS = (WORKFLOW, STAGE, ACTIVITY)
