"""Pytest configuration and fixtures for espyna tests."""

import pytest

from espyna.core.shared import RequestContext
from espyna.domain.entity import ROLE, WORKSPACE
from espyna.features.listdata import ListDataProcessor
from espyna.infrastructure.database.mock import MockRepository


@pytest.fixture
def sample_items():
    """Course records with mixed types, missing values and nested fields."""
    return [
        {"id": "c1", "name": "Algebra", "level": 1, "price": 120.0, "active": True,
         "starts_at": "2024-01-15T09:00:00Z", "teacher": {"name": "Ada"}, "tags": ["math", "intro"]},
        {"id": "c2", "name": "Calculus", "level": 3, "price": 250.0, "active": True,
         "starts_at": "2024-02-01T09:00:00Z", "teacher": {"name": "Alan"}, "tags": ["math"]},
        {"id": "c3", "name": "Chemistry", "level": 2, "price": None, "active": False,
         "starts_at": "2024-03-10T13:30:00Z", "teacher": {"name": "Grace"}, "tags": ["science"]},
        {"id": "c4", "name": "algebra II", "level": 2, "price": 180.0, "active": "true",
         "starts_at": None, "teacher": None, "tags": []},
        {"id": "c5", "name": "Physics", "level": None, "price": 300.0, "active": True,
         "starts_at": "2024-01-15T18:00:00Z", "teacher": {"name": "Marie"}, "tags": ["science", "lab"]},
    ]


@pytest.fixture
def processor():
    return ListDataProcessor(default_page_size=2)


@pytest.fixture
def context():
    """Authenticated caller without special permissions."""
    return RequestContext(user_id="user-ada", workspace_id=None)


@pytest.fixture
def workspace_repository():
    return MockRepository(WORKSPACE)


@pytest.fixture
def role_repository():
    return MockRepository(ROLE)
