"""Pytest configuration and fixtures."""

import os

import pytest

from eventquery.core.fields import FieldType
from eventquery.core.models import (
    ActionConfig,
    DeclarationFormConfig,
    EventConfig,
    FieldConfig,
    PageConfig,
)


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Isolate environment variables for each test.

    Compiler settings can be overridden from the environment, so no
    EVENTQUERY_* variable of the developer's shell may leak in.
    """
    original_env = os.environ.copy()
    for name in list(os.environ):
        if name.startswith("EVENTQUERY_"):
            monkeypatch.delenv(name)

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def birth_event() -> EventConfig:
    """Birth registration event with child and mother pages."""
    return EventConfig(
        id="birth",
        label="Birth",
        declaration=DeclarationFormConfig(
            pages=(
                PageConfig(
                    id="child",
                    fields=(
                        FieldConfig(id="child.name", type=FieldType.NAME),
                        FieldConfig(id="child.dob", type=FieldType.DATE),
                        FieldConfig(id="child.gender", type=FieldType.SELECT),
                    ),
                ),
                PageConfig(
                    id="mother",
                    fields=(
                        FieldConfig(id="mother.name", type=FieldType.NAME),
                        FieldConfig(id="mother.age", type=FieldType.NUMBER),
                        FieldConfig(id="informant.name", type=FieldType.TEXT),
                    ),
                ),
            )
        ),
        actions=(
            ActionConfig(
                type="REGISTER",
                fields=(
                    FieldConfig(id="review.comment", type=FieldType.TEXT),
                    # Repeats a declaration id with another type
                    FieldConfig(id="child.name", type=FieldType.TEXT),
                ),
            ),
        ),
    )


@pytest.fixture
def death_event() -> EventConfig:
    """Death registration event."""
    return EventConfig(
        id="death",
        label="Death",
        declaration=DeclarationFormConfig(
            pages=(
                PageConfig(
                    id="deceased",
                    fields=(
                        FieldConfig(id="deceased.name", type=FieldType.NAME),
                        FieldConfig(id="deceased.age", type=FieldType.NUMBER),
                        FieldConfig(id="informant.name", type=FieldType.NAME),
                    ),
                ),
            )
        ),
    )


@pytest.fixture
def catalog(birth_event, death_event) -> list[EventConfig]:
    """Catalog with every configured event."""
    return [birth_event, death_event]


@pytest.fixture
def simple_catalog() -> list[EventConfig]:
    """Catalog with undotted field ids."""
    return [
        EventConfig(
            id="birth",
            declaration=DeclarationFormConfig(
                pages=(
                    PageConfig(
                        id="main",
                        fields=(
                            FieldConfig(id="name", type=FieldType.NAME),
                            FieldConfig(id="age", type=FieldType.NUMBER),
                        ),
                    ),
                )
            ),
        )
    ]
