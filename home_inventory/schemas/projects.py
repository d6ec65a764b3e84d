"""Pydantic schemas for Projects."""

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from home_inventory.core.catalog import COLORS


class Project(BaseModel):
    """A colour-tagged group of items that can span rooms."""
    id: str
    name: str
    description: str = ""
    color: str = COLORS[0]

    model_config = {"frozen": True}


class ProjectPayload(BaseModel):
    """Schema for creating a project."""
    name: str = Field(..., description="Project name, required")
    description: str = ""
    color: str = Field(COLORS[0], description="One of the palette colour tags")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Project name is required")
        return value

    @field_validator("description")
    @classmethod
    def strip_description(cls, value: str) -> str:
        return value.strip()

    @field_validator("color")
    @classmethod
    def color_in_palette(cls, value: str) -> str:
        if value not in COLORS:
            raise ValueError(f"Unknown colour: {value}. Valid colours: {COLORS}")
        return value


class ProjectSummary(BaseModel):
    """Project card: project plus how many items carry its tag."""
    project: Project
    item_count: int

    model_config = {"populate_by_name": True, "alias_generator": to_camel}
