"""Pydantic models for tags."""

from pydantic import BaseModel, Field, field_validator


class TagCreateRequest(BaseModel):
    name: str = Field(..., max_length=50)
    color: str = Field("#6c757d", pattern=r"^#[0-9a-fA-F]{6}$")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Tag name is required")
        return value


class TaskTagRequest(BaseModel):
    tag_id: int
