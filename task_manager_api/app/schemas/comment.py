"""Pydantic models for comments."""

from pydantic import BaseModel, Field, field_validator


class CommentRequest(BaseModel):
    content: str = Field(..., max_length=2000)

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Comment must not be empty")
        return value
