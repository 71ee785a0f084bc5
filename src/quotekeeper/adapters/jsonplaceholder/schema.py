"""Pydantic models describing the mock quote server payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class JsonPlaceholderBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class PostPayload(JsonPlaceholderBaseModel):
    """One element of ``GET /posts``; the title becomes the quote text."""

    id: int | None = None
    user_id: int | None = Field(default=None, alias="userId")
    title: str | None = None
    body: str | None = None

    _normalize_title = field_validator("title", mode="before")(_blank_to_none)


class PostsResponse(RootModel[list[PostPayload]]):
    pass


class AcceptedQuotePayload(BaseModel):
    """Response of ``POST /posts``: the echoed quote plus server-assigned fields."""

    model_config = ConfigDict(extra="allow")

    text: str | None = None
    category: str | None = None

    _normalize_text = field_validator("text", "category", mode="before")(_blank_to_none)

    @property
    def extra_fields(self) -> dict[str, object]:
        return dict(self.model_extra or {})
