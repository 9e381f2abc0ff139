from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal
from uuid import UUID

from pydantic import AfterValidator, BaseModel, Field, field_validator, model_validator


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be empty")
    return value


# Non-empty text, kept verbatim.
RequiredText = Annotated[str, AfterValidator(_not_blank)]

InsightType = Literal["transcript", "linkedin"]


class TranscriptInsightRequest(BaseModel):
    transcript: RequiredText
    company_name: RequiredText
    attendees: list[str] = Field(min_length=1)
    date: RequiredText

    @field_validator("attendees", mode="before")
    @classmethod
    def _split_attendees(cls, value: object) -> object:
        # Accept "Jo, Sam" as well as ["Jo", "Sam"].
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, list):
            names = [item.strip() if isinstance(item, str) else item for item in value]
            return [name for name in names if name != ""]
        return value


class LinkedinInsightRequest(BaseModel):
    linkedin_bio: RequiredText
    pitch_deck: RequiredText
    company_name: RequiredText
    role: RequiredText


class TranscriptMetadata(BaseModel):
    company_name: str
    attendees: list[str]
    date: str


class LinkedinMetadata(BaseModel):
    company_name: str
    role: str


class InsightResponse(BaseModel):
    id: UUID
    type: InsightType
    content: str
    metadata: TranscriptMetadata | LinkedinMetadata
    created_at: datetime

    @model_validator(mode="after")
    def _metadata_matches_type(self) -> InsightResponse:
        expected = TranscriptMetadata if self.type == "transcript" else LinkedinMetadata
        if not isinstance(self.metadata, expected):
            raise ValueError(f"metadata does not match insight type {self.type!r}")
        return self
