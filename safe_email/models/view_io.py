"""
Typed Pydantic models for the renderer's input contract.

The enclosing UI hands over ``{emailBody, subject?, displayMode?}``. Bodies
come straight from storage and are never trusted: anything that is not a
string is coerced to an empty body so the view degrades instead of failing.
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from safe_email.models.email_content import EmailContent


class DisplayMode(str, Enum):
    RAW = "raw"
    ENHANCED = "enhanced"


class RenderRequest(BaseModel):
    """A single render call from the UI."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    email_body: str = Field("", alias="emailBody", description="Raw email body, HTML or plain text.")
    subject: str = Field("", description="Optional subject line.")
    display_mode: DisplayMode = Field(
        DisplayMode.ENHANCED,
        alias="displayMode",
        description="'raw' shows only sanitized HTML, 'enhanced' adds extracted sections.",
    )

    @field_validator("email_body", "subject", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        if not isinstance(v, str):
            return ""
        return v

    def to_content(self) -> EmailContent:
        return EmailContent(email_body=self.email_body, subject=self.subject)
