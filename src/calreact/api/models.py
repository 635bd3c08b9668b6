from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..domain import CalendarEvent, EventKind


class EventDraft(BaseModel):
    """Edit-dialog payload. The only place event fields are validated."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    id: Optional[str] = Field(default=None)
    title: str = Field(min_length=1)
    start: datetime
    end: datetime
    description: str = Field(default="")
    color: Optional[str] = Field(default=None)
    kind: Optional[EventKind] = Field(default=None)
    reference_id: Optional[str] = Field(default=None)
    status: Optional[str] = Field(default=None)

    @field_validator("start", "end")
    @classmethod
    def _naive(cls, value: datetime) -> datetime:
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value

    @model_validator(mode="after")
    def _ordered(self) -> "EventDraft":
        if self.start > self.end:
            raise ValueError("start must not be after end")
        return self

    def event_fields(self) -> Dict[str, Any]:
        return self.model_dump(exclude={"id"})


class EventPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    start: str
    end: str
    description: str = Field(default="")
    color: Optional[str] = Field(default=None)
    kind: Optional[str] = Field(default=None)
    reference_id: Optional[str] = Field(default=None)
    status: Optional[str] = Field(default=None)

    @classmethod
    def from_domain(cls, event: CalendarEvent) -> "EventPayload":
        return cls.model_validate(event.to_record())
