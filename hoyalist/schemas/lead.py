from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LeadSubmission(BaseModel):
    """A lead that passed every field check."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    phone: str = ""
    project: str = Field(min_length=1)
    zip: str = Field(pattern=r"^[0-9]{5}$")
    ready_to_hire: bool = False
    urgent: bool = False
    budget: Optional[int] = Field(default=None, ge=0)
    consent: bool


class LeadCreatedResponse(BaseModel):
    status: str = "created"
    uid: str
    zip: str


class ErrorResponse(BaseModel):
    code: str
    message: str
