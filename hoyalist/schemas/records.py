# hoyalist/schemas/records.py
"""
Firestore document shapes for the two lead collections.

Field aliases are the stored document keys. ``postedDate`` is not modelled
here; the persister adds the server timestamp sentinel when writing.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

PUBLIC_USER_COLLECTION = "PublicUserInfo"
USER_LOCATION_COLLECTION = "UserLocation"


class PublicUserRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    uid: str = Field(alias="publicUserUID")
    name: str = Field(alias="publicUserName")
    email: str = Field(alias="publicUserEmail")
    phone: str = Field(default="", alias="publicUserPhone")
    project: str = Field(alias="projectText")
    ready_to_hire: bool = Field(alias="readyToHire")
    urgent: bool
    consent: bool = Field(alias="publicUserConcent")
    budget: Optional[int] = Field(default=None, ge=0, alias="budgetText")

    def to_document(self) -> Dict[str, Any]:
        # No budget means no budgetText key at all.
        return self.model_dump(by_alias=True, exclude_none=True)


class UserLocationRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    uid: str
    name: str
    contractor: bool = False
    latitude: float
    longitude: float
    altitude: int = 0
    state: str = Field(default="", alias="userState")
    town: str = Field(default="", alias="userTown")
    zip: str = Field(alias="zipcode")

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
