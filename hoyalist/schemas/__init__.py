# hoyalist/schemas/__init__.py
"""
Pydantic schemas for validated leads, stored documents and API responses.
"""

from hoyalist.schemas.lead import ErrorResponse, LeadCreatedResponse, LeadSubmission
from hoyalist.schemas.records import (
    PUBLIC_USER_COLLECTION,
    USER_LOCATION_COLLECTION,
    PublicUserRecord,
    UserLocationRecord,
)

__all__ = [
    "ErrorResponse",
    "LeadCreatedResponse",
    "LeadSubmission",
    "PUBLIC_USER_COLLECTION",
    "USER_LOCATION_COLLECTION",
    "PublicUserRecord",
    "UserLocationRecord",
]
