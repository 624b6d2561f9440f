# hoyalist/services/lead_store.py
from __future__ import annotations

from typing import Any, Dict, Optional

from google.cloud import firestore

from hoyalist.core.exceptions import PersistenceError
from hoyalist.core.logging import get_structlog_logger
from hoyalist.schemas.lead import LeadSubmission
from hoyalist.schemas.records import (
    PUBLIC_USER_COLLECTION,
    USER_LOCATION_COLLECTION,
    PublicUserRecord,
    UserLocationRecord,
)
from hoyalist.services.geocoding import GeoResult

logger = get_structlog_logger(__name__)


def build_public_user_record(uid: str, submission: LeadSubmission) -> PublicUserRecord:
    return PublicUserRecord(
        uid=uid,
        name=submission.name,
        email=submission.email,
        phone=submission.phone,
        project=submission.project,
        ready_to_hire=submission.ready_to_hire,
        urgent=submission.urgent,
        consent=submission.consent,
        budget=submission.budget,
    )


def build_user_location_record(uid: str, submission: LeadSubmission, geo: GeoResult) -> UserLocationRecord:
    return UserLocationRecord(
        uid=uid,
        name=submission.name,
        contractor=False,
        latitude=geo.latitude,
        longitude=geo.longitude,
        altitude=0,
        state=geo.state or "",
        town=geo.town or "",
        zip=submission.zip,
    )


def _with_timestamp(document: Dict[str, Any]) -> Dict[str, Any]:
    document["postedDate"] = firestore.SERVER_TIMESTAMP
    return document


class LeadPersister:
    """Writes a lead's profile and location documents in one batch."""

    def __init__(self, client: Optional[Any]) -> None:
        self.client = client

    async def persist(self, submission: LeadSubmission, geo: GeoResult) -> str:
        """
        Allocate one document ID and commit both documents under it.

        Either both documents exist afterwards or neither does; the batch
        commit is the only write.
        """
        if self.client is None:
            logger.error("lead.persist_failed", error="firestore client not initialised")
            raise PersistenceError("Document store is not configured")

        try:
            public_ref = self.client.collection(PUBLIC_USER_COLLECTION).document()
            uid = public_ref.id
            location_ref = self.client.collection(USER_LOCATION_COLLECTION).document(uid)

            public_record = build_public_user_record(uid, submission)
            location_record = build_user_location_record(uid, submission, geo)

            batch = self.client.batch()
            batch.set(public_ref, _with_timestamp(public_record.to_document()))
            batch.set(location_ref, _with_timestamp(location_record.to_document()))
            await batch.commit()
        except Exception as e:
            logger.error("lead.persist_failed", error_type=type(e).__name__, error=str(e))
            raise PersistenceError(f"Lead batch write failed: {e}") from e

        logger.info("lead.persisted", uid=uid, zip=submission.zip)
        return uid
