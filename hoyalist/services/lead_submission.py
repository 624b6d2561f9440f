# hoyalist/services/lead_submission.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

import sentry_sdk

from hoyalist.core.exceptions import GeocodeError, PersistenceError, ValidationError
from hoyalist.core.logging import get_structlog_logger
from hoyalist.schemas.lead import LeadSubmission
from hoyalist.services.geocoding import GeocoderClient, GeoResult
from hoyalist.services.lead_store import LeadPersister
from hoyalist.services.normalization import normalize_lead_form
from hoyalist.services.validation import validate_lead_form

logger = get_structlog_logger(__name__)


@dataclass(frozen=True)
class LeadSubmissionResult:
    uid: str
    submission: LeadSubmission
    geo: GeoResult

    @property
    def zip(self) -> str:
        return self.submission.zip


async def submit_lead(
    *,
    form: Mapping[str, Any],
    geocoder: GeocoderClient,
    persister: LeadPersister,
) -> LeadSubmissionResult:
    """
    Normalize, validate, geocode and store one lead form.

    Raises ValidationError before any I/O, GeocodeError before any write,
    and PersistenceError when the batch write fails.
    """
    try:
        submission = validate_lead_form(normalize_lead_form(form))
    except ValidationError as e:
        logger.info("lead.validation_failed", kind=e.kind.value)
        raise

    try:
        geo = await geocoder.geocode_zip(submission.zip)
    except GeocodeError as e:
        logger.error("geocode.failed", code=e.code, error=e.message, zip=submission.zip)
        sentry_sdk.capture_exception(e)
        raise

    logger.info("geocode.resolved", zip=submission.zip, town=geo.town, state=geo.state)

    try:
        uid = await persister.persist(submission, geo)
    except PersistenceError as e:
        sentry_sdk.capture_exception(e)
        raise

    return LeadSubmissionResult(uid=uid, submission=submission, geo=geo)
