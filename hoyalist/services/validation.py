"""Ordered, fail-fast validation of normalized lead forms."""
from __future__ import annotations

import re
from typing import Optional

from hoyalist.core.exceptions import ValidationError, ValidationErrorKind
from hoyalist.schemas.lead import LeadSubmission
from hoyalist.services.normalization import NormalizedLeadForm

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]{2,}$", re.IGNORECASE)
_ZIP_PATTERN = re.compile(r"^\d{5}$", re.ASCII)
_E164_PATTERN = re.compile(r"^\+[1-9]\d{9,14}$", re.ASCII)

# Firestore integers are signed 64-bit
MAX_BUDGET = 2**63 - 1

MESSAGES = {
    ValidationErrorKind.MISSING_REQUIRED: "Please provide name, email, ZIP code, and project description.",
    ValidationErrorKind.INVALID_EMAIL: "Please enter a valid email address (example: name@email.com).",
    ValidationErrorKind.CONSENT_REQUIRED: "Please check the consent box to submit your request.",
    ValidationErrorKind.INVALID_ZIP: "Please enter a 5-digit ZIP code (example: 06119).",
    ValidationErrorKind.INVALID_PHONE: "If you add a phone number, please use this format: +18885551234.",
    ValidationErrorKind.INVALID_BUDGET: "If you add a budget, please use numbers only (example: 2500).",
}


def _fail(kind: ValidationErrorKind) -> ValidationError:
    return ValidationError(kind, MESSAGES[kind])


def validate_email(email: Optional[str]) -> bool:
    """Validate email format."""
    if not email:
        return False
    return bool(_EMAIL_PATTERN.match(email))


def validate_zip_code(zip_code: Optional[str]) -> bool:
    """Validate a 5-digit US ZIP code."""
    if not zip_code:
        return False
    return bool(_ZIP_PATTERN.match(zip_code))


def validate_phone_number(phone: Optional[str]) -> bool:
    """Validate an E.164 phone number."""
    if not phone:
        return False
    return bool(_E164_PATTERN.match(phone))


def parse_budget(budget_text: str, budget_digits: str) -> Optional[int]:
    """Return the budget, ``None`` when none was given.

    Raises ValidationError when text was entered but holds no usable number,
    or when the number does not fit a stored 64-bit integer.
    """
    if not budget_text:
        return None
    if not budget_digits:
        raise _fail(ValidationErrorKind.INVALID_BUDGET)
    try:
        budget = int(budget_digits)
    except ValueError:
        # int() refuses digit strings past the interpreter's conversion limit
        raise _fail(ValidationErrorKind.INVALID_BUDGET)
    if budget > MAX_BUDGET:
        raise _fail(ValidationErrorKind.INVALID_BUDGET)
    return budget


def validate_lead_form(form: NormalizedLeadForm) -> LeadSubmission:
    """
    Run the field checks in order and stop at the first failure.

    The order decides which single message a submitter sees: required fields,
    email, consent, ZIP, phone, budget.
    """
    if not (form.name and form.email and form.project and form.zip):
        raise _fail(ValidationErrorKind.MISSING_REQUIRED)

    if not validate_email(form.email):
        raise _fail(ValidationErrorKind.INVALID_EMAIL)

    if not form.consent:
        raise _fail(ValidationErrorKind.CONSENT_REQUIRED)

    if not validate_zip_code(form.zip):
        raise _fail(ValidationErrorKind.INVALID_ZIP)

    if form.phone and not validate_phone_number(form.phone):
        raise _fail(ValidationErrorKind.INVALID_PHONE)

    budget = parse_budget(form.budget_text, form.budget_digits)

    return LeadSubmission(
        name=form.name,
        email=form.email,
        phone=form.phone,
        project=form.project,
        zip=form.zip,
        ready_to_hire=form.ready_to_hire,
        urgent=form.urgent,
        budget=budget,
        consent=form.consent,
    )
