from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

_NON_DIGITS = re.compile(r"[^0-9]+")

# Checkbox and consent inputs post the literal "yes" when ticked.
_CHECKED = "yes"


@dataclass(frozen=True)
class NormalizedLeadForm:
    name: str = ""
    email: str = ""
    phone: str = ""
    project: str = ""
    zip: str = ""
    ready_to_hire: bool = False
    urgent: bool = False
    budget_text: str = ""
    budget_digits: str = ""
    consent: bool = False

    @property
    def budget(self) -> Optional[int]:
        if not self.budget_digits:
            return None
        return int(self.budget_digits)


def _text(form: Mapping[str, Any], key: str) -> str:
    value = form.get(key)
    if value is None:
        return ""
    return str(value).strip()


def _checked(form: Mapping[str, Any], key: str) -> bool:
    return form.get(key) == _CHECKED


def extract_digits(raw: str) -> str:
    return _NON_DIGITS.sub("", raw)


def normalize_email(email: Optional[str]) -> str:
    if not email:
        return ""
    return email.strip().lower()


def normalize_lead_form(form: Mapping[str, Any]) -> NormalizedLeadForm:
    """Reshape raw form fields into a candidate lead. Never fails."""
    budget_text = _text(form, "budgetText")
    return NormalizedLeadForm(
        name=_text(form, "name"),
        email=normalize_email(_text(form, "email")),
        phone=_text(form, "phone"),
        project=_text(form, "project"),
        zip=_text(form, "zip"),
        ready_to_hire=_checked(form, "readyToHire"),
        urgent=_checked(form, "urgent"),
        budget_text=budget_text,
        budget_digits=extract_digits(budget_text),
        consent=_checked(form, "concent"),
    )
