# hoyalist/services/__init__.py
"""
Business logic services organized by domain functionality.
"""

from hoyalist.services.geocoding import GeocoderClient, GeoResult, parse_geocode_response
from hoyalist.services.lead_store import LeadPersister
from hoyalist.services.lead_submission import LeadSubmissionResult, submit_lead
from hoyalist.services.normalization import NormalizedLeadForm, normalize_lead_form
from hoyalist.services.redirects import AppStoreLinks, resolve_download_redirect, resolve_go_redirect
from hoyalist.services.validation import validate_lead_form

__all__ = [
    # Geocoding
    "GeocoderClient",
    "GeoResult",
    "parse_geocode_response",
    # Persistence
    "LeadPersister",
    # Pipeline
    "LeadSubmissionResult",
    "submit_lead",
    # Normalization / validation
    "NormalizedLeadForm",
    "normalize_lead_form",
    "validate_lead_form",
    # Redirects
    "AppStoreLinks",
    "resolve_download_redirect",
    "resolve_go_redirect",
]
