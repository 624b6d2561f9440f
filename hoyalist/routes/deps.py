from __future__ import annotations

from fastapi import Request

from hoyalist.core.config import settings
from hoyalist.services.geocoding import GeocoderClient
from hoyalist.services.lead_store import LeadPersister
from hoyalist.services.redirects import AppStoreLinks


def get_geocoder(request: Request) -> GeocoderClient:
    # Set up in the application lifespan.
    return request.app.state.geocoder


def get_lead_persister(request: Request) -> LeadPersister:
    return request.app.state.lead_persister


def get_app_store_links() -> AppStoreLinks:
    return AppStoreLinks(
        android_package=settings.android_package,
        ios_app_id=settings.ios_app_id,
        ios_store_url=settings.ios_store_url,
        fallback_url=settings.landing_path,
    )
